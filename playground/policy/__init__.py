from playground.policy.catalog import PRIVACY_PROFILES, get_profile
from playground.policy.resolver import PolicyResolver, resolve

__all__ = ["PRIVACY_PROFILES", "PolicyResolver", "get_profile", "resolve"]
