"""The four built-in privacy profiles.

Static configuration: the catalog is created once at import time and there
is no API to add, remove, or edit profiles.
"""

from playground.policy.exceptions import UnknownProfileError
from playground.policy.models import FieldSpec, PrivacyProfile, VisibilityState

_PUBLIC_ADDRESS = FieldSpec(VisibilityState.VISIBLE, "Public Address")
_PUBLIC_AMOUNT = FieldSpec(VisibilityState.VISIBLE, "Public Amount")
_HASHED_IDENTITY = FieldSpec(VisibilityState.OBFUSCATED, "Hashed Identity")
_CONFIDENTIAL_VALUE = FieldSpec(VisibilityState.ENCRYPTED, "Confidential Value")
_ENCRYPTED_DATA = FieldSpec(VisibilityState.ENCRYPTED, "Encrypted Data")
_ENCRYPTED_VALUE = FieldSpec(VisibilityState.ENCRYPTED, "Encrypted Value")

PRIVACY_PROFILES: tuple[PrivacyProfile, ...] = (
    PrivacyProfile(
        id=1,
        name="Transparency (current blockchain)",
        description="All transaction details are fully visible to anyone.",
        sender_spec=_PUBLIC_ADDRESS,
        receiver_spec=_PUBLIC_ADDRESS,
        amount_spec=_PUBLIC_AMOUNT,
    ),
    PrivacyProfile(
        id=2,
        name="Anonymity (obfuscated identity)",
        description="Identity is obscured, but the value is still public.",
        sender_spec=_HASHED_IDENTITY,
        receiver_spec=_HASHED_IDENTITY,
        amount_spec=_PUBLIC_AMOUNT,
    ),
    PrivacyProfile(
        id=3,
        name="Confidentiality (amount-hidden)",
        description="Parties are known for compliance; only the financial amount is hidden.",
        sender_spec=_PUBLIC_ADDRESS,
        receiver_spec=_PUBLIC_ADDRESS,
        amount_spec=_CONFIDENTIAL_VALUE,
    ),
    PrivacyProfile(
        id=4,
        name="Total privacy (maximum secrecy)",
        description="All transaction, identity, and value data is completely concealed.",
        sender_spec=_ENCRYPTED_DATA,
        receiver_spec=_ENCRYPTED_DATA,
        amount_spec=_ENCRYPTED_VALUE,
    ),
)

_BY_ID: dict[int, PrivacyProfile] = {profile.id: profile for profile in PRIVACY_PROFILES}


def get_profile(profile_id: int) -> PrivacyProfile:
    """Look up a profile by id.

    Raises:
        UnknownProfileError: if *profile_id* is not in the catalog.
    """
    profile = _BY_ID.get(profile_id)
    if profile is None:
        raise UnknownProfileError(
            f"Unknown privacy profile {profile_id}. Choose from: {sorted(_BY_ID)}"
        )
    return profile
