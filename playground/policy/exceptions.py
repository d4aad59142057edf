class PolicyError(Exception):
    """Base exception for all policy-related errors."""


class UnvalidatedTransactionError(PolicyError):
    """Raised when resolve() is handed input that did not pass validation."""


class UnknownProfileError(PolicyError):
    """Raised when a profile id is not part of the catalog."""
