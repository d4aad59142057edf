"""Structural validation of raw transaction input, independent of any policy."""

import re

from playground.logging.logger import Log
from playground.transaction.models import FieldName, TransactionInput
from playground.validation.models import FieldError, ValidationErrorKind, ValidationResult

_ADDRESS_LENGTH = 42
_ADDRESS_PREFIXES = ("0x", "0X")
_HEX_BODY_RE = re.compile(r"[0-9A-Fa-f]{40}")

_MALFORMED_ADDRESS_MESSAGE = (
    "Invalid EVM address format (must be 42 characters, starting with 0x)"
)
_REQUIRED_MESSAGES = {
    FieldName.SENDER: "Sender address is required",
    FieldName.RECEIVER: "Receiver address is required",
    FieldName.AMOUNT: "Transaction amount is required",
}


def is_valid_address(value: str) -> bool:
    """Return True for a 42-char account id: ``0x``/``0X`` followed by 40 hex digits."""
    if len(value) != _ADDRESS_LENGTH:
        return False
    if not value.startswith(_ADDRESS_PREFIXES):
        return False
    return _HEX_BODY_RE.fullmatch(value[2:]) is not None


def validate(transaction: TransactionInput) -> ValidationResult:
    """Check every field of *transaction* and collect all failures.

    Never raises. Fields are checked independently, so a malformed sender
    and a missing amount are reported together.
    """
    errors: dict[FieldName, FieldError] = {}
    for field_name in (FieldName.SENDER, FieldName.RECEIVER):
        error = _check_address(field_name, transaction.value_of(field_name))
        if error is not None:
            errors[field_name] = error
    amount_error = _check_amount(transaction.amount)
    if amount_error is not None:
        errors[FieldName.AMOUNT] = amount_error

    if Log.enabled("debug"):
        failed = [f"{name.value}={error.kind.value}" for name, error in errors.items()]
        Log.debug(f"Validated transaction: {', '.join(failed) or 'ok'}")
    return ValidationResult(field_errors=errors)


def _check_address(field_name: FieldName, value: str) -> FieldError | None:
    if not value:
        return _missing(field_name)
    if not is_valid_address(value):
        return FieldError(ValidationErrorKind.MALFORMED_ADDRESS, _MALFORMED_ADDRESS_MESSAGE)
    return None


def _check_amount(value: str) -> FieldError | None:
    # Amount is display text only; any non-blank value is accepted.
    if not value.strip():
        return _missing(FieldName.AMOUNT)
    return None


def _missing(field_name: FieldName) -> FieldError:
    return FieldError(ValidationErrorKind.MISSING_FIELD, _REQUIRED_MESSAGES[field_name])
