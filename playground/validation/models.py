from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from playground.transaction.models import FieldName


class ValidationErrorKind(str, Enum):
    """Field-scoped validation failures."""

    MISSING_FIELD = "MissingField"
    MALFORMED_ADDRESS = "MalformedAddress"


@dataclass(frozen=True)
class FieldError:
    """A single failed field rule."""

    kind: ValidationErrorKind
    message: str  # shown under the input, e.g. "Sender address is required"


@dataclass(frozen=True)
class ValidationResult:
    """Per-field outcome of validating a TransactionInput."""

    field_errors: Mapping[FieldName, FieldError] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # read-only snapshot; later changes to the source dict are not seen
        object.__setattr__(self, "field_errors", MappingProxyType(dict(self.field_errors)))

    @property
    def is_valid(self) -> bool:
        return not self.field_errors

    def error_for(self, field_name: FieldName) -> FieldError | None:
        return self.field_errors.get(field_name)

    def messages(self) -> dict[str, str]:
        """Field name -> message, for display."""
        return {name.value: error.message for name, error in self.field_errors.items()}
