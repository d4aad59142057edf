from dataclasses import dataclass
from enum import Enum

from playground.transaction.models import FieldName


class VisibilityState(str, Enum):
    """How a field is treated under a privacy profile."""

    VISIBLE = "VISIBLE"
    OBFUSCATED = "OBFUSCATED"
    ENCRYPTED = "ENCRYPTED"


@dataclass(frozen=True)
class FieldSpec:
    """Visibility of one field plus the placeholder shown when it is hidden."""

    visibility_state: VisibilityState
    label: str


@dataclass(frozen=True)
class PrivacyProfile:
    """One of the fixed privacy configurations."""

    id: int
    name: str
    description: str
    sender_spec: FieldSpec
    receiver_spec: FieldSpec
    amount_spec: FieldSpec

    @property
    def title(self) -> str:
        """Name before the parenthesised qualifier, e.g. ``Transparency``."""
        return self.name.split("(", 1)[0].strip()

    @property
    def subtitle(self) -> str:
        """Parenthesised qualifier without brackets, or an empty string."""
        if "(" not in self.name:
            return ""
        return self.name.split("(", 1)[1].replace(")", "").strip()

    def spec_for(self, field_name: FieldName) -> FieldSpec:
        if field_name is FieldName.SENDER:
            return self.sender_spec
        if field_name is FieldName.RECEIVER:
            return self.receiver_spec
        return self.amount_spec


@dataclass(frozen=True)
class RenderDescriptor:
    """Resolved (profile, field, state, text) tuple for the presentation layer."""

    profile_id: int
    field_name: FieldName
    visibility_state: VisibilityState
    display_text: str
    tooltip: str | None = None  # full raw value, only when visible and shortened

    def to_dict(self) -> dict[str, object]:
        return {
            "profile_id": self.profile_id,
            "field_name": self.field_name.value,
            "visibility_state": self.visibility_state.value,
            "display_text": self.display_text,
            "tooltip": self.tooltip,
        }
