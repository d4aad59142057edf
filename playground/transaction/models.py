from dataclasses import dataclass
from enum import Enum


class FieldName(str, Enum):
    """Transaction fields, in the order they are displayed."""

    SENDER = "sender"
    RECEIVER = "receiver"
    AMOUNT = "amount"


FIELD_ORDER: tuple[FieldName, ...] = (
    FieldName.SENDER,
    FieldName.RECEIVER,
    FieldName.AMOUNT,
)


@dataclass(frozen=True)
class TransactionInput:
    """Raw user-provided transaction text (not yet validated)."""

    sender: str = ""
    receiver: str = ""
    amount: str = ""

    def value_of(self, field_name: FieldName) -> str:
        return getattr(self, field_name.value)
