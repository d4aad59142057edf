from dataclasses import dataclass, field

from playground.policy.models import RenderDescriptor
from playground.transaction.models import TransactionInput
from playground.validation.models import ValidationResult


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of one simulation run."""

    transaction: TransactionInput
    validation: ValidationResult
    descriptors: tuple[RenderDescriptor, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return self.validation.is_valid

    def rows(self) -> list[tuple[int, tuple[RenderDescriptor, ...]]]:
        """Group descriptors per profile id, keeping their order."""
        grouped: dict[int, list[RenderDescriptor]] = {}
        for descriptor in self.descriptors:
            grouped.setdefault(descriptor.profile_id, []).append(descriptor)
        return [(profile_id, tuple(items)) for profile_id, items in grouped.items()]
