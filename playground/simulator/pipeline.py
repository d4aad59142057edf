from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from playground.policy.models import RenderDescriptor
from playground.transaction.models import TransactionInput
from playground.validation.models import ValidationResult


@dataclass(slots=True)
class SimulationContext:
    transaction: TransactionInput
    validation: ValidationResult | None = None
    descriptors: tuple[RenderDescriptor, ...] = field(default_factory=tuple)


class SimulationStep(ABC):
    @abstractmethod
    def run(self, context: SimulationContext) -> SimulationContext:
        raise NotImplementedError
