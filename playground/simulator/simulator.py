from playground.policy.resolver import PolicyResolver
from playground.simulator.models import SimulationResult
from playground.simulator.pipeline import SimulationContext
from playground.simulator.steps import ResolveStep, ValidateStep
from playground.transaction.models import TransactionInput


class Simulator:
    """Runs one simulation: validate -> resolve.

    Resolution is skipped entirely when validation fails.
    """

    def __init__(self, validate_step: ValidateStep, resolve_step: ResolveStep) -> None:
        self._validate_step = validate_step
        self._resolve_step = resolve_step

    def run(self, transaction: TransactionInput) -> SimulationResult:
        context = self._validate_step.run(SimulationContext(transaction=transaction))
        validation = context.validation
        if validation is None:
            raise ValueError("ValidateStep must set SimulationContext.validation")
        if validation.is_valid:
            context = self._resolve_step.run(context)
        return SimulationResult(
            transaction=transaction,
            validation=validation,
            descriptors=context.descriptors,
        )


def build_simulator() -> Simulator:
    """Build a Simulator over the built-in profile catalog."""
    return Simulator(
        validate_step=ValidateStep(),
        resolve_step=ResolveStep(PolicyResolver()),
    )
