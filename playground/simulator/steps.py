from playground.logging.logger import Log
from playground.policy.resolver import PolicyResolver
from playground.simulator.pipeline import SimulationContext, SimulationStep
from playground.validation.validator import validate


class ValidateStep(SimulationStep):
    def run(self, context: SimulationContext) -> SimulationContext:
        context.validation = validate(context.transaction)
        if not context.validation.is_valid:
            Log.debug(
                f"Validation failed for fields: "
                f"{sorted(name.value for name in context.validation.field_errors)}"
            )
        return context


class ResolveStep(SimulationStep):
    def __init__(self, resolver: PolicyResolver) -> None:
        self._resolver = resolver

    def run(self, context: SimulationContext) -> SimulationContext:
        if context.validation is None or not context.validation.is_valid:
            raise ValueError("SimulationContext.validation must be valid before resolving")
        context.descriptors = self._resolver.resolve(
            context.transaction, validation=context.validation
        )
        Log.debug(f"Resolved {len(context.descriptors)} render descriptors")
        return context
