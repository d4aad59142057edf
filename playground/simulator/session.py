from dataclasses import replace

from playground.logging.logger import Log
from playground.simulator.models import SimulationResult
from playground.simulator.simulator import Simulator
from playground.transaction.models import FieldName, TransactionInput
from playground.validation.models import FieldError


class SimulationSession:
    """Form state for an interactive run: inputs, field errors, last result."""

    def __init__(self, simulator: Simulator) -> None:
        self._simulator = simulator
        self._inputs = TransactionInput()
        self._errors: dict[FieldName, FieldError] = {}
        self._result: SimulationResult | None = None

    @property
    def inputs(self) -> TransactionInput:
        return self._inputs

    @property
    def errors(self) -> dict[FieldName, FieldError]:
        return dict(self._errors)

    @property
    def result(self) -> SimulationResult | None:
        return self._result

    @property
    def has_result(self) -> bool:
        return self._result is not None

    @property
    def submit_label(self) -> str:
        return "Re-Run Simulation" if self.has_result else "Run Simulation"

    def update_field(self, field_name: FieldName, value: str) -> None:
        """Store new text for a field and clear its pending error."""
        self._inputs = replace(self._inputs, **{field_name.value: value})
        self._errors.pop(field_name, None)

    def submit(self) -> SimulationResult:
        """Validate current inputs and, when valid, resolve all profiles."""
        result = self._simulator.run(self._inputs)
        self._errors = dict(result.validation.field_errors)
        if result.is_valid:
            self._result = result
        else:
            Log.info(
                f"Submission rejected ({len(self._errors)} field errors), keeping previous result"
            )
        return result

    def reset(self) -> None:
        Log.info("Session reset")
        self._inputs = TransactionInput()
        self._errors = {}
        self._result = None
