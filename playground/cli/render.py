"""Terminal rendering of simulation results with rich."""

from rich.table import Table
from rich.text import Text

from playground.policy.catalog import get_profile
from playground.policy.models import PrivacyProfile, RenderDescriptor, VisibilityState
from playground.simulator.models import SimulationResult
from playground.transaction.models import FIELD_ORDER
from playground.validation.models import ValidationResult

_STATE_STYLES = {
    VisibilityState.VISIBLE: "bold",
    VisibilityState.OBFUSCATED: "cyan",
    VisibilityState.ENCRYPTED: "blue italic",
}


def comparison_table(result: SimulationResult) -> Table:
    """Four-profile comparison: one row per profile, one column per field."""
    table = Table(title="Privacy Level Comparison", show_lines=True)
    table.add_column("Privacy Level", ratio=2)
    for field_name in FIELD_ORDER:
        table.add_column(field_name.value.capitalize(), ratio=1, justify="center")

    for profile_id, descriptors in result.rows():
        profile = get_profile(profile_id)
        table.add_row(_profile_cell(profile), *(_data_cell(d) for d in descriptors))
    return table


def profiles_table(profiles: tuple[PrivacyProfile, ...]) -> Table:
    table = Table(title="Privacy Profiles")
    table.add_column("ID", justify="right")
    table.add_column("Profile")
    table.add_column("Description")
    for field_name in FIELD_ORDER:
        table.add_column(field_name.value.capitalize())
    for profile in profiles:
        table.add_row(
            str(profile.id),
            _profile_cell(profile),
            profile.description,
            *(profile.spec_for(f).visibility_state.value for f in FIELD_ORDER),
        )
    return table


def error_lines(validation: ValidationResult) -> list[str]:
    return [
        f"{name.value}: {error.message}"
        for name, error in validation.field_errors.items()
    ]


def _profile_cell(profile: PrivacyProfile) -> Text:
    cell = Text(profile.title, style="bold")
    if profile.subtitle:
        cell.append(f"\n({profile.subtitle})", style="italic")
    return cell


def _data_cell(descriptor: RenderDescriptor) -> Text:
    return Text(descriptor.display_text, style=_STATE_STYLES[descriptor.visibility_state])
