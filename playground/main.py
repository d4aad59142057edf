"""Command-line entry point for the privacy playground."""

import json
import sys
import time

import click
from rich.console import Console

from playground.cli.render import comparison_table, error_lines, profiles_table
from playground.config.settings import Settings
from playground.logging.logger import Log
from playground.policy import PRIVACY_PROFILES
from playground.simulator.models import SimulationResult
from playground.simulator.session import SimulationSession
from playground.simulator.simulator import build_simulator
from playground.transaction.models import FIELD_ORDER, FieldName, TransactionInput


@click.group()
@click.pass_context
def main(ctx: click.Context) -> None:
    """Compare how one transaction looks under four privacy levels."""
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)
    ctx.obj = settings


@main.command()
@click.option("--sender", default="", help="Sender address (0x + 40 hex digits)")
@click.option("--receiver", default="", help="Receiver address (0x + 40 hex digits)")
@click.option("--amount", default="", help='Transaction amount, e.g. "100.5 USDC"')
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default=None,
    help="Output format (defaults to OUTPUT_FORMAT setting)",
)
@click.pass_obj
def simulate(
    settings: Settings,
    sender: str,
    receiver: str,
    amount: str,
    output_format: str | None,
) -> None:
    """Validate the inputs and show every profile side by side."""
    simulator = build_simulator()
    result = simulator.run(TransactionInput(sender=sender, receiver=receiver, amount=amount))

    if not result.is_valid:
        for line in error_lines(result.validation):
            click.echo(line, err=True)
        sys.exit(1)

    if (output_format or settings.output_format) == "json":
        click.echo(json.dumps([d.to_dict() for d in result.descriptors], indent=2))
        return

    _show_results(settings, result)


@main.command()
def profiles() -> None:
    """List the built-in privacy profiles."""
    Console().print(profiles_table(PRIVACY_PROFILES))


_FIELD_PROMPTS = {
    FieldName.SENDER: "Sender address",
    FieldName.RECEIVER: "Receiver address",
    FieldName.AMOUNT: "Transaction amount",
}


@main.command()
@click.pass_obj
def interactive(settings: Settings) -> None:
    """Fill in the form field by field, re-run or reset until you quit.

    After a rejected run only the fields with errors are asked again.
    """
    session = SimulationSession(build_simulator())
    pending = list(FIELD_ORDER)
    while True:
        for field_name in pending:
            current = session.inputs.value_of(field_name)
            value = click.prompt(
                _FIELD_PROMPTS[field_name],
                default=current,
                show_default=bool(current),
            )
            session.update_field(field_name, value)

        click.echo(f"== {session.submit_label} ==")
        result = session.submit()
        if not result.is_valid:
            for line in error_lines(result.validation):
                click.echo(line, err=True)
            pending = [f for f in FIELD_ORDER if f in session.errors]
            continue

        _show_results(settings, result)
        action = click.prompt(
            f"rerun ({session.submit_label}), reset or quit",
            type=click.Choice(["rerun", "reset", "quit"]),
            default="quit",
        )
        if action == "quit":
            return
        if action == "reset":
            session.reset()
        pending = list(FIELD_ORDER)


def _show_results(settings: Settings, result: SimulationResult) -> None:
    if settings.result_delay_ms:
        time.sleep(settings.result_delay_ms / 1000)
    Console().print(comparison_table(result))


if __name__ == "__main__":
    main()
