import click

from gucli.cli.ensure import Ensure
from gucli.cli.reporting import emit_run_report
from gucli.core.context import GucliContext
from gucli.core.registry.types import CommandSet, CommandSpec
from gucli.core.runner import run_command


def _resolve_target(command_set: CommandSet, target: str) -> CommandSpec:
    """Find a command by menu index or by its exact invocation."""
    match = command_set.find(target)
    if match is not None:
        return match
    Ensure.invariant(target.isdigit(), f"No command matching '{target}'")
    index = int(target)
    Ensure.valid_index(command_set, index)
    return command_set[index]


@click.command("run")
@click.argument("target")
@click.option("--timeout-ms", type=click.IntRange(min=1), help="Override the execution timeout.")
@click.option("--html", is_flag=True, help="Print the result as HTML markup.")
@click.pass_obj
def run_cmd(ctx: GucliContext, target: str, timeout_ms: int | None, html: bool) -> None:
    """Run a configured command.

    TARGET is the command's index as shown by `gucli list`, or its exact
    command string.
    """
    command_set = Ensure.commands_loaded(ctx)
    command = _resolve_target(command_set, target)
    timeout = timeout_ms / 1000 if timeout_ms is not None else None
    report = run_command(ctx, command, timeout_seconds=timeout)
    emit_run_report(report, html=html)
