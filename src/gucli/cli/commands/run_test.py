import click

from gucli.cli.ensure import Ensure
from gucli.cli.reporting import emit_run_report
from gucli.core.context import GucliContext
from gucli.core.registry.types import CommandSpec, Shell
from gucli.core.runner import run_command


@click.command("test")
@click.argument("invocation")
@click.option(
    "--shell",
    type=click.Choice([s.value for s in Shell]),
    default=Shell.SH.value,
    show_default=True,
)
@click.option("--sn/--no-sn", default=True, help="Notify on success.")
@click.option("--timeout-ms", type=click.IntRange(min=1), help="Override the execution timeout.")
@click.option("--html", is_flag=True, help="Print the result as HTML markup.")
@click.pass_obj
def run_test_cmd(
    ctx: GucliContext,
    invocation: str,
    shell: str,
    sn: bool,
    timeout_ms: int | None,
    html: bool,
) -> None:
    """Try a command before adding it to the list."""
    Ensure.invariant(bool(invocation.strip()), "Field `command` cannot be empty")
    command = CommandSpec(
        id=0,
        shell=Shell(shell),
        invocation=invocation,
        notify_on_success=sn,
    )
    timeout = timeout_ms / 1000 if timeout_ms is not None else None
    report = run_command(ctx, command, timeout_seconds=timeout)
    emit_run_report(report, html=html)
