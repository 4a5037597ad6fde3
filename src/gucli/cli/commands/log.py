import click

from gucli.cli.output import machine_output, user_output
from gucli.core.context import GucliContext


@click.command("log")
@click.option("-n", "--lines", default=20, show_default=True, type=click.IntRange(min=1))
@click.pass_obj
def log_cmd(ctx: GucliContext, lines: int) -> None:
    """Print the most recent log records."""
    tail = ctx.log.tail(lines)
    if not tail:
        user_output(f"Log is empty ({ctx.log.path})")
        return
    for line in tail:
        machine_output(line)
