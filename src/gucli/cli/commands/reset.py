import click

from gucli.cli.ensure import Ensure
from gucli.cli.output import user_output
from gucli.core.context import GucliContext


@click.command("reset")
@click.option("-y", "--yes", is_flag=True, help="Do not ask for confirmation.")
@click.pass_obj
def reset_cmd(ctx: GucliContext, yes: bool) -> None:
    """Replace all commands with the built-in default."""
    if not yes:
        click.confirm(
            f"Reset {ctx.registry.location} to default? All commands will be lost",
            abort=True,
        )
    Ensure.succeeds(lambda: ctx.registry.reset(force=True))
    user_output(click.style("Settings reset to default", fg="green"))
