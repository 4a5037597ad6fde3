import click

from gucli.cli.ensure import Ensure
from gucli.cli.output import user_output
from gucli.core.context import GucliContext


@click.command("init")
@click.pass_obj
def init_cmd(ctx: GucliContext) -> None:
    """Create the default command document if it does not exist."""
    created = Ensure.succeeds(lambda: ctx.registry.reset(force=False))
    if created:
        user_output(f"Created default command document at {ctx.registry.location}")
    else:
        user_output(f"Command document already exists at {ctx.registry.location}")
