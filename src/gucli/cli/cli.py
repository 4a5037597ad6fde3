import click

from gucli.cli.commands.edit import add_cmd, move_cmd, remove_cmd
from gucli.cli.commands.init import init_cmd
from gucli.cli.commands.list_cmd import list_cmd
from gucli.cli.commands.log import log_cmd
from gucli.cli.commands.man import man_cmd
from gucli.cli.commands.reset import reset_cmd
from gucli.cli.commands.run import run_cmd
from gucli.cli.commands.run_test import run_test_cmd
from gucli.cli.ensure import Ensure
from gucli.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gucli")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Run your curated shell commands with a hard timeout."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = Ensure.succeeds(create_context)


cli.add_command(add_cmd)
cli.add_command(init_cmd)
cli.add_command(list_cmd)
cli.add_command(log_cmd)
cli.add_command(man_cmd)
cli.add_command(move_cmd)
cli.add_command(remove_cmd)
cli.add_command(reset_cmd)
cli.add_command(run_cmd)
cli.add_command(run_test_cmd)


def main() -> None:
    """CLI entry point used by the `gucli` console script."""
    cli()
