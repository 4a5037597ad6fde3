import click

from gucli.cli.ensure import Ensure
from gucli.cli.output import machine_output, user_output
from gucli.core.context import GucliContext


@click.command("list")
@click.pass_obj
def list_cmd(ctx: GucliContext) -> None:
    """Show configured commands in menu order."""
    command_set = Ensure.commands_loaded(ctx)
    if len(command_set) == 0:
        user_output("No commands configured")
        return

    for cmd in command_set:
        notify = "" if cmd.notify_on_success else click.style("  (sn: off)", dim=True)
        icon = f"{cmd.icon} " if cmd.icon else ""
        machine_output(f"{cmd.id:>3}  [{cmd.shell}] {icon}{cmd.invocation}{notify}")
