"""Commands that edit the command list.

Every edit loads the current set, applies one change, validates the whole
result and writes it back with CommandRegistry.save().
"""

import click

from gucli.cli.ensure import Ensure
from gucli.cli.output import user_output
from gucli.core.context import GucliContext
from gucli.core.registry.registry import validate_command_set
from gucli.core.registry.types import CommandSet, CommandSpec, Shell


def _save_edited(ctx: GucliContext, edited: CommandSet) -> None:
    Ensure.succeeds(lambda: validate_command_set(edited))
    Ensure.succeeds(lambda: ctx.registry.save(edited))


@click.command("add")
@click.argument("invocation")
@click.option(
    "--shell",
    type=click.Choice([s.value for s in Shell]),
    default=Shell.SH.value,
    show_default=True,
)
@click.option("--icon", default="", help="Label shown before the command (up to 8 characters).")
@click.option("--sn/--no-sn", default=True, help="Notify on success.")
@click.pass_obj
def add_cmd(ctx: GucliContext, invocation: str, shell: str, icon: str, sn: bool) -> None:
    """Append a command to the list."""
    command_set = Ensure.commands_loaded(ctx)
    edited = command_set.append(
        CommandSpec(
            id=len(command_set),
            shell=Shell(shell),
            invocation=invocation,
            icon=icon,
            notify_on_success=sn,
        )
    )
    _save_edited(ctx, edited)
    user_output(f"Added command {len(command_set)}: {invocation}")


@click.command("remove")
@click.argument("index", type=int)
@click.pass_obj
def remove_cmd(ctx: GucliContext, index: int) -> None:
    """Delete the command at INDEX."""
    command_set = Ensure.commands_loaded(ctx)
    Ensure.valid_index(command_set, index)
    removed = command_set[index]
    _save_edited(ctx, command_set.remove(index))
    user_output(f"Removed command {index}: {removed.invocation}")


@click.command("move")
@click.argument("index", type=int)
@click.argument("direction", type=click.Choice(["up", "down"]))
@click.pass_obj
def move_cmd(ctx: GucliContext, index: int, direction: str) -> None:
    """Move the command at INDEX one position up or down."""
    command_set = Ensure.commands_loaded(ctx)
    Ensure.valid_index(command_set, index)
    if direction == "up":
        edited = command_set.move_up(index)
    else:
        edited = command_set.move_down(index)
    Ensure.invariant(edited != command_set, f"Command {index} cannot move {direction}")
    _save_edited(ctx, edited)
    user_output(f"Moved command {index} {direction}")
