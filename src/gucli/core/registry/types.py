"""Command definitions and ordered command sets."""

from dataclasses import dataclass, replace
from enum import StrEnum

MAX_ICON_LENGTH = 8


class Shell(StrEnum):
    """Interpreters a command may be run with."""

    SH = "sh"
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"


@dataclass(frozen=True)
class CommandSpec:
    """One user-defined shell invocation plus display metadata.

    Attributes:
        id: Position of the command in its set (renumbered on reorder)
        shell: Interpreter used to run the invocation
        invocation: Shell command string, passed verbatim to `<shell> -c`
        icon: Short label shown before the invocation in menus
        notify_on_success: Notify on success too; failures always notify
    """

    id: int
    shell: Shell
    invocation: str
    icon: str = ""
    notify_on_success: bool = True


def new_command(id: int) -> CommandSpec:
    """Default row added by the settings editor."""
    return CommandSpec(id=id, shell=Shell.SH, invocation="new", icon="", notify_on_success=True)


@dataclass(frozen=True)
class CommandSet:
    """Ordered, immutable sequence of commands.

    Order is significant: it drives menu order. Edits return a new set with
    ids renumbered to match positions.
    """

    commands: tuple[CommandSpec, ...] = ()

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self):
        return iter(self.commands)

    def __getitem__(self, index: int) -> CommandSpec:
        return self.commands[index]

    @property
    def invocations(self) -> list[str]:
        return [cmd.invocation for cmd in self.commands]

    def find(self, invocation: str) -> CommandSpec | None:
        """Return the command with this exact invocation, if present."""
        for cmd in self.commands:
            if cmd.invocation == invocation:
                return cmd
        return None

    def append(self, command: CommandSpec) -> "CommandSet":
        return _renumbered([*self.commands, command])

    def remove(self, index: int) -> "CommandSet":
        """Drop the command at index. Out-of-range indexes leave the set unchanged."""
        if index < 0 or index >= len(self.commands):
            return self
        remaining = list(self.commands)
        del remaining[index]
        return _renumbered(remaining)

    def move_up(self, index: int) -> "CommandSet":
        if index <= 0 or index >= len(self.commands):
            return self
        return self._swap(index, index - 1)

    def move_down(self, index: int) -> "CommandSet":
        if index < 0 or index >= len(self.commands) - 1:
            return self
        return self._swap(index, index + 1)

    def _swap(self, a: int, b: int) -> "CommandSet":
        items = list(self.commands)
        items[a], items[b] = items[b], items[a]
        return _renumbered(items)


def _renumbered(commands: list[CommandSpec]) -> CommandSet:
    return CommandSet(tuple(replace(cmd, id=i) for i, cmd in enumerate(commands)))
