"""Command registry subpackage.

Loads, validates and persists the ordered set of command definitions.
"""

from gucli.core.registry.registry import (
    DEFAULT_DOCUMENT,
    CommandRegistry,
    parse_command_set,
    render_command_set,
    validate_command_set,
)
from gucli.core.registry.store import CommandStore, FakeCommandStore, RealCommandStore
from gucli.core.registry.types import CommandSet, CommandSpec, Shell, new_command

__all__ = [
    "DEFAULT_DOCUMENT",
    "CommandRegistry",
    "CommandSet",
    "CommandSpec",
    "CommandStore",
    "FakeCommandStore",
    "RealCommandStore",
    "Shell",
    "new_command",
    "parse_command_set",
    "render_command_set",
    "validate_command_set",
]
