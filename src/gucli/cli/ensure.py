"""CLI error handling utilities with styled output.

All errors use a red "Error:" prefix for visual consistency and exit with
status 1.
"""

from collections.abc import Callable
from typing import TypeVar

import click

from gucli.cli.output import user_output
from gucli.core.context import GucliContext
from gucli.core.errors import GucliError
from gucli.core.registry.types import CommandSet

T = TypeVar("T")


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)

    @staticmethod
    def succeeds(operation: Callable[[], T]) -> T:
        """Run operation, turning any GucliError into a styled error and exit.

        Raises:
            SystemExit: If operation raised GucliError (with exit code 1)
        """
        try:
            return operation()
        except GucliError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from e

    @staticmethod
    def commands_loaded(ctx: GucliContext) -> CommandSet:
        """Load the command set or exit with the registry's error."""
        return Ensure.succeeds(ctx.registry.load)

    @staticmethod
    def valid_index(command_set: CommandSet, index: int) -> None:
        Ensure.invariant(
            0 <= index < len(command_set),
            f"No command at index {index} ({len(command_set)} configured)",
        )
