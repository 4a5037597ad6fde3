"""Error types raised by gucli core operations.

Only configuration and registry problems are raised. Command failures
(spawn errors, non-zero exits, timeouts) are returned as ExecutionOutcome
variants so a misbehaving user command never aborts the caller.
"""


class GucliError(Exception):
    """Base class for all errors surfaced to the caller."""


class ConfigLoadError(GucliError):
    """The command document or application settings could not be read.

    Fatal at startup: there is no safe command set to fall back to.
    """


class CommandValidationError(GucliError):
    """A command document entry failed validation.

    Attributes:
        index: Zero-based position of the first offending entry
        reason: Human-readable description of the problem
    """

    def __init__(self, index: int, reason: str) -> None:
        self.index = index
        self.reason = reason
        super().__init__(f"Invalid command at index {index}: {reason}")
