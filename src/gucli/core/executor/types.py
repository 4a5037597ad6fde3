"""Structured result of one command execution."""

from dataclasses import dataclass
from typing import Literal

FailureKind = Literal["spawn", "runtime"]


@dataclass(frozen=True)
class Success:
    """Process exited with status 0.

    Attributes:
        text: Captured stdout
        duration_seconds: Wall-clock time from spawn to exit
    """

    text: str
    duration_seconds: float


@dataclass(frozen=True)
class Failure:
    """Process could not be started or exited with a non-zero status.

    Attributes:
        text: Captured stderr, or the spawn error message
        duration_seconds: Wall-clock time spent
        kind: "spawn" if the interpreter never started, "runtime" otherwise
        exit_code: Exit status for runtime failures, None for spawn failures
    """

    text: str
    duration_seconds: float
    kind: FailureKind = "runtime"
    exit_code: int | None = None


@dataclass(frozen=True)
class TimedOut:
    """Process exceeded its wall-clock budget and was terminated.

    Output produced before termination is discarded.
    """

    elapsed_seconds: float

    @property
    def duration_seconds(self) -> float:
        return self.elapsed_seconds

    @property
    def text(self) -> str:
        return f"Command timed out after {self.elapsed_seconds:.2f}s"


ExecutionOutcome = Success | Failure | TimedOut
