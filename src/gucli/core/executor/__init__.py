"""Bounded process executor subpackage."""

from gucli.core.executor.abc import Executor
from gucli.core.executor.fake import FakeExecutor
from gucli.core.executor.real import RealExecutor
from gucli.core.executor.types import ExecutionOutcome, Failure, Success, TimedOut

__all__ = [
    "ExecutionOutcome",
    "Executor",
    "Failure",
    "FakeExecutor",
    "RealExecutor",
    "Success",
    "TimedOut",
]
