"""Time operations abstraction for testing.

The executor supervises child processes with a cooperative poll loop, which
needs both a sleep and a monotonic clock. Both go through this ABC so tests
can drive the loop without waiting.
"""

from abc import ABC, abstractmethod


class Time(ABC):
    """Abstract time operations for dependency injection."""

    @abstractmethod
    def sleep(self, seconds: float) -> None:
        """Sleep for specified number of seconds.

        Args:
            seconds: Number of seconds to sleep
        """
        ...

    @abstractmethod
    def monotonic(self) -> float:
        """Return a monotonic clock reading in seconds."""
        ...
