"""Fake Time implementation for testing.

FakeTime tracks sleep() calls without actually sleeping. Each sleep advances
the fake monotonic clock by the slept amount, so loops that compare elapsed
time against a budget terminate deterministically.
"""

from gucli.core.time.abc import Time


class FakeTime(Time):
    """In-memory fake implementation that tracks calls without sleeping.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(self, start: float = 0.0) -> None:
        """Create FakeTime with empty call tracking.

        Args:
            start: Initial reading of the fake monotonic clock
        """
        self._now = start
        self._sleep_calls: list[float] = []

    @property
    def sleep_calls(self) -> list[float]:
        """Get the list of sleep() calls that were made.

        This property is for test assertions only.
        """
        return self._sleep_calls

    def sleep(self, seconds: float) -> None:
        """Track sleep call and advance the fake clock."""
        self._sleep_calls.append(seconds)
        self._now += seconds

    def monotonic(self) -> float:
        return self._now
