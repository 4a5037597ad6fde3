"""Real time implementation using the time module."""

import time

from gucli.core.time.abc import Time


class RealTime(Time):
    """Production implementation using time.sleep() and time.monotonic()."""

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)

    def monotonic(self) -> float:
        return time.monotonic()
