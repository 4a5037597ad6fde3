"""Clock and sleep abstraction so the executor poll loop can be tested."""

from gucli.core.time.abc import Time
from gucli.core.time.fake import FakeTime
from gucli.core.time.real import RealTime

__all__ = ["FakeTime", "RealTime", "Time"]
