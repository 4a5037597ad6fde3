"""Rotating append-only log subpackage."""

from gucli.core.log.handler import RotatingLogHandler, configure_logging
from gucli.core.log.records import LogRecord, flatten
from gucli.core.log.rotating import RotatingLog

__all__ = ["LogRecord", "RotatingLog", "RotatingLogHandler", "configure_logging", "flatten"]
