"""Bridge from the logging module into the rotating log."""

import logging

from gucli.core.log.rotating import RotatingLog

_LEVEL_TAGS = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
    logging.CRITICAL: "ERROR",
}


class RotatingLogHandler(logging.Handler):
    """logging.Handler that appends each record as one line of a RotatingLog."""

    def __init__(self, log: RotatingLog, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._log = log

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
        except Exception:  # noqa: BLE001 - logging.Handler contract
            self.handleError(record)
            return
        self._log.append(message, tag=_LEVEL_TAGS.get(record.levelno, record.levelname))


def configure_logging(log: RotatingLog, level: int = logging.INFO) -> RotatingLogHandler:
    """Route `gucli.*` loggers into the rotating log.

    Safe to call more than once: an existing RotatingLogHandler on the
    `gucli` logger is replaced, not duplicated.
    """
    package_logger = logging.getLogger("gucli")
    for existing in list(package_logger.handlers):
        if isinstance(existing, RotatingLogHandler):
            package_logger.removeHandler(existing)
    handler = RotatingLogHandler(log)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return handler
