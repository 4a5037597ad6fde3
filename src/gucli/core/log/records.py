"""One line of the rotating log."""

from dataclasses import dataclass
from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


@dataclass(frozen=True)
class LogRecord:
    """Timestamped, tagged log message.

    Attributes:
        timestamp: Local time the record was created
        tag: Severity or category, e.g. INFO, WARN, ERROR
        message: Single-line message text
    """

    timestamp: datetime
    tag: str
    message: str

    def render(self) -> str:
        """Serialize as `YYYY-MM-DD HH:MM:SS.mmm TAG message`."""
        stamp = self.timestamp.strftime(TIMESTAMP_FORMAT)[:-3]
        return f"{stamp} {self.tag} {self.message}"

    @staticmethod
    def parse(line: str) -> "LogRecord | None":
        """Parse a rendered line back into a record.

        Returns None for lines that were not written by render(), such as
        hand-edited or truncated lines.
        """
        parts = line.split(" ", 3)
        if len(parts) < 3:
            return None
        try:
            timestamp = datetime.strptime(f"{parts[0]} {parts[1]}", TIMESTAMP_FORMAT)
        except ValueError:
            return None
        message = parts[3] if len(parts) == 4 else ""
        return LogRecord(timestamp=timestamp, tag=parts[2], message=message)


def flatten(message: str) -> str:
    """Collapse a multi-line message into one line."""
    return " ".join(part.strip() for part in message.splitlines() if part.strip())
