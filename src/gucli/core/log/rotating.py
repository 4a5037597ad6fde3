"""Size-bounded, append-only text log with oldest-first eviction.

Records are kept in an in-memory ring buffer (collections.deque with maxlen)
seeded from disk. Every append is a critical section:

1. a threading.Lock serializes writers inside this process
2. an fcntl.flock on `<log>.lock` serializes the flush across processes
3. the buffer is re-seeded from disk while holding the flock, so records
   written by another process since our last flush are never overwritten
4. the full buffer is written to a temp file and moved over the log with
   os.replace, so readers never see a half-written file
"""

import fcntl
import os
import sys
import tempfile
import threading
from collections import deque
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path

from gucli.core.log.records import LogRecord, flatten


class RotatingLog:
    """Process-wide log capped at `capacity` lines."""

    def __init__(
        self,
        path: Path,
        capacity: int = 100,
        *,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Create the log and seed the buffer from an existing file.

        Args:
            path: Log file location; created on first append
            capacity: Maximum number of lines kept
            now: Clock used for record timestamps
        """
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._path = path
        self._lock_path = path.with_name(path.name + ".lock")
        self._capacity = capacity
        self._now = now
        self._lock = threading.Lock()
        self._lines: deque[str] = deque(maxlen=capacity)
        # Records whose flush failed; written with the next successful append
        self._pending: list[str] = []
        with self._lock:
            try:
                self._reload()
            except OSError as e:
                print(f"gucli: failed to read log {self._path}: {e}", file=sys.stderr)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, message: str, tag: str = "INFO") -> bool:
        """Add one record and rewrite the file.

        Never raises for I/O problems: logging must not abort the caller. A
        failed flush is reported on stderr and the record stays in memory,
        so the next successful flush still contains it.

        Returns:
            True if the file was written, False if the flush failed
        """
        line = LogRecord(timestamp=self._now(), tag=tag, message=flatten(message)).render()
        with self._lock:
            self._pending.append(line)
            try:
                with self._file_lock():
                    self._reload()
                    merged = deque(self._lines, maxlen=self._capacity)
                    merged.extend(self._pending)
                    self._flush(merged)
            except OSError as e:
                print(f"gucli: failed to write log {self._path}: {e}", file=sys.stderr)
                return False
            self._lines = merged
            self._pending.clear()
        return True

    def lines(self) -> list[str]:
        """Current log lines, oldest first."""
        with self._lock:
            merged = deque(self._lines, maxlen=self._capacity)
            merged.extend(self._pending)
            return list(merged)

    def records(self) -> list[LogRecord]:
        """Current log content parsed into records; unparseable lines are skipped."""
        parsed = (LogRecord.parse(line) for line in self.lines())
        return [record for record in parsed if record is not None]

    def tail(self, count: int) -> list[str]:
        lines = self.lines()
        if count <= 0:
            return []
        return lines[-count:]

    @contextmanager
    def _file_lock(self) -> Iterator[None]:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._lock_path.open("a") as handle:
            fcntl.flock(handle, fcntl.LOCK_EX)
            try:
                yield
            finally:
                fcntl.flock(handle, fcntl.LOCK_UN)

    def _reload(self) -> None:
        """Replace the buffer with the file's content.

        Raises:
            OSError: If the file exists but cannot be read
        """
        try:
            content = self._path.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            content = ""
        self._lines.clear()
        self._lines.extend(line for line in content.splitlines() if line)

    def _flush(self, lines: deque[str]) -> None:
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write("\n".join(lines))
                tmp.write("\n")
            os.replace(tmp_name, self._path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
