"""Storage backends for the command document.

The registry parses and renders TOML; a CommandStore only moves text in and
out of persistent storage. RealCommandStore uses the filesystem,
FakeCommandStore keeps the document in memory for tests.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class CommandStore(ABC):
    """Abstract persistence for the raw command document."""

    @abstractmethod
    def exists(self) -> bool:
        """Return True if a document has been persisted."""
        ...

    @abstractmethod
    def read_text(self) -> str:
        """Return the persisted document.

        Raises:
            OSError: If the document cannot be read
        """
        ...

    @abstractmethod
    def write_text(self, content: str) -> None:
        """Replace the persisted document wholesale.

        Raises:
            OSError: If the document cannot be written
        """
        ...

    @abstractmethod
    def location(self) -> str:
        """Human-readable location used in messages."""
        ...


class RealCommandStore(CommandStore):
    """Command document stored in a TOML file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def read_text(self) -> str:
        return self._path.read_text(encoding="utf-8")

    def write_text(self, content: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(content, encoding="utf-8")

    def location(self) -> str:
        return str(self._path)


class FakeCommandStore(CommandStore):
    """In-memory command document for tests.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(self, content: str | None = None) -> None:
        """Create store, optionally pre-populated with a document.

        Args:
            content: Initial document text, or None for "no file yet"
        """
        self._content = content
        self._writes: list[str] = []

    @property
    def content(self) -> str | None:
        return self._content

    @property
    def writes(self) -> list[str]:
        """Documents passed to write_text(), in order. For test assertions only."""
        return self._writes

    def exists(self) -> bool:
        return self._content is not None

    def read_text(self) -> str:
        if self._content is None:
            raise FileNotFoundError("fake command document does not exist")
        return self._content

    def write_text(self, content: str) -> None:
        self._writes.append(content)
        self._content = content

    def location(self) -> str:
        return "<memory>"
