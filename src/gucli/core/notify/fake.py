"""Fake Notifier implementation for testing."""

from gucli.core.notify.abc import Notifier


class FakeNotifier(Notifier):
    """In-memory notifier that records sent notifications.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(self, *, available: bool = True, accept: bool = True) -> None:
        """Create FakeNotifier.

        Args:
            available: Value returned by is_available()
            accept: Value returned by send()
        """
        self._available = available
        self._accept = accept
        self._sent: list[tuple[str, str]] = []

    @property
    def sent(self) -> list[tuple[str, str]]:
        """Get the (summary, body) of every send() call.

        This property is for test assertions only.
        """
        return self._sent

    def is_available(self) -> bool:
        return self._available

    def send(self, summary: str, body: str) -> bool:
        self._sent.append((summary, body))
        return self._accept
