"""Desktop notification abstraction."""

from abc import ABC, abstractmethod


class Notifier(ABC):
    """External notifier collaborator.

    Implementations include:
    - NotifySendNotifier: libnotify's notify-send for production
    - FakeNotifier: in-memory for testing
    """

    @abstractmethod
    def is_available(self) -> bool:
        """Return True if notifications can be delivered at all."""
        ...

    @abstractmethod
    def send(self, summary: str, body: str) -> bool:
        """Display a notification.

        Args:
            summary: One-line title
            body: Notification text

        Returns:
            True if the notifier accepted the notification
        """
        ...
