"""Notification subpackage: notifier integrations and the dispatch gate."""

from gucli.core.notify.abc import Notifier
from gucli.core.notify.fake import FakeNotifier
from gucli.core.notify.gate import DispatchResult, compose, decide, dispatch
from gucli.core.notify.real import NotifySendNotifier

__all__ = [
    "DispatchResult",
    "FakeNotifier",
    "Notifier",
    "NotifySendNotifier",
    "compose",
    "decide",
    "dispatch",
]
