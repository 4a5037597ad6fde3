"""Notification dispatch gate: whether and what to hand to the notifier."""

import logging
from enum import StrEnum

from gucli.core.executor.types import ExecutionOutcome, Success
from gucli.core.notify.abc import Notifier

logger = logging.getLogger(__name__)

DEFAULT_MAX_BODY = 200


class DispatchResult(StrEnum):
    SKIPPED = "skipped"
    SENT = "sent"
    UNAVAILABLE = "unavailable"
    REJECTED = "rejected"


def decide(outcome: ExecutionOutcome, notify_on_success: bool) -> bool:
    """Failures and timeouts always notify; successes only when opted in."""
    if isinstance(outcome, Success):
        return notify_on_success
    return True


def compose(message: str, max_body: int = DEFAULT_MAX_BODY) -> tuple[str, str]:
    """Split a message into (summary, body).

    The summary is the first line; the body is everything after it, clamped
    to max_body characters.

    Example:
        >>> compose("Ok( Command <ls> executed ), Result:\\n a b")
        ('Ok( Command <ls> executed ), Result:', ' a b')
    """
    summary, _, body = message.partition("\n")
    return summary, body[:max_body]


def dispatch(
    notifier: Notifier,
    outcome: ExecutionOutcome,
    message: str,
    *,
    notify_on_success: bool,
    max_body: int = DEFAULT_MAX_BODY,
) -> DispatchResult:
    """Send a notification for outcome if policy requires one.

    Never raises: a missing or failing notifier is logged as a warning so
    the command result still reaches the caller.
    """
    if not decide(outcome, notify_on_success):
        return DispatchResult.SKIPPED
    summary, body = compose(message, max_body)
    if not notifier.is_available():
        logger.warning("Notifier not available. Notification skipped: %s - %s", summary, body)
        return DispatchResult.UNAVAILABLE
    if not notifier.send(summary, body):
        logger.warning("Notifier rejected notification: %s", summary)
        return DispatchResult.REJECTED
    return DispatchResult.SENT
