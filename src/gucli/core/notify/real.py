"""notify-send based notifier."""

import logging
import shutil
import subprocess

from gucli.core.notify.abc import Notifier

logger = logging.getLogger(__name__)


class NotifySendNotifier(Notifier):
    """Production notifier using the notify-send CLI."""

    def __init__(self, app_name: str = "gucli", icon: str = "system") -> None:
        self._app_name = app_name
        self._icon = icon

    def is_available(self) -> bool:
        """Check if notify-send is in PATH using shutil.which."""
        return shutil.which("notify-send") is not None

    def send(self, summary: str, body: str) -> bool:
        cmd = [
            "notify-send",
            f"--app-name={self._app_name}",
            f"--icon={self._icon}",
            summary,
            body,
        ]
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=False, timeout=5)
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.warning("notify-send failed: %s", e)
            return False
        if result.returncode != 0:
            logger.warning(
                "notify-send exited with %d: %s", result.returncode, result.stderr.strip()
            )
            return False
        return True
