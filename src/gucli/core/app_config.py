"""Application configuration constructed once at startup.

Every path and limit the core needs is resolved here and passed down through
GucliContext. No other module looks up the home directory on its own.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from gucli.core.errors import ConfigLoadError

COMMANDS_FILENAME = "commands.toml"
LOG_FILENAME = "gucli.log"


@dataclass(frozen=True)
class AppConfig:
    """Immutable application settings.

    Attributes:
        config_dir: Directory holding the command document and the log
        commands_path: Path to the TOML command document
        log_path: Path to the rotating log file
        log_capacity: Maximum number of lines kept in the log
        timeout_seconds: Wall-clock budget for one command execution
        poll_interval_seconds: How often the executor checks the child process
        grace_seconds: Time allowed after SIGTERM before SIGKILL
        help_timeout_seconds: Budget for each help lookup candidate (man pages are slow)
        max_display_chars: Raw output is clamped to this length before rendering
        max_notification_body: Notification bodies are clamped to this length
        app_name: Application name passed to the desktop notifier
    """

    config_dir: Path
    commands_path: Path
    log_path: Path
    log_capacity: int = 100
    timeout_seconds: float = 0.5
    poll_interval_seconds: float = 0.1
    grace_seconds: float = 0.1
    help_timeout_seconds: float = 5.0
    max_display_chars: int = 30_000
    max_notification_body: int = 200
    app_name: str = "gucli"

    @staticmethod
    def for_dir(config_dir: Path, **overrides: object) -> "AppConfig":
        """Build a config whose files live under config_dir.

        Args:
            config_dir: Directory for commands.toml and gucli.log
            **overrides: Any other AppConfig field to replace

        Returns:
            AppConfig with default limits unless overridden
        """
        return AppConfig(
            config_dir=config_dir,
            commands_path=config_dir / COMMANDS_FILENAME,
            log_path=config_dir / LOG_FILENAME,
            **overrides,  # type: ignore[arg-type]
        )

    @staticmethod
    def from_env(home: Path | None = None) -> "AppConfig":
        """Resolve the production config from the home directory and environment.

        Recognized variables:
            GUCLI_CONFIG_DIR: replaces ~/.config/gucli
            GUCLI_TIMEOUT_MS: execution timeout in milliseconds
            GUCLI_LOG_LINES: log capacity in lines

        Raises:
            ConfigLoadError: If a numeric override is not a positive integer
        """
        base = home if home is not None else Path.home()
        config_dir_env = os.environ.get("GUCLI_CONFIG_DIR")
        if config_dir_env:
            config_dir = Path(config_dir_env).expanduser()
        else:
            config_dir = base / ".config" / "gucli"

        overrides: dict[str, object] = {}
        timeout_ms = _positive_int_from_env("GUCLI_TIMEOUT_MS")
        if timeout_ms is not None:
            overrides["timeout_seconds"] = timeout_ms / 1000
        log_lines = _positive_int_from_env("GUCLI_LOG_LINES")
        if log_lines is not None:
            overrides["log_capacity"] = log_lines

        return AppConfig.for_dir(config_dir, **overrides)


def _positive_int_from_env(name: str) -> int | None:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    if not raw.strip().isdigit() or int(raw) <= 0:
        raise ConfigLoadError(f"{name} must be a positive integer, got {raw!r}")
    return int(raw)
