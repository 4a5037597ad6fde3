"""Application context with dependency injection."""

import tempfile
from dataclasses import dataclass
from pathlib import Path

from gucli.core.app_config import AppConfig
from gucli.core.executor.abc import Executor
from gucli.core.executor.real import RealExecutor
from gucli.core.log.handler import configure_logging
from gucli.core.log.rotating import RotatingLog
from gucli.core.notify.abc import Notifier
from gucli.core.notify.real import NotifySendNotifier
from gucli.core.registry.registry import CommandRegistry
from gucli.core.registry.store import CommandStore, RealCommandStore
from gucli.core.time.abc import Time
from gucli.core.time.real import RealTime


@dataclass(frozen=True)
class GucliContext:
    """Immutable context holding all dependencies for gucli operations.

    Created once at the entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    config: AppConfig
    registry: CommandRegistry
    executor: Executor
    notifier: Notifier
    log: RotatingLog
    time: Time

    @staticmethod
    def for_test(
        *,
        config: AppConfig | None = None,
        store: CommandStore | None = None,
        executor: Executor | None = None,
        notifier: Notifier | None = None,
        log: RotatingLog | None = None,
        time: Time | None = None,
    ) -> "GucliContext":
        """Create test context with fakes for every unspecified dependency.

        Args:
            config: AppConfig. If None, settings rooted in a fresh temporary
                directory; pass AppConfig.for_dir(tmp_path) to inspect files
            store: Command document store. If None, an empty FakeCommandStore.
            executor: If None, a FakeExecutor returning empty successes.
            notifier: If None, an available FakeNotifier.
            log: If None, a RotatingLog at config.log_path.
            time: If None, a FakeTime.

        Example:
            >>> ctx = GucliContext.for_test(
            ...     config=AppConfig.for_dir(tmp_path),
            ...     store=FakeCommandStore(DEFAULT_DOCUMENT),
            ...     executor=FakeExecutor(outcomes={"ls": Success("a b", 0.01)}),
            ... )
        """
        from gucli.core.executor.fake import FakeExecutor
        from gucli.core.notify.fake import FakeNotifier
        from gucli.core.registry.store import FakeCommandStore
        from gucli.core.time.fake import FakeTime

        if config is None:
            config = AppConfig.for_dir(Path(tempfile.mkdtemp(prefix="gucli-test-")))
        if store is None:
            store = FakeCommandStore()
        if executor is None:
            executor = FakeExecutor()
        if notifier is None:
            notifier = FakeNotifier()
        if log is None:
            log = RotatingLog(config.log_path, config.log_capacity)
        if time is None:
            time = FakeTime()

        return GucliContext(
            config=config,
            registry=CommandRegistry(store),
            executor=executor,
            notifier=notifier,
            log=log,
            time=time,
        )


def create_context(config: AppConfig | None = None) -> GucliContext:
    """Create production context with real implementations.

    Also routes the `gucli` loggers into the rotating log, so internal
    diagnostics land next to execution records.

    Args:
        config: Settings to use; resolved from the home directory and
            environment when None

    Raises:
        ConfigLoadError: If environment overrides are invalid
    """
    if config is None:
        config = AppConfig.from_env()

    time = RealTime()
    log = RotatingLog(config.log_path, config.log_capacity)
    configure_logging(log)

    return GucliContext(
        config=config,
        registry=CommandRegistry(RealCommandStore(config.commands_path)),
        executor=RealExecutor(
            time,
            poll_interval_seconds=config.poll_interval_seconds,
            grace_seconds=config.grace_seconds,
        ),
        notifier=NotifySendNotifier(app_name=config.app_name),
        log=log,
        time=time,
    )
