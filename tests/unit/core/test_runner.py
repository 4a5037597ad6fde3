"""Tests for run_command: execute, render, log and notify with fakes."""

from pathlib import Path

from gucli.core.app_config import AppConfig
from gucli.core.context import GucliContext
from gucli.core.executor import Failure, FakeExecutor, Success, TimedOut
from gucli.core.notify import DispatchResult, FakeNotifier
from gucli.core.registry import CommandSpec, Shell
from gucli.core.runner import format_log_entry, format_message, run_command


def _ctx(tmp_path: Path, executor: FakeExecutor, notifier: FakeNotifier | None = None):
    return GucliContext.for_test(
        config=AppConfig.for_dir(tmp_path),
        executor=executor,
        notifier=notifier if notifier is not None else FakeNotifier(),
    )


def test_success_is_reported_logged_and_notified(tmp_path: Path) -> None:
    notifier = FakeNotifier()
    ctx = _ctx(tmp_path, FakeExecutor(outcomes={"ls": Success("a b", 0.01)}), notifier)

    report = run_command(ctx, CommandSpec(0, Shell.SH, "ls"))

    assert report.ok
    assert report.message == "Ok( Command <ls> executed ), Result:\n a b"
    assert "&lt;ls&gt;" in report.display
    assert report.notification == DispatchResult.SENT
    assert notifier.sent == [("Ok( Command <ls> executed ), Result:", " a b")]
    records = ctx.log.records()
    assert [(r.tag, r.message) for r in records] == [
        ("INFO", "Command <ls> executed in 0.01s, Result: a b")
    ]


def test_quiet_success_is_logged_but_not_notified(tmp_path: Path) -> None:
    notifier = FakeNotifier()
    ctx = _ctx(tmp_path, FakeExecutor(default=Success("x", 0.2)), notifier)

    report = run_command(ctx, CommandSpec(0, Shell.SH, "date", notify_on_success=False))

    assert report.notification == DispatchResult.SKIPPED
    assert notifier.sent == []
    assert len(ctx.log.records()) == 1


def test_failure_without_stderr_reports_exit_code(tmp_path: Path) -> None:
    notifier = FakeNotifier()
    ctx = _ctx(tmp_path, FakeExecutor(default=Failure("", 0.05, exit_code=2)), notifier)

    report = run_command(ctx, CommandSpec(0, Shell.SH, "false", notify_on_success=False))

    assert not report.ok
    assert report.message == "Err( Command <false> failed ), Error:\n Exit code: 2"
    assert notifier.sent == [("Err( Command <false> failed ), Error:", " Exit code: 2")]
    record = ctx.log.records()[0]
    assert record.tag == "ERROR"
    assert record.message == "Command <false> failed (exit 2) in 0.05s, Error: Exit code: 2"


def test_timeout_is_reported_and_always_notified(tmp_path: Path) -> None:
    notifier = FakeNotifier()
    ctx = _ctx(tmp_path, FakeExecutor(default=TimedOut(0.5)), notifier)

    report = run_command(ctx, CommandSpec(0, Shell.SH, "sleep 5", notify_on_success=False))

    assert report.message == (
        "Err( Command <sleep 5> timed out ), Error:\n Command timed out after 0.50s"
    )
    assert len(notifier.sent) == 1
    assert ctx.log.records()[0].message == "Command <sleep 5> timed out after 0.50s"


def test_missing_notifier_does_not_block_result(tmp_path: Path) -> None:
    ctx = _ctx(
        tmp_path,
        FakeExecutor(default=Failure("boom", 0.01, exit_code=1)),
        FakeNotifier(available=False),
    )

    report = run_command(ctx, CommandSpec(0, Shell.SH, "boom"))

    assert report.notification == DispatchResult.UNAVAILABLE
    assert report.message.endswith("boom")
    assert ctx.log.records()[0].tag == "ERROR"


def test_timeout_and_shell_reach_executor(tmp_path: Path) -> None:
    executor = FakeExecutor()
    ctx = _ctx(tmp_path, executor)

    run_command(ctx, CommandSpec(0, Shell.BASH, "echo $0"))
    run_command(ctx, CommandSpec(0, Shell.SH, "echo"), timeout_seconds=2.0)

    assert executor.calls == [("echo $0", 0.5, Shell.BASH), ("echo", 2.0, Shell.SH)]


def test_log_entry_clamps_long_output() -> None:
    tag, entry = format_log_entry("yes", Success("y" * 2000, 1.0))

    assert tag == "INFO"
    assert entry == "Command <yes> executed in 1.00s, Result: " + "y" * 500


def test_spawn_failure_log_entry() -> None:
    failure = Failure("Failed to start fish: not found", 0.0, kind="spawn")

    assert format_log_entry("ls", failure) == (
        "ERROR",
        "Command <ls> could not start, Error: Failed to start fish: not found",
    )
    assert format_message("ls", failure).endswith("Failed to start fish: not found")
