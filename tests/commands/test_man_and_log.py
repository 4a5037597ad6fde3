"""Tests for man and log."""

from pathlib import Path

from click.testing import CliRunner

from gucli.cli.cli import cli
from gucli.core.app_config import AppConfig
from gucli.core.context import GucliContext
from gucli.core.executor import FakeExecutor, Success

MAN_PAGE = (
    "LS(1)                User Commands                LS(1)\n"
    "NAME\n       ls - list directory contents\n"
    "       -a, --all  do not ignore entries starting with .\n"
)


def test_man_prints_help_text() -> None:
    executor = FakeExecutor(outcomes={"man -P cat ls": Success(MAN_PAGE, 0.2)})
    ctx = GucliContext.for_test(executor=executor)

    result = CliRunner().invoke(cli, ["man", "ls"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "ls - list directory contents" in result.output
    assert executor.calls[0][1] == 5.0


def test_man_html_is_enriched() -> None:
    executor = FakeExecutor(outcomes={"man -P cat ls": Success(MAN_PAGE, 0.2)})
    ctx = GucliContext.for_test(executor=executor)

    result = CliRunner().invoke(cli, ["man", "ls", "--html"], obj=ctx)

    assert result.exit_code == 0
    assert '<span class="caps">NAME</span>' in result.output
    assert '<span class="flag">--all</span>' in result.output


def test_man_accepts_multi_word_topic() -> None:
    executor = FakeExecutor(outcomes={"git help commit": Success(MAN_PAGE, 0.2)})
    ctx = GucliContext.for_test(executor=executor)

    result = CliRunner().invoke(cli, ["man", "git", "help", "commit"], obj=ctx)

    assert result.exit_code == 0
    assert [call[0] for call in executor.calls] == ["git help commit"]


def test_man_without_help_exits_1() -> None:
    ctx = GucliContext.for_test(executor=FakeExecutor())

    result = CliRunner().invoke(cli, ["man", "nope"], obj=ctx)

    assert result.exit_code == 1
    assert "No valid help found for 'nope'" in result.output


def test_log_shows_recent_records(tmp_path: Path) -> None:
    ctx = GucliContext.for_test(config=AppConfig.for_dir(tmp_path))
    for i in range(5):
        ctx.log.append(f"entry {i}")

    result = CliRunner().invoke(cli, ["log", "-n", "2"], obj=ctx)

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("INFO entry 3")
    assert lines[1].endswith("INFO entry 4")


def test_log_empty(tmp_path: Path) -> None:
    ctx = GucliContext.for_test(config=AppConfig.for_dir(tmp_path))

    result = CliRunner().invoke(cli, ["log"], obj=ctx)

    assert result.exit_code == 0
    assert "Log is empty" in result.output
