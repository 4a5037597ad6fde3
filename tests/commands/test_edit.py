"""Tests for add, remove and move."""

from click.testing import CliRunner

from gucli.cli.cli import cli
from gucli.core.context import GucliContext
from gucli.core.registry import DEFAULT_DOCUMENT, FakeCommandStore, Shell, parse_command_set

THREE_COMMANDS = """\
[[command]]
command = "a"

[[command]]
command = "b"

[[command]]
command = "c"
"""


def _saved_invocations(store: FakeCommandStore) -> list[str]:
    assert store.content is not None
    return parse_command_set(store.content).invocations


def test_add_appends_command() -> None:
    store = FakeCommandStore(DEFAULT_DOCUMENT)
    ctx = GucliContext.for_test(store=store)

    result = CliRunner().invoke(
        cli, ["add", "uptime", "--shell", "zsh", "--icon", "⏱", "--no-sn"], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert "Added command 1: uptime" in result.output
    saved = parse_command_set(store.content or "")
    assert saved[1].shell == Shell.ZSH
    assert saved[1].icon == "⏱"
    assert saved[1].notify_on_success is False


def test_add_duplicate_is_rejected_without_saving() -> None:
    store = FakeCommandStore(DEFAULT_DOCUMENT)
    ctx = GucliContext.for_test(store=store)

    result = CliRunner().invoke(cli, ["add", "hostname -A"], obj=ctx)

    assert result.exit_code == 1
    assert "must be unique" in result.output
    assert store.writes == []


def test_add_oversized_icon_is_rejected() -> None:
    store = FakeCommandStore(DEFAULT_DOCUMENT)
    ctx = GucliContext.for_test(store=store)

    result = CliRunner().invoke(cli, ["add", "ls", "--icon", "123456789"], obj=ctx)

    assert result.exit_code == 1
    assert "Invalid command at index 1" in result.output
    assert store.writes == []


def test_remove_command() -> None:
    store = FakeCommandStore(THREE_COMMANDS)
    ctx = GucliContext.for_test(store=store)

    result = CliRunner().invoke(cli, ["remove", "1"], obj=ctx)

    assert result.exit_code == 0
    assert "Removed command 1: b" in result.output
    assert _saved_invocations(store) == ["a", "c"]


def test_remove_out_of_range() -> None:
    store = FakeCommandStore(THREE_COMMANDS)
    ctx = GucliContext.for_test(store=store)

    result = CliRunner().invoke(cli, ["remove", "5"], obj=ctx)

    assert result.exit_code == 1
    assert "No command at index 5 (3 configured)" in result.output
    assert store.writes == []


def test_move_up_and_down() -> None:
    store = FakeCommandStore(THREE_COMMANDS)
    ctx = GucliContext.for_test(store=store)
    runner = CliRunner()

    assert runner.invoke(cli, ["move", "2", "up"], obj=ctx).exit_code == 0
    assert _saved_invocations(store) == ["a", "c", "b"]

    assert runner.invoke(cli, ["move", "0", "down"], obj=ctx).exit_code == 0
    assert _saved_invocations(store) == ["c", "a", "b"]


def test_move_past_edge_fails() -> None:
    store = FakeCommandStore(THREE_COMMANDS)
    ctx = GucliContext.for_test(store=store)

    result = CliRunner().invoke(cli, ["move", "0", "up"], obj=ctx)

    assert result.exit_code == 1
    assert "Command 0 cannot move up" in result.output
    assert store.writes == []
