"""Tests for CommandSet edit operations."""

from gucli.core.registry import CommandSet, CommandSpec, Shell, new_command


def _set(*invocations: str) -> CommandSet:
    return CommandSet(tuple(CommandSpec(i, Shell.SH, inv) for i, inv in enumerate(invocations)))


def test_new_command_is_placeholder_row() -> None:
    cmd = new_command(3)

    assert cmd == CommandSpec(id=3, shell=Shell.SH, invocation="new", icon="", notify_on_success=True)


def test_append_renumbers() -> None:
    edited = _set("a").append(CommandSpec(99, Shell.SH, "b"))

    assert [(c.id, c.invocation) for c in edited] == [(0, "a"), (1, "b")]


def test_remove_renumbers_remaining() -> None:
    edited = _set("a", "b", "c").remove(0)

    assert [(c.id, c.invocation) for c in edited] == [(0, "b"), (1, "c")]


def test_remove_out_of_range_is_a_no_op() -> None:
    original = _set("a")

    assert original.remove(5) is original
    assert original.remove(-1) is original


def test_move_up_and_down_swap_neighbours() -> None:
    original = _set("a", "b", "c")

    assert original.move_up(2).invocations == ["a", "c", "b"]
    assert original.move_down(0).invocations == ["b", "a", "c"]
    assert [c.id for c in original.move_down(0)] == [0, 1, 2]


def test_moves_at_the_edges_leave_set_unchanged() -> None:
    original = _set("a", "b")

    assert original.move_up(0) is original
    assert original.move_down(1) is original


def test_find_matches_exact_invocation() -> None:
    original = _set("ls", "ls -la")

    found = original.find("ls -la")
    assert found is not None
    assert found.id == 1
    assert original.find("ls -l") is None
