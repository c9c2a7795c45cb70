from __future__ import annotations

from dfakit.core.transitions import TransitionTable


def test_set_and_get() -> None:
    table = TransitionTable()
    table.set("q0", "a", "q1")

    assert table.get("q0", "a") == "q1"
    assert table.has("q0", "a")
    assert table.size() == 1


def test_missing_transition_is_absent() -> None:
    table = TransitionTable()
    assert table.get("q0", "a") is None
    assert not table.has("q0", "a")
    assert table.is_empty()


def test_second_set_overwrites_target() -> None:
    table = TransitionTable()
    table.set("q0", "a", "q1")
    table.set("q0", "a", "q2")

    assert table.get("q0", "a") == "q2"
    assert len(table) == 1


def test_remove() -> None:
    table = TransitionTable()
    table.set("q0", "a", "q1")

    assert table.remove("q0", "a") is True
    assert table.remove("q0", "a") is False
    assert not table.has("q0", "a")


def test_remove_state_drops_incoming_and_outgoing() -> None:
    table = TransitionTable()
    table.set("q0", "a", "q1")
    table.set("q1", "a", "q2")
    table.set("q2", "b", "q0")
    table.set("q2", "a", "q2")

    removed = table.remove_state("q1")

    assert removed == 2
    assert table.items() == [(("q2", "a"), "q2"), (("q2", "b"), "q0")]


def test_remove_symbol() -> None:
    table = TransitionTable()
    table.set("q0", "a", "q1")
    table.set("q0", "b", "q0")

    assert table.remove_symbol("a") == 1
    assert list(table) == [("q0", "b")]


def test_items_sorted_by_source_then_symbol() -> None:
    table = TransitionTable()
    table.set("q1", "b", "q0")
    table.set("q0", "b", "q1")
    table.set("q1", "a", "q1")
    table.set("q0", "a", "q0")

    assert [key for key, _ in table.items()] == [
        ("q0", "a"),
        ("q0", "b"),
        ("q1", "a"),
        ("q1", "b"),
    ]


def test_targets_from() -> None:
    table = TransitionTable()
    table.set("q0", "b", "q2")
    table.set("q0", "a", "q1")
    table.set("q1", "a", "q0")

    assert table.targets_from("q0") == {"a": "q1", "b": "q2"}
    assert table.targets_from("q9") == {}


def test_clear_and_equality() -> None:
    left = TransitionTable()
    right = TransitionTable()
    left.set("q0", "a", "q1")
    right.set("q0", "a", "q1")
    assert left == right

    left.clear()
    assert left != right
    assert left.size() == 0
