from __future__ import annotations

from dfakit.core.automaton import Automaton


def make_div3_automaton() -> Automaton:
    """Binary numbers divisible by three (read most significant bit first)."""
    return Automaton(
        states=("q0", "q1", "q2"),
        alphabet=("0", "1"),
        transitions={
            ("q0", "0"): "q0",
            ("q0", "1"): "q1",
            ("q1", "0"): "q2",
            ("q1", "1"): "q0",
            ("q2", "0"): "q1",
            ("q2", "1"): "q2",
        },
        initial_state="q0",
        final_states=("q0",),
    )


def make_ends_with_ab_automaton() -> Automaton:
    """Words over {a, b} ending in "ab"."""
    return Automaton(
        states=("q0", "q1", "q2"),
        alphabet=("a", "b"),
        transitions={
            ("q0", "a"): "q1",
            ("q0", "b"): "q0",
            ("q1", "a"): "q1",
            ("q1", "b"): "q2",
            ("q2", "a"): "q1",
            ("q2", "b"): "q0",
        },
        initial_state="q0",
        final_states=("q2",),
    )
