"""
Pytest configuration and fixtures for dfakit tests.

Provides the example automata and builder sessions at various wizard stages.
"""

import matplotlib
import pytest

matplotlib.use("Agg")


@pytest.fixture
def ends_with_ab():
    """
    Automaton over {a, b} accepting words that end in "ab".

    q0 initial, q2 final, total transition function.
    """
    from dfakit.presets import make_ends_with_ab_automaton

    return make_ends_with_ab_automaton()


@pytest.fixture
def div3():
    """Binary multiples of three; q0 is both initial and final."""
    from dfakit.presets import make_div3_automaton

    return make_div3_automaton()


@pytest.fixture
def session():
    """Fresh builder session with default limits."""
    from dfakit.session import BuilderSession

    return BuilderSession()


@pytest.fixture
def finals_session():
    """
    Session driven up to FINALS_SET: alphabet {a, b}, states q0..q2,
    initial q0, final {q2}, no transitions yet.
    """
    from dfakit.session import BuilderSession

    s = BuilderSession()
    assert s.define_alphabet("a,b")
    assert s.define_states(3)
    assert s.set_initial_state("q0")
    assert s.set_final_states({"q2"})
    return s
