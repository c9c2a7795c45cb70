"""
Test core/types.py dataclasses with validation.
"""

import dataclasses

import pytest

from dfakit.core.types import EvaluationResult, FailureKind, State, TraceStep


# ============================================================================
# State Tests
# ============================================================================


class TestStateValid:
    """Valid State construction and value semantics."""

    def test_state_minimal(self):
        s = State("q0")
        assert s.name == "q0"
        assert str(s) == "q0"

    def test_state_equality_by_name(self):
        assert State("q1") == State("q1")
        assert State("q1") != State("q2")
        assert hash(State("q1")) == hash(State("q1"))

    def test_state_ordering_by_name(self):
        states = [State("q2"), State("q0"), State("q1")]
        assert [s.name for s in sorted(states)] == ["q0", "q1", "q2"]

    def test_state_is_immutable(self):
        s = State("q0")
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.name = "q1"

    def test_state_has_no_role_flags(self):
        """Initial/final roles live on the Automaton only."""
        s = State("q0")
        assert not hasattr(s, "is_initial")
        assert not hasattr(s, "is_final")


class TestStateValidation:
    """State name constraints."""

    def test_state_empty_name_raises(self):
        with pytest.raises(ValueError, match="empty"):
            State("")

    def test_state_surrounding_whitespace_raises(self):
        with pytest.raises(ValueError, match="whitespace"):
            State(" q0")

    @pytest.mark.parametrize("name", ['q"0', "q,0", "q[0", "q]0"])
    def test_state_delimiter_chars_raise(self, name):
        with pytest.raises(ValueError, match="contain"):
            State(name)

    def test_state_non_string_raises(self):
        with pytest.raises(TypeError, match="name"):
            State(0)

    @pytest.mark.parametrize("name", ["q\n1", "q\x0b1", "q\t1", "q\u20281", "q\r1"])
    def test_state_inner_line_breaks_raise(self, name):
        with pytest.raises(ValueError, match="whitespace"):
            State(name)

    def test_state_inner_space_allowed(self):
        assert State("start state").name == "start state"


# ============================================================================
# EvaluationResult Tests
# ============================================================================


class TestEvaluationResult:
    """Derived properties of EvaluationResult."""

    def test_result_without_walk(self):
        r = EvaluationResult(accepted=False, message="no initial state defined",
                             failure=FailureKind.NO_INITIAL_STATE)
        assert r.states == ()
        assert r.final_state is None
        assert r.path is None
        assert r.consumed == 0

    def test_result_with_trace(self):
        trace = (TraceStep("q0", "a", "q1"), TraceStep("q1", "b", "q2"))
        r = EvaluationResult(accepted=True, message="ok", trace=trace, start_state="q0")
        assert r.states == ("q0", "q1", "q2")
        assert r.final_state == "q2"
        assert r.path == "q0 -a-> q1 -b-> q2"
        assert r.consumed == 2

    def test_empty_word_result(self):
        r = EvaluationResult(accepted=True, message="ok", start_state="q0")
        assert r.states == ("q0",)
        assert r.final_state == "q0"
        assert r.path == "q0"

    def test_accepted_with_failure_raises(self):
        with pytest.raises(ValueError, match="failure"):
            EvaluationResult(accepted=True, message="x", failure=FailureKind.NO_TRANSITION)

    def test_trace_without_start_state_raises(self):
        with pytest.raises(ValueError, match="start_state"):
            EvaluationResult(accepted=False, message="x", trace=(TraceStep("q0", "a", "q1"),))

    def test_trace_step_str(self):
        assert str(TraceStep("q0", "a", "q1")) == "q0 -a-> q1"
