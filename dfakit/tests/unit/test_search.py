"""
Test Automaton.shortest_accepted_words (bounded breadth-first search).
"""

import pytest

from dfakit.config import MAX_SEARCH_DEPTH
from dfakit.core.automaton import Automaton


def _sorted_key(word):
    return (len(word), word)


class TestShortestWordsExample:
    """Words over {a, b} ending in "ab"."""

    def test_first_three(self, ends_with_ab):
        assert ends_with_ab.shortest_accepted_words(3) == ["ab", "aab", "bab"]

    def test_order_and_uniqueness(self, ends_with_ab):
        words = ends_with_ab.shortest_accepted_words(20)
        assert len(words) == 20
        assert words == sorted(words, key=_sorted_key)
        assert len(set(words)) == len(words)

    def test_every_word_is_accepted(self, ends_with_ab):
        for word in ends_with_ab.shortest_accepted_words(15):
            assert ends_with_ab.evaluate(word).accepted

    def test_length_four_words(self, ends_with_ab):
        words = ends_with_ab.shortest_accepted_words(7)
        assert words[3:] == ["aaab", "abab", "baab", "bbab"]


class TestShortestWordsEdgeCases:
    """Limits, invalid automata and the depth cap."""

    @pytest.mark.parametrize("limit", [0, -1])
    def test_non_positive_limit(self, ends_with_ab, limit):
        assert ends_with_ab.shortest_accepted_words(limit) == []

    def test_invalid_automaton_yields_nothing(self, ends_with_ab):
        ends_with_ab.clear_final_states()
        assert ends_with_ab.shortest_accepted_words(5) == []

    def test_empty_word_first_when_initial_final(self, div3):
        assert div3.shortest_accepted_words(4) == ["", "0", "00", "11"]

    def test_finite_language_returns_fewer_than_limit(self):
        a = Automaton(
            states=["q0", "q1", "q2", "dead"],
            alphabet="ab",
            transitions={
                ("q0", "a"): "q1",
                ("q0", "b"): "dead",
                ("q1", "b"): "q2",
                ("q1", "a"): "dead",
                ("q2", "a"): "dead",
                ("q2", "b"): "dead",
                ("dead", "a"): "dead",
                ("dead", "b"): "dead",
            },
            initial_state="q0",
            final_states=["q1", "q2"],
        )
        assert a.shortest_accepted_words(10) == ["a", "ab"]

    def test_depth_cap_excludes_longer_words(self):
        # Accepts only a^20.
        names = [f"s{i}" for i in range(21)]
        transitions = {(names[i], "a"): names[i + 1] for i in range(20)}
        a = Automaton(
            states=names,
            alphabet="a",
            transitions=transitions,
            initial_state="s0",
            final_states=["s20"],
        )
        assert a.shortest_accepted_words(5) == []

    def test_words_up_to_depth_cap_are_found(self):
        names = [f"s{i:02d}" for i in range(MAX_SEARCH_DEPTH + 1)]
        transitions = {(names[i], "a"): names[i + 1] for i in range(MAX_SEARCH_DEPTH)}
        a = Automaton(
            states=names,
            alphabet="a",
            transitions=transitions,
            initial_state=names[0],
            final_states=[names[-1]],
        )
        assert a.shortest_accepted_words(1) == ["a" * MAX_SEARCH_DEPTH]

    def test_custom_depth(self, ends_with_ab):
        words = ends_with_ab.shortest_accepted_words(100, max_depth=3)
        assert words == ["ab", "aab", "bab"]

    def test_partial_transition_function(self):
        a = Automaton(
            states=["q0", "q1"],
            alphabet="ab",
            transitions={("q0", "a"): "q1", ("q1", "a"): "q1"},
            initial_state="q0",
            final_states=["q1"],
        )
        assert a.shortest_accepted_words(3) == ["a", "aa", "aaa"]

    def test_unreachable_final_state(self):
        a = Automaton(
            states=["q0", "q1"],
            alphabet="a",
            transitions={("q0", "a"): "q0"},
            initial_state="q0",
            final_states=["q1"],
        )
        assert a.shortest_accepted_words(3) == []


def test_live_states(ends_with_ab):
    assert ends_with_ab.live_states() == frozenset({"q0", "q1", "q2"})
