"""
Deterministic finite automaton aggregate.

An Automaton is the 5-tuple (Q, Σ, δ, q0, F) where Q is the state set,
Σ the alphabet, δ: Q × Σ → Q a partial transition function, q0 the initial
state and F the set of accepting states.

Initial and accepting membership live here only; State objects carry just
their name.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, Optional

from dfakit.config import MAX_SEARCH_DEPTH
from dfakit.core.alphabet import Alphabet
from dfakit.core.transitions import TransitionTable
from dfakit.core.types import EvaluationResult, FailureKind, State, TraceStep

logger = logging.getLogger(__name__)


def _name(state: State | str) -> str:
    return state.name if isinstance(state, State) else state


class Automaton:
    """Deterministic finite acceptor with partial δ."""

    def __init__(
        self,
        states: Iterable[State | str] = (),
        alphabet: Alphabet | Iterable[str] | None = None,
        transitions: dict[tuple[str, str], str] | None = None,
        initial_state: State | str | None = None,
        final_states: Iterable[State | str] = (),
    ):
        """
        Build an automaton, optionally pre-populated.

        Pre-population goes through the same checked mutators as incremental
        construction, so a reference to an unknown state or symbol raises
        ValueError here instead of being dropped.

        Args:
            states: State objects or names.
            alphabet: Alphabet instance (kept, not copied) or iterable of symbols.
            transitions: Mapping (source, symbol) -> target.
            initial_state: Starting state (must be in states).
            final_states: Accepting states (must be in states).
        """
        self._states: dict[str, State] = {}
        if isinstance(alphabet, Alphabet):
            self._alphabet = alphabet
        else:
            self._alphabet = Alphabet(alphabet or ())
        self._transitions = TransitionTable()
        # δ only references symbols of Σ.
        self._alphabet.on_remove(self._transitions.remove_symbol)
        self._initial: Optional[str] = None
        self._finals: set[str] = set()

        for state in states:
            self.add_state(state)
        for (source, symbol), target in (transitions or {}).items():
            if not self.add_transition(source, symbol, target):
                raise ValueError(f"invalid transition: ({source}, {symbol}) -> {target}")
        if initial_state is not None and not self.set_initial_state(initial_state):
            raise ValueError(f"initial_state {_name(initial_state)!r} not in states")
        for state in final_states:
            if not self.add_final_state(state):
                raise ValueError(f"final state {_name(state)!r} not in states")

    # ------------------------------------------------------------------
    # Read-only projections
    # ------------------------------------------------------------------

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def transitions(self) -> TransitionTable:
        return self._transitions

    @property
    def states(self) -> tuple[State, ...]:
        return tuple(sorted(self._states.values()))

    @property
    def state_names(self) -> tuple[str, ...]:
        return tuple(sorted(self._states))

    @property
    def initial_state(self) -> Optional[State]:
        return None if self._initial is None else self._states[self._initial]

    @property
    def final_states(self) -> frozenset[State]:
        return frozenset(self._states[name] for name in self._finals)

    @property
    def final_state_names(self) -> tuple[str, ...]:
        return tuple(sorted(self._finals))

    def get_state(self, name: str) -> Optional[State]:
        return self._states.get(name)

    def has_state(self, state: State | str) -> bool:
        return _name(state) in self._states

    def is_initial(self, state: State | str) -> bool:
        return self._initial is not None and _name(state) == self._initial

    def is_final(self, state: State | str) -> bool:
        return _name(state) in self._finals

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def add_state(self, state: State | str) -> bool:
        """Add a state. Returns False if a state with that name already exists."""
        if not isinstance(state, State):
            state = State(state)
        if state.name in self._states:
            return False
        self._states[state.name] = state
        return True

    def remove_state(self, state: State | str) -> bool:
        """Remove a state together with its transitions and initial/final membership."""
        name = _name(state)
        if name not in self._states:
            return False
        del self._states[name]
        if self._initial == name:
            self._initial = None
        self._finals.discard(name)
        self._transitions.remove_state(name)
        return True

    def clear_states(self) -> None:
        """Drop every state, which also drops δ, q0 and F."""
        self._states.clear()
        self._transitions.clear()
        self._initial = None
        self._finals.clear()

    def set_initial_state(self, state: State | str) -> bool:
        """Make state the unique initial state, replacing any previous one."""
        name = _name(state)
        if name not in self._states:
            return False
        self._initial = name
        return True

    def clear_initial_state(self) -> None:
        self._initial = None

    def add_final_state(self, state: State | str) -> bool:
        name = _name(state)
        if name not in self._states:
            return False
        self._finals.add(name)
        return True

    def remove_final_state(self, state: State | str) -> bool:
        name = _name(state)
        if name not in self._finals:
            return False
        self._finals.remove(name)
        return True

    def set_final_states(self, states: Iterable[State | str]) -> bool:
        """Replace F. All-or-nothing: an unknown state leaves F unchanged."""
        names = {_name(state) for state in states}
        if not names.issubset(self._states):
            return False
        self._finals = names
        return True

    def clear_final_states(self) -> None:
        self._finals.clear()

    def add_transition(self, source: State | str, symbol: str, target: State | str) -> bool:
        """
        Set δ(source, symbol) = target, overwriting any previous target.

        Returns False without mutating if either state is unknown or the
        symbol is not in the alphabet.
        """
        src, dst = _name(source), _name(target)
        if src not in self._states or dst not in self._states:
            return False
        if symbol not in self._alphabet:
            return False
        self._transitions.set(src, symbol, dst)
        return True

    def remove_transition(self, source: State | str, symbol: str) -> bool:
        return self._transitions.remove(_name(source), symbol)

    def remove_symbol(self, symbol: str) -> bool:
        """Remove symbol from Σ together with every transition labelled by it."""
        return self._alphabet.remove(symbol)

    def next_state(self, source: State | str, symbol: str) -> Optional[str]:
        return self._transitions.get(_name(source), symbol)

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------

    def is_valid(self) -> bool:
        """
        True iff q0 is set and Q, Σ and F are all non-empty.

        Totality of δ is not required; see is_total().
        """
        return (
            self._initial is not None
            and bool(self._states)
            and not self._alphabet.is_empty()
            and bool(self._finals)
        )

    def missing_transitions(self) -> list[tuple[str, str]]:
        """(state, symbol) pairs with no transition, sorted."""
        return [
            (name, symbol)
            for name in sorted(self._states)
            for symbol in self._alphabet
            if not self._transitions.has(name, symbol)
        ]

    def is_total(self) -> bool:
        return bool(self._states) and not self.missing_transitions()

    # ------------------------------------------------------------------
    # Acceptance
    # ------------------------------------------------------------------

    def evaluate(self, word: str) -> EvaluationResult:
        """
        Run word from the initial state.

        Args:
            word: Input string; each character is one symbol.

        Returns:
            EvaluationResult. A missing transition stops the walk and the
            result keeps the steps consumed so far.

        Time Complexity: O(|word|)
        """
        if self._initial is None:
            return EvaluationResult(
                accepted=False,
                message="no initial state defined",
                failure=FailureKind.NO_INITIAL_STATE,
            )

        invalid = self._alphabet.invalid_symbols(word)
        if invalid:
            return EvaluationResult(
                accepted=False,
                message=f"word contains symbols outside the alphabet: {invalid}",
                failure=FailureKind.INVALID_SYMBOL,
            )

        current = self._initial
        trace: list[TraceStep] = []
        for position, symbol in enumerate(word):
            target = self._transitions.get(current, symbol)
            if target is None:
                return EvaluationResult(
                    accepted=False,
                    message=(
                        f"no transition from state {current} on symbol "
                        f"'{symbol}' at position {position}"
                    ),
                    trace=tuple(trace),
                    start_state=self._initial,
                    failure=FailureKind.NO_TRANSITION,
                )
            trace.append(TraceStep(current, symbol, target))
            current = target

        accepted = current in self._finals
        if accepted:
            message = f"word accepted; final state {current}"
        else:
            message = f"word rejected; final state {current} is not accepting"
        return EvaluationResult(
            accepted=accepted,
            message=message,
            trace=tuple(trace),
            start_state=self._initial,
        )

    def accepts(self, word: str) -> bool:
        return self.evaluate(word).accepted

    # ------------------------------------------------------------------
    # Shortest accepted words
    # ------------------------------------------------------------------

    def live_states(self) -> frozenset[str]:
        """States from which some accepting state is reachable (F included)."""
        predecessors: dict[str, set[str]] = {name: set() for name in self._states}
        for (source, _symbol), target in self._transitions.items():
            predecessors[target].add(source)

        live = set(self._finals)
        queue = deque(self._finals)
        while queue:
            state = queue.popleft()
            for prev in predecessors[state]:
                if prev not in live:
                    live.add(prev)
                    queue.append(prev)
        return frozenset(live)

    def shortest_accepted_words(self, limit: int, max_depth: int = MAX_SEARCH_DEPTH) -> list[str]:
        """
        Up to `limit` shortest accepted words, ordered by (length, word).

        Breadth-first search over (prefix, state) pairs starting from
        ("", q0). Prefixes are only extended while shorter than max_depth, so
        longer accepted words are never returned and the result may hold
        fewer than `limit` words even for an infinite language.

        Returns:
            Sorted list without duplicates; empty if the automaton is not valid.
        """
        if limit <= 0 or not self.is_valid():
            return []

        symbols = list(self._alphabet)
        live = self.live_states()
        found: list[str] = []
        collected: set[str] = set()
        visited: set[tuple[str, str]] = set()
        queue = deque([("", self._initial)])
        expanded = 0

        while queue and len(found) < limit:
            word, state = queue.popleft()
            if (word, state) in visited:
                continue
            visited.add((word, state))

            if state in self._finals and word not in collected:
                collected.add(word)
                found.append(word)

            if len(word) >= max_depth:
                continue
            expanded += 1
            for symbol in symbols:
                target = self._transitions.get(state, symbol)
                if target is not None and target in live:
                    queue.append((word + symbol, target))

        logger.debug(
            "shortest-word search: %d found, %d prefixes expanded, limit=%d",
            len(found),
            expanded,
            limit,
        )
        found.sort(key=lambda w: (len(w), w))
        return found[:limit]

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def copy(self) -> Automaton:
        return Automaton(
            states=self.states,
            alphabet=list(self._alphabet),
            transitions=self._transitions.as_dict(),
            initial_state=self._initial,
            final_states=self._finals,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Automaton):
            return NotImplemented
        return (
            set(self._states) == set(other._states)
            and self._alphabet == other._alphabet
            and self._transitions == other._transitions
            and self._initial == other._initial
            and self._finals == other._finals
        )

    __hash__ = None

    def __len__(self) -> int:
        """Return number of states."""
        return len(self._states)

    def __repr__(self) -> str:
        return (
            f"Automaton(|Q|={len(self._states)}, |Σ|={len(self._alphabet)}, "
            f"q0={self._initial}, |F|={len(self._finals)}, |δ|={len(self._transitions)})"
        )

    def __str__(self) -> str:
        lines = [
            "Automaton:",
            f"  states: {{{', '.join(self.state_names)}}}",
            f"  alphabet: {self._alphabet}",
            f"  initial state: {self._initial if self._initial is not None else '-'}",
            f"  final states: {{{', '.join(self.final_state_names)}}}",
            "  transitions:",
        ]
        for (source, symbol), target in self._transitions.items():
            lines.append(f"    {source} --{symbol}--> {target}")
        return "\n".join(lines)
