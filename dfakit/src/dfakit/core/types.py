"""
Core types for dfakit: State, TraceStep, FailureKind, EvaluationResult.

Pure data containers with validation. No automaton logic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

# Characters the persisted format uses as delimiters.
_FORBIDDEN_NAME_CHARS = frozenset('",[]')


@dataclass(frozen=True, order=True)
class State:
    """
    A named vertex of the automaton.

    Equality, hashing and ordering use the name only. Whether a state is
    initial or accepting is owned by the Automaton, not by the State.
    """

    name: str

    def __post_init__(self):
        """Validate State name constraints."""
        if not isinstance(self.name, str):
            raise TypeError(f"name must be str, got {type(self.name)}")
        if not self.name:
            raise ValueError("name must not be empty")
        if self.name != self.name.strip():
            raise ValueError("name must not have surrounding whitespace")
        bad = sorted(_FORBIDDEN_NAME_CHARS.intersection(self.name))
        if bad:
            raise ValueError(f"name must not contain {bad}")
        # The persisted format is line-oriented; only plain spaces survive a round-trip.
        if any(ch.isspace() and ch != " " for ch in self.name):
            raise ValueError("name must not contain whitespace other than plain spaces")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class TraceStep:
    """One consumed symbol: source --symbol--> target."""

    source: str
    symbol: str
    target: str

    def __str__(self) -> str:
        return f"{self.source} -{self.symbol}-> {self.target}"


class FailureKind(Enum):
    """Why an evaluation did not run to the end of the word."""

    NO_INITIAL_STATE = "no initial state"
    INVALID_SYMBOL = "invalid symbol"
    NO_TRANSITION = "no transition"
    WORD_TOO_LONG = "word too long"
    INCOMPLETE = "incomplete automaton"


@dataclass(frozen=True)
class EvaluationResult:
    """
    Outcome of running a word through the automaton.

    trace holds one TraceStep per symbol actually consumed, so a walk that
    stopped on a missing transition keeps its partial path.
    """

    accepted: bool
    message: str
    trace: tuple = field(default_factory=tuple)
    start_state: Optional[str] = None
    failure: Optional[FailureKind] = None

    def __post_init__(self):
        """Validate EvaluationResult consistency."""
        if self.accepted and self.failure is not None:
            raise ValueError("an accepted result cannot carry a failure")
        if self.trace and self.start_state is None:
            raise ValueError("start_state is required when trace is not empty")

    @property
    def consumed(self) -> int:
        return len(self.trace)

    @property
    def states(self) -> tuple:
        """Visited states in order, starting with the initial state."""
        if self.start_state is None:
            return ()
        return (self.start_state,) + tuple(step.target for step in self.trace)

    @property
    def final_state(self) -> Optional[str]:
        """State the walk ended in, or None if it never started."""
        visited = self.states
        return visited[-1] if visited else None

    @property
    def path(self) -> Optional[str]:
        """Path rendered as 'q0 -a-> q1 -b-> q2', or None if the walk never started."""
        if self.start_state is None:
            return None
        parts = [self.start_state]
        for step in self.trace:
            parts.append(f"-{step.symbol}-> {step.target}")
        return " ".join(parts)
