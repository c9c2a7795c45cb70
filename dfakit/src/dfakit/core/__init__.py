"""Automaton engine: value types, alphabet, transition table and the aggregate."""

from .alphabet import Alphabet
from .automaton import Automaton
from .transitions import TransitionTable
from .types import EvaluationResult, FailureKind, State, TraceStep

__all__ = [
    "Alphabet",
    "Automaton",
    "EvaluationResult",
    "FailureKind",
    "State",
    "TraceStep",
    "TransitionTable",
]
