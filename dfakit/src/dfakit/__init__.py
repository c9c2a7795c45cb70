"""
dfakit: build, evaluate, search and persist deterministic finite automata.
"""

from dfakit.core import (
    Alphabet,
    Automaton,
    EvaluationResult,
    FailureKind,
    State,
    TraceStep,
    TransitionTable,
)
from dfakit.errors import AutomatonError, AutomatonFileError, CodecError
from dfakit.serialization import deserialize, load_automaton, save_automaton, serialize
from dfakit.session import BuilderLimits, BuilderSession, Stage

__version__ = "0.1.0"

__all__ = [
    "Alphabet",
    "Automaton",
    "AutomatonError",
    "AutomatonFileError",
    "BuilderLimits",
    "BuilderSession",
    "CodecError",
    "EvaluationResult",
    "FailureKind",
    "Stage",
    "State",
    "TraceStep",
    "TransitionTable",
    "deserialize",
    "load_automaton",
    "save_automaton",
    "serialize",
]
