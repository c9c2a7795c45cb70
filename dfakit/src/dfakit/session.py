"""
Builder session: the command surface a presentation layer drives step by step.

define alphabet -> define states -> pick initial -> pick finals ->
fill transitions -> evaluate / search / save / load.

Each command returns a success flag; on rejection the reason is left in
BuilderSession.last_error and the automaton is not modified.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional

from dfakit import config
from dfakit.core.automaton import Automaton
from dfakit.core.types import EvaluationResult, FailureKind
from dfakit.serialization import PathLike, load_automaton, save_automaton

logger = logging.getLogger(__name__)


@dataclass
class BuilderLimits:
    """Limits the session enforces on user input."""

    max_symbols: int = config.MAX_SYMBOLS
    min_states: int = config.MIN_STATES
    max_states: int = config.MAX_STATES
    max_word_length: int = config.MAX_WORD_LENGTH
    max_cells: int = config.MAX_CELLS

    def __post_init__(self):
        """Validate BuilderLimits constraints."""
        if self.max_symbols <= 0:
            raise ValueError("max_symbols must be > 0")
        if self.min_states <= 0:
            raise ValueError("min_states must be > 0")
        if self.max_states < self.min_states:
            raise ValueError("max_states must be >= min_states")
        if self.max_word_length < 0:
            raise ValueError("max_word_length must be >= 0")
        if self.max_cells <= 0:
            raise ValueError("max_cells must be > 0")


class Stage(IntEnum):
    """Wizard progress, derived from what the automaton already holds."""

    EMPTY = 0
    ALPHABET_DEFINED = 1
    STATES_DEFINED = 2
    INITIAL_SET = 3
    FINALS_SET = 4
    TRANSITIONS_COMPLETE = 5


def stage_of(automaton: Automaton) -> Stage:
    if automaton.alphabet.is_empty():
        return Stage.EMPTY
    if len(automaton) == 0:
        return Stage.ALPHABET_DEFINED
    if automaton.initial_state is None:
        return Stage.STATES_DEFINED
    if not automaton.final_states:
        return Stage.INITIAL_SET
    if not automaton.is_total():
        return Stage.FINALS_SET
    return Stage.TRANSITIONS_COMPLETE


def validate_alphabet_input(text: Optional[str], max_symbols: int = config.MAX_SYMBOLS) -> Optional[str]:
    """
    Check a comma-separated alphabet such as "a, b, c".

    Returns:
        None if the input is acceptable, otherwise the reason it is not.
    """
    if text is None or not text.strip():
        return "alphabet must not be empty"

    tokens = text.split(",")
    if len(tokens) > max_symbols:
        return f"at most {max_symbols} symbols are allowed"

    seen: set[str] = set()
    for token in tokens:
        symbol = token.strip()
        if not symbol:
            return "empty symbols are not allowed"
        if len(symbol) != 1:
            return f"symbol {symbol!r} must be a single character"
        if symbol in config.RESERVED_SYMBOLS:
            return f"symbols {sorted(config.RESERVED_SYMBOLS)} are reserved"
        if not symbol.isalnum():
            return f"symbol {symbol!r} must be a letter or a digit"
        if symbol in seen:
            return f"symbol {symbol!r} is duplicated"
        seen.add(symbol)
    return None


def validate_word_input(
    word: str,
    automaton: Automaton,
    max_word_length: int = config.MAX_WORD_LENGTH,
) -> Optional[str]:
    """Return None if word can be evaluated on automaton, otherwise the reason."""
    if len(word) > max_word_length:
        return f"word is too long (at most {max_word_length} characters)"
    invalid = automaton.alphabet.invalid_symbols(word)
    if invalid:
        return f"symbol {invalid[0]!r} is not in the alphabet {automaton.alphabet}"
    return None


class BuilderSession:
    """Owns one Automaton and guards every edit on the wizard stage."""

    def __init__(self, limits: BuilderLimits | None = None):
        self.limits = limits or BuilderLimits()
        self.automaton = Automaton()
        self.last_error: Optional[str] = None

    @property
    def stage(self) -> Stage:
        return stage_of(self.automaton)

    def _reject(self, reason: str) -> bool:
        self.last_error = reason
        logger.debug("command rejected: %s", reason)
        return False

    def _accept(self) -> bool:
        self.last_error = None
        return True

    def _require(self, stage: Stage, command: str) -> bool:
        current = self.stage
        if current < stage:
            self._reject(f"{command} requires stage {stage.name}, current stage is {current.name}")
            return False
        return True

    def reset(self) -> None:
        self.automaton = Automaton()
        self.last_error = None

    # ------------------------------------------------------------------
    # Construction commands
    # ------------------------------------------------------------------

    def define_alphabet(self, text: str) -> bool:
        """Replace the whole automaton with a fresh one over the given symbols."""
        reason = validate_alphabet_input(text, self.limits.max_symbols)
        if reason is not None:
            return self._reject(reason)

        automaton = Automaton(alphabet=[token.strip() for token in text.split(",")])
        self.automaton = automaton
        logger.debug("alphabet defined: %s", automaton.alphabet)
        return self._accept()

    def define_states(self, count: int) -> bool:
        """Create states q0..q(count-1), discarding states, q0, F and δ."""
        if not self._require(Stage.ALPHABET_DEFINED, "define_states"):
            return False
        if not (self.limits.min_states <= count <= self.limits.max_states):
            return self._reject(
                f"state count must be between {self.limits.min_states} and {self.limits.max_states}"
            )
        cells = count * self.automaton.alphabet.size()
        if cells > self.limits.max_cells:
            return self._reject(
                f"automaton too large: {count} states x {self.automaton.alphabet.size()} symbols "
                f"exceeds {self.limits.max_cells} transitions"
            )

        self.automaton.clear_states()
        for i in range(count):
            self.automaton.add_state(f"{config.STATE_PREFIX}{i}")
        logger.debug("defined %d states", count)
        return self._accept()

    def set_initial_state(self, name: str) -> bool:
        if not self._require(Stage.STATES_DEFINED, "set_initial_state"):
            return False
        if not self.automaton.set_initial_state(name):
            return self._reject(f"unknown state {name!r}")
        return self._accept()

    def set_final_states(self, names: Iterable[str]) -> bool:
        if not self._require(Stage.INITIAL_SET, "set_final_states"):
            return False
        names = set(names)
        if not names:
            return self._reject("at least one final state is required")
        unknown = sorted(name for name in names if not self.automaton.has_state(name))
        if unknown:
            return self._reject(f"unknown states {unknown}")
        self.automaton.set_final_states(names)
        return self._accept()

    def add_transition(self, source: str, symbol: str, target: str) -> bool:
        """Set δ(source, symbol) = target; re-adding a pair overwrites it."""
        if not self._require(Stage.FINALS_SET, "add_transition"):
            return False
        if not self.automaton.add_transition(source, symbol, target):
            return self._reject(
                f"transition ({source}, {symbol!r}) -> {target} references an unknown state or symbol"
            )
        return self._accept()

    def remove_transition(self, source: str, symbol: str) -> bool:
        if not self.automaton.remove_transition(source, symbol):
            return self._reject(f"no transition defined for ({source}, {symbol!r})")
        return self._accept()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_complete(self) -> bool:
        return self.automaton.is_valid()

    def evaluate(self, word: str) -> EvaluationResult:
        if not self.is_complete():
            return EvaluationResult(
                accepted=False,
                message="automaton is incomplete",
                failure=FailureKind.INCOMPLETE,
            )
        if len(word) > self.limits.max_word_length:
            return EvaluationResult(
                accepted=False,
                message=f"word is too long (at most {self.limits.max_word_length} characters)",
                failure=FailureKind.WORD_TOO_LONG,
            )
        return self.automaton.evaluate(word)

    def generate_shortest_words(self, limit: int = config.DEFAULT_WORD_LIMIT) -> list[str]:
        return self.automaton.shortest_accepted_words(limit)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, path: PathLike) -> bool:
        """
        Write the automaton to path.

        Returns False without writing if the automaton is incomplete. I/O
        errors propagate as AutomatonFileError.
        """
        if not self.is_complete():
            return self._reject("automaton is incomplete")
        save_automaton(self.automaton, path)
        return self._accept()

    def load(self, path: PathLike, strict: bool = False) -> bool:
        """
        Replace the automaton with the one stored at path.

        The current automaton is kept if reading or parsing fails; the
        AutomatonFileError or CodecError propagates to the caller.
        """
        self.automaton = load_automaton(path, strict=strict)
        return self._accept()

    # ------------------------------------------------------------------
    # Display helpers
    # ------------------------------------------------------------------

    def describe_alphabet(self) -> str:
        if self.automaton.alphabet.is_empty():
            return "not defined"
        return str(self.automaton.alphabet)

    def describe_states(self) -> str:
        if len(self.automaton) == 0:
            return "not defined"
        return "{" + ", ".join(self.automaton.state_names) + "}"

    def describe_initial_state(self) -> str:
        initial = self.automaton.initial_state
        return "not defined" if initial is None else initial.name

    def describe_final_states(self) -> str:
        if not self.automaton.final_states:
            return "not defined"
        return "{" + ", ".join(self.automaton.final_state_names) + "}"
