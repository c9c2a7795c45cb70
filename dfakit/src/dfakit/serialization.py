"""
Automaton serialization module (save/load as line-oriented text).

The format looks like JSON but is read line by line; it is not a general
JSON parser:

    {
      "alphabet": ["a", "b"],
      "states": ["q0", "q1"],
      "initialState": "q0",
      "finalStates": ["q1"],
      "transitions": [
        {"from": "q0", "symbol": "a", "to": "q1"},
        {"from": "q1", "symbol": "b", "to": "q0"}
      ]
    }

Reading is lenient by default: malformed or dangling records are skipped
(and logged). With strict=True the first such record raises CodecError.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

from dfakit.config import FILE_ENCODING, RESERVED_SYMBOLS
from dfakit.core.automaton import Automaton
from dfakit.core.types import State
from dfakit.errors import AutomatonFileError, CodecError

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

_KEYS = ("alphabet", "states", "initialState", "finalStates", "transitions")
_DELIMITERS = frozenset('",[]')
_STRUCTURAL_LINES = frozenset({"", "{", "}", "[", "]", "],", "},"})


def _quoted_list(items) -> str:
    return "[" + ", ".join(f'"{item}"' for item in items) + "]"


def serialize(automaton: Automaton) -> str:
    """
    Render automaton in the persisted text format.

    Symbols, states and final states are written sorted; transitions are
    ordered by (source, symbol) and only defined pairs are written.

    Raises:
        CodecError: If a symbol is a delimiter or whitespace character.
    """
    for symbol in automaton.alphabet:
        if symbol in _DELIMITERS or symbol.isspace():
            raise CodecError(f"symbol {symbol!r} cannot be written in this format", field="alphabet")

    initial = automaton.initial_state
    lines = [
        "{",
        f'  "alphabet": {_quoted_list(automaton.alphabet)},',
        f'  "states": {_quoted_list(automaton.state_names)},',
        f'  "initialState": "{initial.name if initial is not None else ""}",',
        f'  "finalStates": {_quoted_list(automaton.final_state_names)},',
        '  "transitions": [',
    ]
    records = [
        f'    {{"from": "{source}", "symbol": "{symbol}", "to": "{target}"}}'
        for (source, symbol), target in automaton.transitions.items()
    ]
    for i, record in enumerate(records):
        lines.append(record + ("," if i < len(records) - 1 else ""))
    lines.append("  ]")
    lines.append("}")
    return "\n".join(lines) + "\n"


def _array_items(line: str) -> list[str]:
    start = line.find("[")
    end = line.rfind("]")
    if start == -1 or end == -1 or start >= end:
        return []
    items = []
    for raw in line[start + 1:end].split(","):
        item = raw.strip().replace('"', "")
        if item:
            items.append(item)
    return items


def _string_value(line: str) -> str:
    start = line.find('"', line.find(":"))
    end = line.rfind('"')
    if start == -1 or end == -1 or start >= end:
        return ""
    return line[start + 1:end]


def _field_value(line: str, key: str) -> str:
    pattern = f'"{key}":'
    key_index = line.find(pattern)
    if key_index == -1:
        return ""
    start = line.find('"', key_index + len(pattern))
    if start == -1:
        return ""
    end = line.find('"', start + 1)
    if end == -1:
        return ""
    return line[start + 1:end]


class _Reader:
    """Single-pass parser state for deserialize()."""

    def __init__(self, strict: bool):
        self.strict = strict
        self.automaton = Automaton()
        self.seen: set[str] = set()
        self.in_transitions = False
        self.skipped = 0

    def reject(self, message: str, line_no: int, field: str) -> None:
        if self.strict:
            raise CodecError(message, line=line_no, field=field)
        self.skipped += 1
        logger.warning("skipping %s on line %d: %s", field, line_no, message)

    def feed(self, line_no: int, line: str) -> None:
        if line.startswith('"alphabet":'):
            self.seen.add("alphabet")
            self.read_alphabet(line_no, line)
        elif line.startswith('"states":'):
            self.seen.add("states")
            self.read_states(line_no, line)
        elif line.startswith('"initialState":'):
            self.seen.add("initialState")
            self.read_initial(line_no, line)
        elif line.startswith('"finalStates":'):
            self.seen.add("finalStates")
            self.read_finals(line_no, line)
        elif line.startswith('"transitions":'):
            self.seen.add("transitions")
            self.in_transitions = True
        elif self.in_transitions and '"from":' in line:
            self.read_transition(line_no, line)
        elif self.strict and line not in _STRUCTURAL_LINES:
            raise CodecError(f"unrecognized line {line!r}", line=line_no)

    def read_alphabet(self, line_no: int, line: str) -> None:
        for item in _array_items(line):
            if len(item) != 1:
                if self.strict:
                    raise CodecError(f"symbol {item!r} is not a single character", line_no, "alphabet")
                item = item[0]
            if item in RESERVED_SYMBOLS:
                self.reject(f"symbol {item!r} is reserved", line_no, "alphabet")
            elif not self.automaton.alphabet.add(item) and self.strict:
                raise CodecError(f"duplicate symbol {item!r}", line_no, "alphabet")

    def read_states(self, line_no: int, line: str) -> None:
        for item in _array_items(line):
            try:
                state = State(item)
            except ValueError as e:
                self.reject(f"invalid state name {item!r}: {e}", line_no, "states")
                continue
            if not self.automaton.add_state(state) and self.strict:
                raise CodecError(f"duplicate state {item!r}", line_no, "states")

    def read_initial(self, line_no: int, line: str) -> None:
        name = _string_value(line)
        if name and not self.automaton.set_initial_state(name):
            self.reject(f"unknown initial state {name!r}", line_no, "initialState")

    def read_finals(self, line_no: int, line: str) -> None:
        for name in _array_items(line):
            if not self.automaton.add_final_state(name):
                self.reject(f"unknown final state {name!r}", line_no, "finalStates")

    def read_transition(self, line_no: int, line: str) -> None:
        source = _field_value(line, "from")
        symbol = _field_value(line, "symbol")
        target = _field_value(line, "to")
        for field, value in (("from", source), ("symbol", symbol), ("to", target)):
            if not value:
                self.reject("transition is missing a value", line_no, field)
                return
        if len(symbol) != 1:
            if self.strict:
                raise CodecError(f"symbol {symbol!r} is not a single character", line_no, "symbol")
            symbol = symbol[0]
        if not self.automaton.add_transition(source, symbol, target):
            self.reject(
                f"transition ({source}, {symbol}) -> {target} references an unknown state or symbol",
                line_no,
                "transitions",
            )

    def finish(self) -> Automaton:
        if self.strict:
            for key in _KEYS:
                if key not in self.seen:
                    raise CodecError("missing section", field=key)
        if self.skipped:
            logger.warning("%d malformed record(s) skipped while reading automaton", self.skipped)
        return self.automaton


def deserialize(text: str, strict: bool = False) -> Automaton:
    """
    Parse text produced by serialize() into a new Automaton.

    Args:
        text: Persisted automaton.
        strict: Raise CodecError on the first malformed record instead of
            skipping it.

    Returns:
        A freshly built Automaton; nothing is returned if parsing fails.

    Raises:
        CodecError: Only in strict mode.
    """
    reader = _Reader(strict)
    for line_no, raw in enumerate(text.splitlines(), start=1):
        reader.feed(line_no, raw.strip())
    return reader.finish()


def save_automaton(automaton: Automaton, path: PathLike) -> None:
    """Write automaton to path, replacing any existing file.

    Raises:
        AutomatonFileError: If the file cannot be written.
    """
    text = serialize(automaton)
    try:
        with open(path, "w", encoding=FILE_ENCODING, newline="\n") as f:
            f.write(text)
    except OSError as e:
        raise AutomatonFileError("save", str(path), e.strerror or str(e)) from e
    logger.info("saved automaton with %d states to %s", len(automaton), path)


def load_automaton(path: PathLike, strict: bool = False) -> Automaton:
    """Read an automaton from path.

    Args:
        path: File written by save_automaton (or by hand in the same format).
        strict: See deserialize().

    Returns:
        The loaded Automaton.

    Raises:
        AutomatonFileError: If the file does not exist or cannot be read.
        CodecError: If strict and the content is malformed.
    """
    if not Path(path).exists():
        raise AutomatonFileError("load", str(path), "file not found")

    try:
        with open(path, "r", encoding=FILE_ENCODING) as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        reason = getattr(e, "strerror", None) or str(e)
        raise AutomatonFileError("load", str(path), reason) from e

    automaton = deserialize(text, strict=strict)
    logger.info("loaded automaton with %d states from %s", len(automaton), path)
    return automaton
