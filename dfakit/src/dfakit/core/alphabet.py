from __future__ import annotations

from typing import Callable, Iterable, Iterator

from dfakit.config import RESERVED_SYMBOLS


def _check_symbol(symbol: str) -> None:
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise ValueError(f"symbol must be a single character, got {symbol!r}")


class Alphabet:
    """
    Finite set of admissible input symbols (Σ).

    Membership is unordered; iteration is sorted so that display and
    serialization are deterministic.
    """

    def __init__(self, symbols: Iterable[str] = ()):
        self._symbols: set[str] = set()
        self._removal_hooks: list[Callable[[str], object]] = []
        for symbol in symbols:
            self.add(symbol)

    def add(self, symbol: str) -> bool:
        """Insert symbol. Returns False if it was already present or is reserved."""
        _check_symbol(symbol)
        if symbol in RESERVED_SYMBOLS or symbol in self._symbols:
            return False
        self._symbols.add(symbol)
        return True

    def remove(self, symbol: str) -> bool:
        if symbol not in self._symbols:
            return False
        self._symbols.remove(symbol)
        for hook in self._removal_hooks:
            hook(symbol)
        return True

    def on_remove(self, hook: Callable[[str], object]) -> None:
        """Call hook(symbol) whenever a symbol leaves the alphabet, including via clear()."""
        self._removal_hooks.append(hook)

    def contains(self, symbol: str) -> bool:
        return symbol in self._symbols

    def is_valid_word(self, word: str) -> bool:
        """True iff every character of word belongs to the alphabet."""
        return all(ch in self._symbols for ch in word)

    def invalid_symbols(self, word: str) -> list[str]:
        """Characters of word outside the alphabet, in order of first appearance."""
        invalid: list[str] = []
        seen: set[str] = set()
        for ch in word:
            if ch not in self._symbols and ch not in seen:
                seen.add(ch)
                invalid.append(ch)
        return invalid

    def clear(self) -> None:
        for symbol in sorted(self._symbols):
            self.remove(symbol)

    def size(self) -> int:
        return len(self._symbols)

    def is_empty(self) -> bool:
        return not self._symbols

    @property
    def symbols(self) -> frozenset[str]:
        return frozenset(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._symbols

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._symbols))

    def __len__(self) -> int:
        return len(self._symbols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    __hash__ = None

    def __repr__(self) -> str:
        return f"Alphabet({sorted(self._symbols)!r})"

    def __str__(self) -> str:
        return "{" + ", ".join(self) + "}"
