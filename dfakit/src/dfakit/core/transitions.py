from __future__ import annotations

from typing import Iterator, Optional


class TransitionTable:
    """
    Deterministic partial transition function δ: (state, symbol) -> state.

    Keys are (state name, symbol) pairs, so setting an existing key replaces
    its target. A missing key means "no transition", not a self-loop.
    """

    def __init__(self):
        self._delta: dict[tuple[str, str], str] = {}

    def set(self, source: str, symbol: str, target: str) -> None:
        self._delta[(source, symbol)] = target

    def get(self, source: str, symbol: str) -> Optional[str]:
        return self._delta.get((source, symbol))

    def has(self, source: str, symbol: str) -> bool:
        return (source, symbol) in self._delta

    def remove(self, source: str, symbol: str) -> bool:
        return self._delta.pop((source, symbol), None) is not None

    def remove_state(self, name: str) -> int:
        """Drop every transition leaving or entering name. Returns how many were removed."""
        doomed = [
            key for key, target in self._delta.items()
            if key[0] == name or target == name
        ]
        for key in doomed:
            del self._delta[key]
        return len(doomed)

    def remove_symbol(self, symbol: str) -> int:
        doomed = [key for key in self._delta if key[1] == symbol]
        for key in doomed:
            del self._delta[key]
        return len(doomed)

    def targets_from(self, source: str) -> dict[str, str]:
        """Outgoing transitions of source as {symbol: target}, symbols sorted."""
        return {
            symbol: self._delta[(state, symbol)]
            for state, symbol in sorted(self._delta)
            if state == source
        }

    def items(self) -> list[tuple[tuple[str, str], str]]:
        """All transitions sorted by (source, symbol)."""
        return sorted(self._delta.items())

    def as_dict(self) -> dict[tuple[str, str], str]:
        return dict(self._delta)

    def clear(self) -> None:
        self._delta.clear()

    def size(self) -> int:
        return len(self._delta)

    def is_empty(self) -> bool:
        return not self._delta

    def __contains__(self, key: object) -> bool:
        return key in self._delta

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(sorted(self._delta))

    def __len__(self) -> int:
        return len(self._delta)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransitionTable):
            return NotImplemented
        return self._delta == other._delta

    __hash__ = None

    def __repr__(self) -> str:
        return f"TransitionTable({len(self._delta)} transitions)"

    def __str__(self) -> str:
        return "\n".join(f"δ({s}, {c}) = {t}" for (s, c), t in self.items())
