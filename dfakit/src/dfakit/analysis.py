from __future__ import annotations

from collections import deque

import numpy as np

from dfakit.core.automaton import Automaton


def transition_matrix(automaton: Automaton) -> tuple[np.ndarray, tuple[str, ...], tuple[str, ...]]:
    """
    Dense view of δ.

    Returns:
        (matrix, states, symbols) where matrix[i, j] is the index in `states`
        of δ(states[i], symbols[j]), or -1 if that transition is undefined.
    """
    states = automaton.state_names
    symbols = tuple(automaton.alphabet)
    state_to_idx = {state: idx for idx, state in enumerate(states)}
    symbol_to_idx = {symbol: idx for idx, symbol in enumerate(symbols)}

    matrix = np.full((len(states), len(symbols)), -1, dtype=np.int64)
    for (source, symbol), target in automaton.transitions.items():
        if symbol not in symbol_to_idx:
            continue
        matrix[state_to_idx[source], symbol_to_idx[symbol]] = state_to_idx[target]

    return matrix, states, symbols


def reachable_states(automaton: Automaton) -> frozenset[str]:
    initial = automaton.initial_state
    if initial is None:
        return frozenset()

    seen = {initial.name}
    queue = deque([initial.name])
    while queue:
        state = queue.popleft()
        for target in automaton.transitions.targets_from(state).values():
            if target not in seen:
                seen.add(target)
                queue.append(target)
    return frozenset(seen)


def acceptance_rate(automaton: Automaton, words: list[str]) -> float:
    if not words:
        raise ValueError("words must not be empty")

    accepted = sum(1 for word in words if automaton.accepts(word))
    return float(accepted) / float(len(words))


def state_visit_counts(automaton: Automaton, words: list[str]) -> np.ndarray:
    """
    How often each state (in state_names order) is visited while evaluating words.

    Partial walks count the states they reached before stopping.
    """
    states = automaton.state_names
    state_to_idx = {state: idx for idx, state in enumerate(states)}
    counts = np.zeros(len(states), dtype=np.int64)

    for word in words:
        for state in automaton.evaluate(word).states:
            counts[state_to_idx[state]] += 1

    return counts
