"""
Configuration constants for dfakit.

Limits applied by the builder session and the shortest-word search.
Kept as plain module constants; BuilderLimits bundles the session ones.
"""

# Symbols used internally for the empty word; never part of an alphabet.
RESERVED_SYMBOLS = frozenset({"ε", "λ"})

MAX_SYMBOLS = 10
MIN_STATES = 2
MAX_STATES = 15
MAX_WORD_LENGTH = 50
# Upper bound on states x symbols accepted by the builder.
MAX_CELLS = 150

# Words longer than this are never produced by the shortest-word search.
MAX_SEARCH_DEPTH = 15
DEFAULT_WORD_LIMIT = 10

STATE_PREFIX = "q"
FILE_ENCODING = "utf-8"
