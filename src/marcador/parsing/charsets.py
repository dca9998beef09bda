"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from marcador.parsing.charsets import ASCII_PUNCTUATION

    if char in ASCII_PUNCTUATION:  # O(1) lookup
        ...
"""

# ASCII punctuation: the characters a backslash can escape
ASCII_PUNCTUATION: frozenset[str] = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")

# Whitespace recognised around lines and emphasis closers
WHITESPACE: frozenset[str] = frozenset(" \t\n\r")

# Same set as a string, for str.strip()
WHITESPACE_CHARS = " \t\n\r"

DIGITS: frozenset[str] = frozenset("0123456789")

# Characters that make the inline scanner leave its plain-text fast path
INLINE_SPECIAL: frozenset[str] = frozenset("\\*_~`![<\n")

# Emphasis delimiter characters
EMPHASIS_MARKERS: frozenset[str] = frozenset("*_")

# Fence markers at line start (tuple for str.startswith)
FENCE_MARKERS: tuple[str, ...] = ("```", "~~~")

# List marker characters
UNORDERED_LIST_MARKERS: frozenset[str] = frozenset("-*+")

# Thematic break characters
THEMATIC_BREAK_CHARS: frozenset[str] = frozenset("-*_")

# Task list checkbox contents
TASK_MARKS: frozenset[str] = frozenset(" xX")

# Autolink schemes recognised inside <...>
AUTOLINK_SCHEMES: tuple[str, ...] = ("http://", "https://", "ftp://")
