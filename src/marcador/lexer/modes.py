"""Block segmenter states.

The lexer only needs to know whether it is inside a fenced code block;
the segmenter additionally tracks open lists and tables.
"""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Segmenter states.

    - BLOCK: Between blocks, scanning for block starts
    - CODE_FENCE: Inside fenced code block
    - LIST: Inside an ordered or unordered list
    - TABLE: Inside a table body

    """

    BLOCK = auto()
    CODE_FENCE = auto()
    LIST = auto()
    TABLE = auto()
