"""Token and TokenType definitions for the Marcador lexer.

The lexer classifies each physical line of a document and produces one
Token per line (a table header token also covers its separator line).
The block segmenter consumes the stream.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Line classifications produced by the lexer."""

    BLANK_LINE = auto()

    # Fenced code
    FENCED_CODE_START = auto()  # ``` or ~~~
    FENCED_CODE_END = auto()
    FENCED_CODE_CONTENT = auto()

    # Definitions (produce no output)
    LINK_REFERENCE_DEF = auto()  # [label]: url "title"

    # Blocks
    ATX_HEADING = auto()  # # Heading
    THEMATIC_BREAK = auto()  # ---, ***, ___
    BLOCK_QUOTE = auto()  # > quoted
    LIST_ITEM = auto()  # -, *, +, 1.

    # Tables
    TABLE_HEADER = auto()  # | a | b | followed by |---|---|
    PIPE_LINE = auto()  # | a | b | without a separator below

    PARAGRAPH_LINE = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A classified line.

    Attributes:
        type: The token type
        value: Content handed to the inline engine (markers stripped)
        lineno: Line number in the source (1-indexed)
        level: Heading level (1-6)
        ordered: List item uses a digit marker
        checked: Task checkbox state (None when the item is not a task)
        label: Reference definition label
        url: Reference definition url
        title: Reference definition title
        info: First word of a fence info string

    """

    type: TokenType
    value: str
    lineno: int
    level: int = 0
    ordered: bool = False
    checked: bool | None = None
    label: str = ""
    url: str = ""
    title: str | None = None
    info: str = ""

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.lineno})"
