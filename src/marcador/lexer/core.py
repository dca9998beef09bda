"""Line-oriented lexer.

Splits a document into physical lines and classifies each one, tracking
only the fenced-code state. Classification order is fixed, first match
wins:

1. fence marker (toggles fenced code)
2. reference definition
3. blank line
4. ATX heading
5. thematic break
6. block quote
7. list item
8. table header / pipe line (tables enabled)
9. paragraph line

Inside a fence every line is content, passed through untouched.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from marcador.lexer.classifiers import (
    FenceClassifierMixin,
    HeadingClassifierMixin,
    LinkRefClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    TableClassifierMixin,
    ThematicClassifierMixin,
)
from marcador.lexer.modes import LexerMode
from marcador.parsing.charsets import WHITESPACE_CHARS
from marcador.tokens import Token, TokenType


def split_lines(source: str) -> list[str]:
    """Split source into physical lines.

    A trailing newline does not start an extra line.
    """
    if not source:
        return []
    lines = source.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


class Lexer(
    FenceClassifierMixin,
    LinkRefClassifierMixin,
    HeadingClassifierMixin,
    ThematicClassifierMixin,
    QuoteClassifierMixin,
    ListClassifierMixin,
    TableClassifierMixin,
):
    """Classifies the lines of a document.

    Usage:
            >>> lexer = Lexer("# Hello\\n\\nWorld")
            >>> for token in lexer.tokenize():
            ...     print(token)
            Token(ATX_HEADING, 'Hello', 1)
            Token(BLANK_LINE, '', 2)
            Token(PARAGRAPH_LINE, 'World', 3)

    """

    __slots__ = (
        "_lines",
        "_index",
        "_mode",
        "_tables_enabled",
        "_task_lists_enabled",
        "_longest_line",
    )

    def __init__(
        self,
        source: str,
        *,
        tables_enabled: bool = True,
        task_lists_enabled: bool = True,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markdown source text
            tables_enabled: Recognise pipe tables
            task_lists_enabled: Recognise task list checkboxes
        """
        self._lines = split_lines(source)
        self._index = 0
        self._mode = LexerMode.BLOCK
        self._tables_enabled = tables_enabled
        self._task_lists_enabled = task_lists_enabled
        self._longest_line = 0

    @property
    def longest_line(self) -> int:
        """Length of the longest line scanned so far."""
        return self._longest_line

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a token stream, one token per line.

        A table header token also consumes its separator line. An
        unterminated fence simply ends with the input.
        """
        lines = self._lines
        while self._index < len(lines):
            raw = lines[self._index]
            if len(raw) > self._longest_line:
                self._longest_line = len(raw)
            lineno = self._index + 1
            self._index += 1

            if self._mode is LexerMode.CODE_FENCE:
                yield self._scan_code_fence_line(raw, lineno)
            else:
                yield self._scan_block_line(raw, lineno)

    def _scan_code_fence_line(self, raw: str, lineno: int) -> Token:
        content = raw.strip(WHITESPACE_CHARS)
        token = self._try_classify_fence(content, lineno, closing=True)
        if token is not None:
            self._mode = LexerMode.BLOCK
            return token
        return Token(TokenType.FENCED_CODE_CONTENT, raw.rstrip("\r"), lineno)

    def _scan_block_line(self, raw: str, lineno: int) -> Token:
        content = raw.strip(WHITESPACE_CHARS)

        token = self._try_classify_fence(content, lineno, closing=False)
        if token is not None:
            self._mode = LexerMode.CODE_FENCE
            return token

        token = self._try_classify_link_ref_def(content, lineno)
        if token is not None:
            return token

        if not content:
            return Token(TokenType.BLANK_LINE, "", lineno)

        token = (
            self._try_classify_atx_heading(content, lineno)
            or self._try_classify_thematic_break(content, lineno)
            or self._try_classify_block_quote(content, lineno)
            or self._try_classify_list_item(content, lineno)
        )
        if token is not None:
            return token

        token = self._try_classify_pipe_line(content, self._peek_stripped(), lineno)
        if token is not None:
            if token.type is TokenType.TABLE_HEADER:
                # Separator line belongs to the header
                self._index += 1
            return token

        return Token(TokenType.PARAGRAPH_LINE, content, lineno)

    def _peek_stripped(self) -> str | None:
        """Return the next physical line, stripped, without consuming it."""
        if self._index < len(self._lines):
            return self._lines[self._index].strip(WHITESPACE_CHARS)
        return None
