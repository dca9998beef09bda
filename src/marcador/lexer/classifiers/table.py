"""Pipe table classifier mixin."""

from __future__ import annotations

from marcador.tokens import Token, TokenType

# Characters allowed in a header separator line
_SEPARATOR_CHARS = frozenset("|-: \t")


def is_table_separator(line: str) -> bool:
    """Check whether line is a header separator such as ``|---|:--:|``.

    Only ``|``, ``-``, ``:`` and whitespace are allowed, with at least
    one ``-`` and one ``|``.
    """
    if not line:
        return False
    return "|" in line and "-" in line and all(c in _SEPARATOR_CHARS for c in line)


class TableClassifierMixin:
    """Mixin providing pipe table classification."""

    # Set by the Lexer class
    _tables_enabled: bool

    def _try_classify_pipe_line(self, content: str, next_line: str | None, lineno: int) -> Token | None:
        """Try to classify content as a table line.

        A ``|``-bearing line whose next physical line is a separator starts
        a table (TABLE_HEADER; the separator is consumed with it). Without a
        separator it is a PIPE_LINE: a data row inside an open table, an
        ordinary paragraph otherwise.

        Args:
            content: Line content with surrounding whitespace stripped
            next_line: Next physical line, stripped (None at end of input)
            lineno: Line number in source

        Returns:
            Token if the line is table material, None otherwise.
        """
        if not self._tables_enabled or "|" not in content:
            return None

        if next_line is not None and is_table_separator(next_line):
            return Token(TokenType.TABLE_HEADER, content, lineno)

        return Token(TokenType.PIPE_LINE, content, lineno)
