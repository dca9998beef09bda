"""ATX heading classifier mixin."""

from __future__ import annotations

from marcador.tokens import Token, TokenType


class HeadingClassifierMixin:
    """Mixin providing ATX heading classification."""

    def _try_classify_atx_heading(self, content: str, lineno: int) -> Token | None:
        """Try to classify content as ATX heading.

        Any line starting with ``#`` is a heading. Up to six ``#`` set the
        level; further ``#`` characters belong to the heading text. Spaces
        after the markers are skipped.

        Args:
            content: Line content with surrounding whitespace stripped
            lineno: Line number in source

        Returns:
            Token if heading, None otherwise.
        """
        level = 0
        while level < len(content) and level < 6 and content[level] == "#":
            level += 1

        if level == 0:
            return None

        return Token(TokenType.ATX_HEADING, content[level:].lstrip(" "), lineno, level=level)
