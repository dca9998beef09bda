"""Thematic break classifier mixin."""

from __future__ import annotations

from marcador.parsing.charsets import THEMATIC_BREAK_CHARS, WHITESPACE
from marcador.tokens import Token, TokenType


class ThematicClassifierMixin:
    """Mixin providing thematic break classification."""

    def _try_classify_thematic_break(self, content: str, lineno: int) -> Token | None:
        """Try to classify content as thematic break.

        Thematic breaks are 3+ of the same character (-, *, _) with
        optional whitespace between them.

        Args:
            content: Line content with surrounding whitespace stripped
            lineno: Line number in source

        Returns:
            Token if valid break, None otherwise.
        """
        if not content or content[0] not in THEMATIC_BREAK_CHARS:
            return None

        char = content[0]
        count = 0
        for c in content:
            if c == char:
                count += 1
            elif c not in WHITESPACE:
                return None

        if count >= 3:
            return Token(TokenType.THEMATIC_BREAK, content, lineno)

        return None
