"""Fenced code block classifier mixin."""

from __future__ import annotations

from marcador.parsing.charsets import FENCE_MARKERS
from marcador.tokens import Token, TokenType


class FenceClassifierMixin:
    """Mixin providing fenced code block classification."""

    def _try_classify_fence(self, content: str, lineno: int, *, closing: bool) -> Token | None:
        """Try to classify content as a fence marker line.

        A fence marker is ``` or ~~~ at the start of the (trimmed) line.
        Either marker opens or closes a fence.

        Args:
            content: Line content with surrounding whitespace stripped
            lineno: Line number in source
            closing: True when the lexer is inside a fenced block

        Returns:
            Token if the line is a fence marker, None otherwise.
        """
        if not content.startswith(FENCE_MARKERS):
            return None

        if closing:
            return Token(TokenType.FENCED_CODE_END, "", lineno)

        info = content.lstrip(content[0]).strip()
        word = info.split()[0] if info else ""
        return Token(TokenType.FENCED_CODE_START, "", lineno, info=word)
