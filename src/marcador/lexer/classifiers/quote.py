"""Block quote classifier mixin."""

from __future__ import annotations

from marcador.tokens import Token, TokenType


class QuoteClassifierMixin:
    """Mixin providing block quote classification."""

    def _try_classify_block_quote(self, content: str, lineno: int) -> Token | None:
        """Try to classify content as a block quote line.

        Strips the ``>`` marker and at most one following space. Each
        quoted line becomes its own block quote.
        """
        if not content.startswith(">"):
            return None

        start = 2 if content[1:2] == " " else 1
        return Token(TokenType.BLOCK_QUOTE, content[start:], lineno)
