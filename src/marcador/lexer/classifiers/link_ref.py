"""Link reference definition classifier mixin."""

from __future__ import annotations

from marcador.parsing.charsets import WHITESPACE
from marcador.tokens import Token, TokenType


class LinkRefClassifierMixin:
    """Mixin providing link reference definition classification."""

    def _try_classify_link_ref_def(self, content: str, lineno: int) -> Token | None:
        """Try to classify content as a reference definition.

        Format: [label]: url "optional title"

        The label runs to the first ``]``, which must be followed by ``:``.
        The url is the first whitespace-delimited word after the colon.
        A title is recognised between the first ``"`` after the url and the
        last ``"`` on the line.

        Args:
            content: Line content with surrounding whitespace stripped
            lineno: Line number in source

        Returns:
            Token if valid definition, None otherwise.
        """
        if not content.startswith("["):
            return None

        close = content.find("]")
        if close == -1 or content[close + 1 : close + 2] != ":":
            return None

        label = content[1:close]
        rest = content[close + 2 :].lstrip(" \t")

        url_end = 0
        while url_end < len(rest) and rest[url_end] not in WHITESPACE:
            url_end += 1
        url = rest[:url_end]

        title: str | None = None
        tail = rest[url_end:].lstrip(" \t")
        if tail.startswith('"'):
            title_end = tail.rfind('"')
            if title_end > 0:
                title = tail[1:title_end]

        return Token(
            TokenType.LINK_REFERENCE_DEF,
            content,
            lineno,
            label=label,
            url=url,
            title=title,
        )
