"""Emphasis, strong and strikethrough parsing for Marcador parser.

Matching is a forward scan: the opener run (``*``/``_``, one or two
characters) looks ahead for a run of the same marker of the same length,
not immediately preceded by whitespace, so ``*a **b** c*`` closes on the
final ``*``. When no run of that length exists, the first longer run
closes instead, using its trailing markers; the surplus stays inside the
span and nests: ``***t***`` renders as ``<strong><em>t</em></strong>``.

There is no delimiter stack and no backtracking: an opener without a
closer is literal text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from marcador.errors import InvalidInputError
from marcador.parsing.charsets import EMPHASIS_MARKERS, WHITESPACE

if TYPE_CHECKING:
    from marcador.buffer import OutputBuffer


def find_emphasis_close(text: str, start: int, end: int, marker: str, count: int) -> int:
    """Find the closer for an emphasis opener.

    Args:
        text: Source string
        start: First content position (just after the opener)
        end: Scan bound
        marker: ``*`` or ``_``
        count: Opener length (1 or 2)

    Returns:
        Position of the closer, or -1 when there is none
    """
    longer = -1
    pos = start
    while pos < end:
        char = text[pos]
        if char == "\\":
            pos += 2
            continue
        if char != marker:
            pos += 1
            continue

        run_start = pos
        while pos < end and text[pos] == marker:
            pos += 1
        if run_start == start or text[run_start - 1] in WHITESPACE:
            continue

        run = pos - run_start
        if run == count:
            return run_start
        if run > count and longer == -1:
            # Trailing markers of the first longer run
            longer = pos - count

    return longer


class EmphasisMixin:
    """Mixin for emphasis, strong and strikethrough spans.

    Required Host Methods:
        - _parse_nested(text, start, end, out) -> int

    """

    def _try_parse_emphasis(self, text: str, pos: int, end: int, out: OutputBuffer) -> int | None:
        """Render ``*em*`` / ``**strong**`` starting at pos.

        Returns:
            Position after the closer, or None when no closer exists

        Raises:
            InvalidInputError: If pos is not an emphasis marker
        """
        marker = text[pos] if pos < end else ""
        if marker not in EMPHASIS_MARKERS:
            raise InvalidInputError(f"No emphasis marker at position {pos}")

        count = 2 if pos + 1 < end and text[pos + 1] == marker else 1
        close = find_emphasis_close(text, pos + count, end, marker, count)
        if close == -1:
            return None

        tag = "strong" if count == 2 else "em"
        out.append(f"<{tag}>")
        self._parse_nested(text, pos + count, close, out)
        out.append(f"</{tag}>")
        return close + count

    def _try_parse_strikethrough(
        self, text: str, pos: int, end: int, out: OutputBuffer
    ) -> int | None:
        """Render ``~~deleted~~`` starting at pos.

        Both closing tildes are required together. ``~~~~`` renders an
        empty span.

        Raises:
            InvalidInputError: If pos does not start with ``~~``
        """
        if pos + 2 > end or not text.startswith("~~", pos):
            raise InvalidInputError(f"No strikethrough opener at position {pos}")

        close = text.find("~~", pos + 2, end)
        if close == -1:
            return None

        out.append("<del>")
        self._parse_nested(text, pos + 2, close, out)
        out.append("</del>")
        return close + 2
