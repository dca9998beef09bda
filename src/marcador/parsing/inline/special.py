"""Special inline parsing for Marcador parser.

Handles code spans, autolinks and raw inline HTML.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from marcador.errors import InvalidInputError
from marcador.parsing.charsets import AUTOLINK_SCHEMES
from marcador.parsing.inline.core import run_length
from marcador.utils.text import append_escaped

if TYPE_CHECKING:
    from marcador.buffer import OutputBuffer

# Characters that end an autolink candidate
_AUTOLINK_STOP = frozenset("> \t\n")


class SpecialInlineMixin:
    """Mixin for code spans, autolinks and inline HTML.

    Required Host Methods:
        - _emit_text(text, out) -> None

    """

    def _try_parse_code_span(self, text: str, pos: int, end: int, out: OutputBuffer) -> int | None:
        """Render a code span opened by the backtick run at pos.

        The closer is a run of exactly as many backticks. Content is always
        escaped, whatever escape_html says; one leading and one trailing
        space are trimmed if present.

        Returns:
            Position after the closer, or None if the span is unterminated

        Raises:
            InvalidInputError: If pos is not a backtick
        """
        if pos >= end or text[pos] != "`":
            raise InvalidInputError(f"No code span opener at position {pos}")

        count = run_length(text, pos, end, "`")
        content_start = pos + count
        search = content_start

        while search < end:
            if text[search] != "`":
                search += 1
                continue
            run = run_length(text, search, end, "`")
            if run == count:
                code_start, code_end = content_start, search
                if code_end > code_start and text[code_start] == " ":
                    code_start += 1
                if code_end > code_start and text[code_end - 1] == " ":
                    code_end -= 1
                out.append("<code>")
                append_escaped(out, text[code_start:code_end])
                out.append("</code>")
                return search + count
            search += run

        return None

    def _try_parse_autolink(self, text: str, pos: int, end: int, out: OutputBuffer) -> int | None:
        """Render ``<https://...>`` or ``<user@host>`` starting at pos.

        Content must not contain whitespace. Anything containing ``@``
        (that is not already a URL) becomes a ``mailto:`` link.

        Raises:
            InvalidInputError: If pos is not ``<``
        """
        if pos >= end or text[pos] != "<":
            raise InvalidInputError(f"No autolink opener at position {pos}")

        stop = pos + 1
        while stop < end and text[stop] not in _AUTOLINK_STOP:
            stop += 1
        if stop >= end or text[stop] != ">":
            return None

        content = text[pos + 1 : stop]
        if content.startswith(AUTOLINK_SCHEMES):
            href = content
        elif "@" in content:
            href = f"mailto:{content}"
        else:
            return None

        out.append('<a href="')
        self._emit_text(href, out)
        out.append('">')
        self._emit_text(content, out)
        out.append("</a>")
        return stop + 1

    def _try_parse_html_inline(
        self, text: str, pos: int, end: int, out: OutputBuffer
    ) -> int | None:
        """Copy ``<...>`` through verbatim, unescaped.

        Raises:
            InvalidInputError: If pos is not ``<``
        """
        if pos >= end or text[pos] != "<":
            raise InvalidInputError(f"No inline HTML opener at position {pos}")

        close = text.find(">", pos + 1, end)
        if close == -1:
            return None

        out.append(text[pos : close + 1])
        return close + 1
