"""Core inline scanning for Marcador parser.

Scans a bounded range ``[start, end)`` of a string and appends rendered
HTML to an output buffer. At each position the constructs are tried in a
fixed priority; the first match wins. A position where nothing matches is
emitted as text (escaped per configuration) and the scan advances by one.

Priority:
    1. backslash escape
    2. emphasis / strong
    3. strikethrough
    4. code span
    5. image
    6. link (inline, reference, shortcut)
    7. autolink
    8. raw inline HTML
    9. line break
    10. text

Every nested span (emphasis content, link text, ...) is scanned by a
recursive call bounded by the enclosing closer. Recursion depth is capped
by ``max_nesting_depth``; past the cap the range is emitted as text.

Thread Safety:
All state is instance-local. Safe for concurrent use when each parser
instance is used by one thread.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from marcador.parsing.charsets import ASCII_PUNCTUATION, EMPHASIS_MARKERS, INLINE_SPECIAL
from marcador.utils.logger import get_logger
from marcador.utils.text import escape_html

if TYPE_CHECKING:
    from marcador.buffer import OutputBuffer
    from marcador.config import MarkerConfig

logger = get_logger(__name__)


def run_length(text: str, pos: int, end: int, char: str) -> int:
    """Count consecutive ``char`` starting at pos, bounded by end."""
    count = 0
    while pos + count < end and text[pos + count] == char:
        count += 1
    return count


class InlineParsingCoreMixin:
    """Core inline scanning loop.

    Required Host Attributes:
        - _config: MarkerConfig
        - _depth: int

    Required Host Methods (from other mixins):
        - _try_parse_emphasis(text, pos, end, out) -> int | None
        - _try_parse_strikethrough(text, pos, end, out) -> int | None
        - _try_parse_code_span(text, pos, end, out) -> int | None
        - _try_parse_image(text, pos, end, out) -> int | None
        - _try_parse_link(text, pos, end, out) -> int | None
        - _try_parse_autolink(text, pos, end, out) -> int | None
        - _try_parse_html_inline(text, pos, end, out) -> int | None

    """

    _config: MarkerConfig
    _depth: int

    def parse_inline(self, text: str, start: int, end: int, out: OutputBuffer) -> int:
        """Render inline content of ``text[start:end]`` into out.

        Args:
            text: Source string
            start: First position to scan
            end: Position the scan must not reach (clamped to len(text))
            out: Output buffer receiving HTML

        Returns:
            Position where scanning stopped (always ``end``)
        """
        end = min(end, len(text))
        config = self._config
        pos = start

        while pos < end:
            char = text[pos]

            # Plain text fast path: copy the run up to the next special char
            if char not in INLINE_SPECIAL:
                run_end = pos + 1
                while run_end < end and text[run_end] not in INLINE_SPECIAL:
                    run_end += 1
                self._emit_text(text[pos:run_end], out)
                pos = run_end
                continue

            # Backslash escape: \* -> literal *
            if char == "\\":
                if pos + 1 < end and text[pos + 1] in ASCII_PUNCTUATION:
                    self._emit_text(text[pos + 1], out)
                    pos += 2
                    continue

            elif char in EMPHASIS_MARKERS:
                new_pos = self._try_parse_emphasis(text, pos, end, out)
                if new_pos is not None:
                    pos = new_pos
                    continue
                # No closer: the opener is literal text
                count = 2 if pos + 1 < end and text[pos + 1] == char else 1
                self._emit_text(char * count, out)
                pos += count
                continue

            elif char == "~":
                if config.enable_strikethrough and text.startswith("~~", pos):
                    new_pos = self._try_parse_strikethrough(text, pos, end, out)
                    if new_pos is not None:
                        pos = new_pos
                        continue
                    self._emit_text("~~", out)
                    pos += 2
                    continue

            elif char == "`":
                new_pos = self._try_parse_code_span(text, pos, end, out)
                if new_pos is not None:
                    pos = new_pos
                    continue
                # Unterminated: the whole backtick run is literal
                count = run_length(text, pos, end, "`")
                out.append("`" * count)
                pos += count
                continue

            elif char == "!":
                if pos + 1 < end and text[pos + 1] == "[":
                    new_pos = self._try_parse_image(text, pos, end, out)
                    if new_pos is not None:
                        pos = new_pos
                        continue

            elif char == "[":
                new_pos = self._try_parse_link(text, pos, end, out)
                if new_pos is not None:
                    pos = new_pos
                    continue

            elif char == "<":
                if config.enable_autolinks:
                    new_pos = self._try_parse_autolink(text, pos, end, out)
                    if new_pos is not None:
                        pos = new_pos
                        continue
                if config.enable_inline_html:
                    new_pos = self._try_parse_html_inline(text, pos, end, out)
                    if new_pos is not None:
                        pos = new_pos
                        continue

            elif char == "\n":
                out.append("<br>" if config.hard_line_breaks else " ")
                pos += 1
                continue

            self._emit_text(char, out)
            pos += 1

        return pos

    def _parse_nested(self, text: str, start: int, end: int, out: OutputBuffer) -> int:
        """Recursively render a nested span, enforcing the depth ceiling."""
        if self._depth >= self._config.max_nesting_depth:
            logger.debug(
                "Nesting depth %d reached, emitting %d chars as text",
                self._depth,
                end - start,
            )
            self._emit_text(text[start:end], out)
            return end

        self._depth += 1
        try:
            return self.parse_inline(text, start, end, out)
        finally:
            self._depth -= 1

    def _emit_text(self, text: str, out: OutputBuffer) -> None:
        """Append text, escaped when escape_html is enabled."""
        out.append(escape_html(text) if self._config.escape_html else text)

