"""Link and image parsing for Marcador parser.

Handles inline links, reference links (full, collapsed and shortcut) and
images. Destinations run to the first ``)``; a quoted title may follow the
url inside the parentheses.

Reference labels are looked up in the parser's reference table, which is
complete before any inline content is rendered, so definitions may appear
anywhere in the document.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from marcador.errors import InvalidInputError

if TYPE_CHECKING:
    from marcador.buffer import OutputBuffer
    from marcador.config import MarkerConfig
    from marcador.references import ReferenceTable


def split_destination(raw: str) -> tuple[str, str | None]:
    """Split the inside of ``(...)`` into url and optional title.

    The title sits between the first ``"`` and the last ``"``.

    Example:
        >>> split_destination(' https://example.com "Example" ')
        ('https://example.com', 'Example')
    """
    raw = raw.strip()
    quote = raw.find('"')
    if quote == -1:
        return raw, None

    url = raw[:quote].strip()
    rest = raw[quote + 1 :]
    close = rest.rfind('"')
    title = rest[:close] if close != -1 else ""
    return url, title or None


def find_bracket_close(text: str, start: int, end: int) -> int:
    """Find the ``]`` closing a bracket opened just before start.

    Nested bracket pairs are skipped; backslash-escaped brackets do not count.

    Returns:
        Position of the closing bracket, or -1
    """
    depth = 0
    pos = start
    while pos < end:
        char = text[pos]
        if char == "\\":
            pos += 2
            continue
        if char == "[":
            depth += 1
        elif char == "]":
            if depth == 0:
                return pos
            depth -= 1
        pos += 1
    return -1


class LinkParsingMixin:
    """Mixin for link and image parsing.

    Required Host Attributes:
        - _config: MarkerConfig
        - _refs: ReferenceTable

    Required Host Methods:
        - _parse_nested(text, start, end, out) -> int
        - _emit_text(text, out) -> None

    """

    _config: MarkerConfig
    _refs: ReferenceTable

    def _try_parse_link(self, text: str, pos: int, end: int, out: OutputBuffer) -> int | None:
        """Render a link starting at the ``[`` at pos.

        Forms, tried in order:
            [text](url "title")
            [text][label] / [text][]
            [text]

        Returns:
            Position after the construct, or None when nothing resolves

        Raises:
            InvalidInputError: If pos is not ``[``
        """
        if pos >= end or text[pos] != "[":
            raise InvalidInputError(f"No link opener at position {pos}")

        text_start = pos + 1
        text_end = find_bracket_close(text, text_start, end)
        if text_end == -1:
            return None
        after = text_end + 1

        # Inline: [text](url "title")
        if after < end and text[after] == "(":
            dest_end = text.find(")", after + 1, end)
            if dest_end == -1:
                return None
            url, title = split_destination(text[after + 1 : dest_end])
            self._emit_link(text, text_start, text_end, url, title, out)
            return dest_end + 1

        # Full or collapsed reference: [text][label] / [text][]
        if after < end and text[after] == "[":
            label_end = text.find("]", after + 1, end)
            if label_end != -1:
                label = text[after + 1 : label_end] or text[text_start:text_end]
                ref = self._refs.find(label)
                if ref is not None:
                    self._emit_link(text, text_start, text_end, ref.url, ref.title, out)
                    return label_end + 1

        # Shortcut reference: [text]
        ref = self._refs.find(text[text_start:text_end])
        if ref is not None:
            self._emit_link(text, text_start, text_end, ref.url, ref.title, out)
            return after

        return None

    def _try_parse_image(self, text: str, pos: int, end: int, out: OutputBuffer) -> int | None:
        """Render ``![alt](url "title")`` starting at pos.

        Alt text runs to the first ``]`` and is emitted flat, without inline
        parsing.

        Raises:
            InvalidInputError: If pos does not start with ``![``
        """
        if pos + 2 > end or not text.startswith("![", pos):
            raise InvalidInputError(f"No image opener at position {pos}")

        alt_end = text.find("]", pos + 2, end)
        if alt_end == -1 or alt_end + 1 >= end or text[alt_end + 1] != "(":
            return None

        dest_end = text.find(")", alt_end + 2, end)
        if dest_end == -1:
            return None

        url, title = split_destination(text[alt_end + 2 : dest_end])
        out.append('<img src="')
        self._emit_text(url, out)
        out.append('" alt="')
        self._emit_text(text[pos + 2 : alt_end], out)
        out.append('"')
        if title:
            out.append(' title="')
            self._emit_text(title, out)
            out.append('"')
        out.append(">")
        return dest_end + 1

    def _emit_link(
        self,
        text: str,
        text_start: int,
        text_end: int,
        url: str,
        title: str | None,
        out: OutputBuffer,
    ) -> None:
        """Emit an anchor whose content is the inline-parsed link text."""
        out.append('<a href="')
        self._emit_text(url, out)
        out.append('"')
        if title:
            out.append(' title="')
            self._emit_text(title, out)
            out.append('"')
        out.append(">")
        self._parse_nested(text, text_start, text_end, out)
        out.append("</a>")
