"""Pipe table rendering for Marcador parser.

A table opens on a header line followed by a separator line; ``|``-bearing
lines after it are body rows until any other line. Cells are split on
``|``, trimmed, and inline-parsed in place.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from marcador.parsing.charsets import WHITESPACE

if TYPE_CHECKING:
    from marcador.buffer import OutputBuffer


def split_cells(line: str) -> list[tuple[int, int]]:
    """Return ``(start, end)`` spans of the trimmed cells of a row.

    Leading whitespace and pipes are skipped; a trailing pipe does not
    produce an empty cell.

    Example:
        >>> line = "| a | b |"
        >>> [line[s:e] for s, e in split_cells(line)]
        ['a', 'b']
    """
    spans: list[tuple[int, int]] = []
    length = len(line)
    pos = 0
    while pos < length and (line[pos] in WHITESPACE or line[pos] == "|"):
        pos += 1

    while pos < length:
        cell_start = pos
        while pos < length and line[pos] != "|":
            pos += 1
        cell_end = pos

        while cell_end > cell_start and line[cell_end - 1] in WHITESPACE:
            cell_end -= 1
        while cell_start < cell_end and line[cell_start] in WHITESPACE:
            cell_start += 1
        spans.append((cell_start, cell_end))

        if pos < length and line[pos] == "|":
            pos += 1
        while pos < length and line[pos] in WHITESPACE:
            pos += 1

    return spans


class TableParsingMixin:
    """Mixin for table blocks.

    Required Host Methods:
        - parse_inline(text, start, end, out) -> int

    """

    def _open_table(self, header: str, out: OutputBuffer) -> None:
        out.append("<table>\n<thead>\n")
        self._render_table_row(header, out, header=True)
        out.append("</thead>\n<tbody>\n")

    def _close_table(self, out: OutputBuffer) -> None:
        out.append("</tbody></table>\n")

    def _render_table_row(self, line: str, out: OutputBuffer, *, header: bool) -> None:
        """Render one row; cells become <th> in the header, <td> otherwise."""
        tag = "th" if header else "td"
        out.append("<tr>")
        for start, end in split_cells(line):
            out.append(f"<{tag}>")
            if end > start:
                self.parse_inline(line, start, end, out)
            out.append(f"</{tag}>")
        out.append("</tr>\n")
