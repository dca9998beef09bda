"""List rendering for Marcador parser.

A list opens on its first item and takes its type (ordered or unordered)
from that item's marker; later items join it whatever their marker. Any
non-item line closes it. Task items carry a disabled checkbox.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from marcador.buffer import OutputBuffer
    from marcador.tokens import Token


class ListParsingMixin:
    """Mixin for list blocks.

    Required Host Methods:
        - parse_inline(text, start, end, out) -> int

    """

    def _open_list(self, ordered: bool, out: OutputBuffer) -> None:
        out.append("<ol>\n" if ordered else "<ul>\n")

    def _close_list(self, ordered: bool, out: OutputBuffer) -> None:
        out.append("</ol>\n" if ordered else "</ul>\n")

    def _render_list_item(self, token: Token, out: OutputBuffer) -> None:
        if token.checked is None:
            out.append("<li>")
        else:
            out.append('<li class="task-list-item">')
            out.append('<input type="checkbox" checked disabled> ' if token.checked else '<input type="checkbox" disabled> ')
        self.parse_inline(token.value, 0, len(token.value), out)
        out.append("</li>\n")
