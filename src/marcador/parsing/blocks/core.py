"""Block segmentation for Marcador parser.

Walks the line tokens of a document and renders each block, keeping a
single piece of state: which container (fenced code, list, table) is
currently open.

Containers close as follows:
    - A blank line, heading, thematic break, block quote or paragraph line
      closes an open list or table.
    - A list item closes an open table.
    - A table line closes an open list; a new table header closes the
      table before it.
    - The end of the document closes whatever is still open.

Reference definitions are collected before any line is rendered so that a
reference resolves wherever its definition appears.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from marcador.lexer import Lexer, LexerMode
from marcador.parsing.blocks.list import ListParsingMixin
from marcador.parsing.blocks.table import TableParsingMixin
from marcador.references import normalize_label
from marcador.tokens import Token, TokenType
from marcador.utils.logger import get_logger
from marcador.utils.text import append_escaped, escape_html

if TYPE_CHECKING:
    from marcador.buffer import OutputBuffer
    from marcador.config import MarkerConfig
    from marcador.references import ReferenceTable

logger = get_logger(__name__)

# Token types that end an open list or table
_CLOSES_CONTAINERS = frozenset(
    {
        TokenType.BLANK_LINE,
        TokenType.ATX_HEADING,
        TokenType.THEMATIC_BREAK,
        TokenType.BLOCK_QUOTE,
        TokenType.PARAGRAPH_LINE,
        TokenType.FENCED_CODE_START,
    }
)


@dataclass(slots=True)
class BlockState:
    """Open-container state for one document."""

    mode: LexerMode = LexerMode.BLOCK
    list_ordered: bool = False


class BlockParsingMixin(ListParsingMixin, TableParsingMixin):
    """Block-level rendering.

    Required Host Attributes:
        - _config: MarkerConfig
        - _refs: ReferenceTable

    Required Host Methods:
        - parse_inline(text, start, end, out) -> int

    """

    _config: MarkerConfig
    _refs: ReferenceTable

    def _render_blocks(self, source: str, out: OutputBuffer) -> None:
        """Render a whole document body into out."""
        config = self._config
        lexer = Lexer(
            source,
            tables_enabled=config.enable_tables,
            task_lists_enabled=config.enable_task_lists,
        )
        tokens = list(lexer.tokenize())
        self._collect_reference_definitions(tokens)

        state = BlockState()
        for token in tokens:
            self._render_token(token, state, out)
        self._close_open_block(state, out)

        logger.debug(
            "Rendered %d lines (longest %d chars) into %d chars",
            len(tokens),
            lexer.longest_line,
            out.size,
        )

    def _collect_reference_definitions(self, tokens: Iterable[Token]) -> int:
        count = 0
        for token in tokens:
            if token.type is not TokenType.LINK_REFERENCE_DEF:
                continue
            # A blank label can never be referenced
            if not normalize_label(token.label):
                continue
            self._refs.add(token.label, token.url, token.title)
            count += 1
        if count:
            logger.debug("Collected %d reference definitions", count)
        return count

    def _render_token(self, token: Token, state: BlockState, out: OutputBuffer) -> None:
        token_type = token.type

        if state.mode is LexerMode.CODE_FENCE:
            if token_type is TokenType.FENCED_CODE_END:
                out.append("</code></pre>\n")
                state.mode = LexerMode.BLOCK
            else:
                append_escaped(out, token.value)
                out.append("\n")
            return

        if token_type in _CLOSES_CONTAINERS:
            self._close_open_block(state, out)

        match token_type:
            case TokenType.FENCED_CODE_START:
                if token.info:
                    out.append(f'<pre><code class="language-{escape_html(token.info)}">')
                else:
                    out.append("<pre><code>")
                state.mode = LexerMode.CODE_FENCE

            case TokenType.LINK_REFERENCE_DEF:
                # Collected up front; renders nothing
                pass

            case TokenType.BLANK_LINE:
                out.append("\n")

            case TokenType.ATX_HEADING:
                out.append(f"<h{token.level}>")
                self._render_inline(token.value, out)
                out.append(f"</h{token.level}>\n")

            case TokenType.THEMATIC_BREAK:
                out.append("<hr>\n")

            case TokenType.BLOCK_QUOTE:
                out.append("<blockquote>")
                self._render_inline(token.value, out)
                out.append("</blockquote>\n")

            case TokenType.LIST_ITEM:
                if state.mode is LexerMode.TABLE:
                    self._close_open_block(state, out)
                if state.mode is not LexerMode.LIST:
                    state.mode = LexerMode.LIST
                    state.list_ordered = token.ordered
                    self._open_list(token.ordered, out)
                self._render_list_item(token, out)

            case TokenType.TABLE_HEADER:
                # A header always starts a fresh table
                self._close_open_block(state, out)
                self._open_table(token.value, out)
                state.mode = LexerMode.TABLE

            case TokenType.PIPE_LINE:
                if state.mode is LexerMode.LIST:
                    self._close_open_block(state, out)
                if state.mode is LexerMode.TABLE:
                    self._render_table_row(token.value, out, header=False)
                else:
                    self._render_paragraph(token.value, out)

            case TokenType.PARAGRAPH_LINE:
                self._render_paragraph(token.value, out)

            case TokenType.FENCED_CODE_CONTENT | TokenType.FENCED_CODE_END:
                # Only produced inside a fence
                pass

    def _close_open_block(self, state: BlockState, out: OutputBuffer) -> None:
        """Close whichever container is open and return to block mode."""
        match state.mode:
            case LexerMode.LIST:
                self._close_list(state.list_ordered, out)
            case LexerMode.TABLE:
                self._close_table(out)
            case LexerMode.CODE_FENCE:
                out.append("</code></pre>\n")
            case _:
                return
        state.mode = LexerMode.BLOCK

    def _render_paragraph(self, text: str, out: OutputBuffer) -> None:
        out.append("<p>")
        self._render_inline(text, out)
        out.append("</p>\n")

    def _render_inline(self, text: str, out: OutputBuffer) -> None:
        self.parse_inline(text, 0, len(text), out)
