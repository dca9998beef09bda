"""Markdown parser rendering HTML directly into an output buffer.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `InlineParsingMixin`: Inline content (emphasis, links, code spans)
- `BlockParsingMixin`: Line segmentation (headings, lists, tables, fences)

There is no intermediate tree: each line is rendered as soon as it is
classified, so a parse is a single pass after the reference definitions
have been collected.

Thread Safety:
- A Parser holds an immutable MarkerConfig and a mutable reference table.
- Parser instances are not thread-safe; use one per thread.

"""

from __future__ import annotations

from types import TracebackType

from marcador.buffer import OutputBuffer
from marcador.config import MarkerConfig, configure_defaults
from marcador.errors import InvalidSizeError, NullArgumentError
from marcador.parsing.blocks import BlockParsingMixin
from marcador.parsing.inline import InlineParsingMixin
from marcador.references import ReferenceLink, ReferenceTable
from marcador.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Markdown to HTML parser.

    Reference definitions accumulate across parses until
    ``clear_reference_links()`` is called.

    Usage:
            >>> parser = Parser()
            >>> out = OutputBuffer()
            >>> _ = parser.parse("# Hello\\n\\nWorld", out)
            >>> out.getvalue()
            '<h1>Hello</h1>\\n\\n<p>World</p>\\n'

    """

    __slots__ = (
        "_config",
        "_refs",
        # Current inline recursion depth
        "_depth",
    )

    def __init__(self, config: MarkerConfig | None = None) -> None:
        """Initialize parser with a configuration.

        Args:
            config: Parse configuration (defaults when None)

        Raises:
            InvalidSizeError: If a size field of the configuration is negative
        """
        if config is None:
            config = configure_defaults()
        if config.max_nesting_depth < 0:
            raise InvalidSizeError(f"Invalid max_nesting_depth: {config.max_nesting_depth}")
        if config.initial_buffer_size < 0:
            raise InvalidSizeError(f"Invalid initial_buffer_size: {config.initial_buffer_size}")

        self._config = config
        self._refs = ReferenceTable()
        self._depth = 0

    @property
    def config(self) -> MarkerConfig:
        return self._config

    @property
    def reference_links(self) -> ReferenceTable:
        """The reference definitions known to this parser."""
        return self._refs

    def new_buffer(self) -> OutputBuffer:
        """Create an empty output buffer sized by the configuration."""
        return OutputBuffer(self._config.initial_buffer_size)

    def parse(self, markdown: str, out: OutputBuffer) -> OutputBuffer:
        """Render a Markdown document, appending HTML to out.

        Args:
            markdown: Markdown source text
            out: Buffer receiving the HTML body

        Returns:
            out, for chaining

        Raises:
            NullArgumentError: If markdown or out is None
        """
        if markdown is None or out is None:
            raise NullArgumentError("parse() requires markdown and an output buffer")

        logger.debug("Parsing %d chars", len(markdown))
        self._depth = 0
        self._render_blocks(markdown, out)
        return out

    def parse_inline_text(self, text: str, out: OutputBuffer) -> OutputBuffer:
        """Render a single span of inline Markdown, appending HTML to out.

        Raises:
            NullArgumentError: If text or out is None
        """
        if text is None or out is None:
            raise NullArgumentError("parse_inline_text() requires text and an output buffer")

        self._depth = 0
        self.parse_inline(text, 0, len(text), out)
        return out

    def add_reference_link(self, label: str, url: str, title: str | None = None) -> ReferenceLink:
        """Register a reference definition programmatically."""
        return self._refs.add(label, url, title)

    def clear_reference_links(self) -> None:
        """Forget every reference definition."""
        self._refs.clear()

    def destroy(self) -> None:
        """Release per-parser state. The parser stays usable."""
        logger.debug("Destroying parser with %d reference links", len(self._refs))
        self._refs.clear()

    def __enter__(self) -> Parser:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.destroy()

    def __repr__(self) -> str:
        return f"<Parser refs={len(self._refs)} depth_limit={self._config.max_nesting_depth}>"
