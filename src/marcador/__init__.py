"""
Marcador: Markdown to HTML in a single pass

Renders a practical Markdown dialect (headings, lists, task lists, pipe
tables, fenced code, block quotes, reference links) straight into HTML,
with no intermediate tree and zero runtime dependencies.

Quick Start:
    >>> from marcador import Markdown
    >>> md = Markdown()
    >>> md("# Hello **World**")
    '<h1>Hello <strong>World</strong></h1>\\n'

    >>> # Full documents with a stylesheet
    >>> html = md.document("Some *text*", css_path="style.css")

Result codes:
    >>> from marcador import api
    >>> api.convert_file_to_file("in.md", "out.html")
    <Result.OK: 0>

Installation:
    pip install marcador
"""

from __future__ import annotations

import os
from dataclasses import asdict

from marcador import api
from marcador.buffer import OutputBuffer
from marcador.config import DEFAULT_BUFFER_SIZE, MAX_NESTING_DEPTH, MarkerConfig, configure_defaults
from marcador.discovery import MarkdownEntry, html_path_for, scan_markdown_files
from marcador.document import (
    convert_file_to_file,
    convert_files_to_files,
    convert_to_html,
    render_document,
)
from marcador.errors import (
    AllocationError,
    BufferTooSmallError,
    InvalidInputError,
    InvalidSizeError,
    IOFailedError,
    MarcadorError,
    NullArgumentError,
    ParseError,
    Result,
    raise_for_result,
)
from marcador.lexer import Lexer
from marcador.parser import Parser
from marcador.references import ReferenceLink, ReferenceTable
from marcador.tokens import Token, TokenType
from marcador.utils.text import escape_html
from marcador.validation import validate

__version__ = "1.0.0"


class Markdown:
    """High-level Markdown processor.

    Keeps one Parser, so reference definitions seen in earlier calls stay
    resolvable until ``clear_references()``. Errors are raised as
    ``MarcadorError`` subclasses.

    Usage:
        >>> md = Markdown(tables=False)
        >>> md("| a | b |")
        '<p>| a | b |</p>\\n'

    Thread Safety:
        Not thread-safe. Use one Markdown instance per thread.

    """

    __slots__ = ("_parser",)

    def __init__(self, config: MarkerConfig | None = None, **options: bool | int) -> None:
        """Initialize Markdown processor.

        Args:
            config: Base configuration (defaults when None)
            **options: Short names overriding config fields:
                tables, strikethrough, task_lists, autolinks, inline_html,
                escape_html, hard_line_breaks, or any full field name.
        """
        config = config or configure_defaults()
        if options:
            config = MarkerConfig.from_dict(
                {**asdict(config), **{_OPTION_ALIASES.get(k, k): v for k, v in options.items()}}
            )
        self._parser = Parser(config)

    @property
    def config(self) -> MarkerConfig:
        return self._parser.config

    def __call__(self, source: str) -> str:
        """Render Markdown to an HTML body fragment."""
        return self._parser.parse(source, self._parser.new_buffer()).getvalue()

    def inline(self, text: str) -> str:
        """Render inline Markdown only (no block structure)."""
        return self._parser.parse_inline_text(text, self._parser.new_buffer()).getvalue()

    def document(self, source: str, css_path: str | None = None) -> str:
        """Render Markdown to a complete HTML document."""
        return render_document(self(source), css_path)

    def convert_file(
        self,
        input_path: str | os.PathLike[str],
        output_path: str | os.PathLike[str],
        css_path: str | None = None,
    ) -> None:
        """Convert one Markdown file with this processor's configuration."""
        convert_file_to_file(input_path, output_path, css_path, config=self._parser.config)

    def add_reference(self, label: str, url: str, title: str | None = None) -> ReferenceLink:
        return self._parser.add_reference_link(label, url, title)

    def clear_references(self) -> None:
        self._parser.clear_reference_links()


_OPTION_ALIASES = {
    "tables": "enable_tables",
    "strikethrough": "enable_strikethrough",
    "task_lists": "enable_task_lists",
    "autolinks": "enable_autolinks",
    "inline_html": "enable_inline_html",
}


__all__ = [
    # Config
    "DEFAULT_BUFFER_SIZE",
    "MAX_NESTING_DEPTH",
    "MarkerConfig",
    "configure_defaults",
    # Core
    "Lexer",
    "Markdown",
    "OutputBuffer",
    "Parser",
    "ReferenceLink",
    "ReferenceTable",
    "Token",
    "TokenType",
    # Documents and files
    "MarkdownEntry",
    "convert_file_to_file",
    "convert_files_to_files",
    "convert_to_html",
    "html_path_for",
    "render_document",
    "scan_markdown_files",
    # Utilities
    "escape_html",
    "validate",
    # Errors
    "AllocationError",
    "BufferTooSmallError",
    "IOFailedError",
    "InvalidInputError",
    "InvalidSizeError",
    "MarcadorError",
    "NullArgumentError",
    "ParseError",
    "Result",
    "raise_for_result",
    # Result-returning interface
    "api",
    "__version__",
]
