"""Document assembly and file conversion.

Wraps a rendered body in a fixed HTML prologue and epilogue and provides
the file and batch entry points. Files are read whole, converted, and
written whole; nothing is streamed.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from marcador.buffer import OutputBuffer
from marcador.config import MarkerConfig
from marcador.errors import (
    BufferTooSmallError,
    IOFailedError,
    InvalidSizeError,
    MarcadorError,
    NullArgumentError,
)
from marcador.parser import Parser
from marcador.utils.logger import get_logger
from marcador.utils.text import escape_html

logger = get_logger(__name__)

StrPath = str | os.PathLike[str]

DOCUMENT_PROLOGUE = "<!DOCTYPE html><html><head>"
DOCUMENT_HEAD_END = "</head><body>"
DOCUMENT_EPILOGUE = "</body></html>"


def stylesheet_link(css_path: str) -> str:
    """Return the ``<link>`` element for a stylesheet path."""
    return f'<link rel="stylesheet" href="{escape_html(css_path)}">'


def render_document(body: str, css_path: str | None = None) -> str:
    """Wrap an HTML body into a complete document.

    Example:
        >>> render_document("<p>Hi</p>\\n")
        '<!DOCTYPE html><html><head></head><body><p>Hi</p>\\n</body></html>'

    """
    if body is None:
        raise NullArgumentError("render_document() requires a body")

    out = OutputBuffer(len(body) + 128)
    out.append(DOCUMENT_PROLOGUE)
    if css_path:
        out.append(stylesheet_link(css_path))
    out.append(DOCUMENT_HEAD_END)
    out.append(body)
    out.append(DOCUMENT_EPILOGUE)
    return out.getvalue()


def convert_to_html(
    markdown: str,
    css_path: str | None = None,
    *,
    config: MarkerConfig | None = None,
    html_size: int | None = None,
) -> str:
    """Convert a Markdown document to a complete HTML document.

    Uses a fresh Parser, so no reference definitions leak between calls.

    Args:
        markdown: Markdown source text
        css_path: Optional stylesheet linked from the head
        config: Parse configuration (defaults when None)
        html_size: Size of a fixed destination, terminator included.
            When given, a document that does not fit raises.

    Returns:
        The HTML document

    Raises:
        NullArgumentError: If markdown is None
        InvalidSizeError: If html_size is not positive
        BufferTooSmallError: If the document does not fit in html_size
    """
    if markdown is None:
        raise NullArgumentError("convert_to_html() requires markdown")
    if html_size is not None and html_size <= 0:
        raise InvalidSizeError(f"Invalid html size: {html_size}")

    with Parser(config) as parser:
        body = parser.parse(markdown, parser.new_buffer()).getvalue()
    html = render_document(body, css_path)

    if html_size is not None and len(html) + 1 > html_size:
        raise BufferTooSmallError(len(html) + 1, html_size)
    return html


def _read_text(path: StrPath) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        raise IOFailedError(os.fspath(path), str(exc)) from exc


def _write_text(path: StrPath, text: str) -> None:
    try:
        Path(path).write_text(text, encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        raise IOFailedError(os.fspath(path), str(exc)) from exc


def convert_file_to_file(
    input_path: StrPath,
    output_path: StrPath,
    css_path: str | None = None,
    *,
    config: MarkerConfig | None = None,
) -> None:
    """Convert one Markdown file into one HTML document file.

    Raises:
        NullArgumentError: If a path is None
        IOFailedError: If the input cannot be read or the output written
    """
    if input_path is None or output_path is None:
        raise NullArgumentError("convert_file_to_file() requires input and output paths")

    markdown = _read_text(input_path)
    html = convert_to_html(markdown, css_path, config=config)
    _write_text(output_path, html)
    logger.debug("Converted %s -> %s (%d chars)", input_path, output_path, len(html))


def convert_files_to_files(
    pairs: Sequence[tuple[StrPath, StrPath]],
    css_path: str | None = None,
    *,
    config: MarkerConfig | None = None,
) -> int:
    """Convert ``(input, output)`` pairs in order.

    Stops at the first failing pair; outputs already written are kept.

    Returns:
        Number of files converted

    Raises:
        NullArgumentError: If pairs is None
        InvalidSizeError: If pairs is empty
        MarcadorError: The failure of the first failing pair
    """
    if pairs is None:
        raise NullArgumentError("convert_files_to_files() requires a list of pairs")
    if len(pairs) == 0:
        raise InvalidSizeError("convert_files_to_files() requires at least one pair")

    converted = 0
    for input_path, output_path in pairs:
        try:
            convert_file_to_file(input_path, output_path, css_path, config=config)
        except MarcadorError as exc:
            logger.error("Failed to convert %s: %s", input_path, exc)
            raise
        converted += 1
    return converted


__all__ = [
    "convert_file_to_file",
    "convert_files_to_files",
    "convert_to_html",
    "render_document",
    "stylesheet_link",
]
