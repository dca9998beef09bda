"""Result-returning interface.

Every function here reports failure by returning a ``Result`` instead of
raising. Exceptions from the engine are caught at this boundary only;
``Result.OK`` means the operation completed.

Usage:
    >>> from marcador import api
    >>> parser = api.create_parser()
    >>> out = OutputBuffer()
    >>> api.parse(parser, "*hi*", out)
    <Result.OK: 0>
    >>> out.getvalue()
    '<p><em>hi</em></p>\\n'

Functions returning data alongside a result return a ``(Result, value)``
pair; the value is empty when the result is not OK.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import wraps
from typing import ParamSpec

from marcador import document
from marcador.buffer import OutputBuffer
from marcador.config import MarkerConfig
from marcador.config import configure_defaults as _configure_defaults
from marcador.errors import MarcadorError, NullArgumentError, Result
from marcador.parser import Parser
from marcador.utils.logger import get_logger
from marcador.utils.text import escape_html, escape_html_fixed
from marcador.validation import validate as _validate

logger = get_logger(__name__)

P = ParamSpec("P")

VERSION = "1.0.0"


def _returns_result(func: Callable[P, None]) -> Callable[P, Result]:
    """Run func, mapping a raised MarcadorError to its Result."""

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result:
        try:
            func(*args, **kwargs)
        except MarcadorError as exc:
            logger.debug("%s failed: %s", func.__name__, exc)
            return exc.result
        return Result.OK

    return wrapper


def version() -> str:
    return VERSION


def error_string(result: Result | int) -> str:
    """Return the message for a result code."""
    try:
        return Result(result).message
    except ValueError:
        return "Unknown error"


def configure_defaults() -> MarkerConfig:
    return _configure_defaults()


def create_parser(config: MarkerConfig | None = None) -> Parser | None:
    """Create a parser, or return None when the configuration is invalid."""
    try:
        return Parser(config)
    except MarcadorError as exc:
        logger.debug("create_parser failed: %s", exc)
        return None


@_returns_result
def destroy_parser(parser: Parser) -> None:
    if parser is None:
        raise NullArgumentError("destroy_parser() requires a parser")
    parser.destroy()


@_returns_result
def parse(parser: Parser, markdown: str, output: OutputBuffer) -> None:
    """Render markdown with parser, appending the HTML body to output."""
    if parser is None:
        raise NullArgumentError("parse() requires a parser")
    parser.parse(markdown, output)


@_returns_result
def parse_inline(parser: Parser, text: str, output: OutputBuffer) -> None:
    """Render a single inline span, appending HTML to output."""
    if parser is None:
        raise NullArgumentError("parse_inline() requires a parser")
    parser.parse_inline_text(text, output)


def convert_to_html(
    markdown: str,
    css_path: str | None = None,
    *,
    config: MarkerConfig | None = None,
    html_size: int | None = None,
) -> tuple[Result, str]:
    """Convert markdown to a complete HTML document.

    Returns:
        ``(Result.OK, html)`` or ``(error, "")``
    """
    try:
        html = document.convert_to_html(markdown, css_path, config=config, html_size=html_size)
    except MarcadorError as exc:
        logger.debug("convert_to_html failed: %s", exc)
        return exc.result, ""
    return Result.OK, html


@_returns_result
def convert_file_to_file(
    input_path: str,
    output_path: str,
    css_path: str | None = None,
    *,
    config: MarkerConfig | None = None,
) -> None:
    document.convert_file_to_file(input_path, output_path, css_path, config=config)


@_returns_result
def convert_files_to_files(
    pairs: Sequence[tuple[str, str]],
    css_path: str | None = None,
    *,
    config: MarkerConfig | None = None,
) -> None:
    """Convert pairs in order, returning the result of the first failure."""
    document.convert_files_to_files(pairs, css_path, config=config)


@_returns_result
def add_reference_link(parser: Parser, label: str, url: str, title: str | None = None) -> None:
    if parser is None:
        raise NullArgumentError("add_reference_link() requires a parser")
    parser.add_reference_link(label, url, title)


@_returns_result
def clear_reference_links(parser: Parser) -> None:
    if parser is None:
        raise NullArgumentError("clear_reference_links() requires a parser")
    parser.clear_reference_links()


def escape(text: str, output_size: int | None = None) -> tuple[Result, str]:
    """Escape HTML special characters.

    With output_size, the escaped text plus a terminator must fit in it.
    """
    try:
        if output_size is None:
            if text is None:
                raise NullArgumentError("escape() requires text")
            return Result.OK, escape_html(text)
        return Result.OK, escape_html_fixed(text, output_size)
    except MarcadorError as exc:
        return exc.result, ""


def validate(markdown: str | None) -> tuple[bool, str]:
    """Check fence balance; see ``marcador.validation.validate``."""
    return _validate(markdown)


__all__ = [
    "VERSION",
    "add_reference_link",
    "clear_reference_links",
    "configure_defaults",
    "convert_file_to_file",
    "convert_files_to_files",
    "convert_to_html",
    "create_parser",
    "destroy_parser",
    "error_string",
    "escape",
    "parse",
    "parse_inline",
    "validate",
    "version",
]
