"""Text processing utilities for Marcador.

The HTML escaper is a fixed character-to-entity table. Escaping is not
idempotent: escaping ``&amp;`` again yields ``&amp;amp;``.

Example:
    >>> from marcador.utils.text import escape_html
    >>> escape_html('<a href="x">')
    '&lt;a href=&quot;x&quot;&gt;'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from marcador.errors import BufferTooSmallError, InvalidSizeError, NullArgumentError

if TYPE_CHECKING:
    from marcador.buffer import OutputBuffer

# Character -> entity substitutions applied by the escaper
HTML_ENTITIES: dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}

_ESCAPE_TABLE = str.maketrans(HTML_ENTITIES)

# Locale-independent ASCII case fold
_ASCII_FOLD = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def escape_html(text: str) -> str:
    """Escape HTML special characters (& < > " ')."""
    return text.translate(_ESCAPE_TABLE)


def append_escaped(out: OutputBuffer, text: str) -> None:
    """Append text to an output buffer, escaped."""
    out.append(text.translate(_ESCAPE_TABLE))


def escape_html_fixed(text: str, output_size: int) -> str:
    """Escape text into a destination of fixed size.

    The destination must hold the escaped text plus a terminator.

    Args:
        text: Text to escape
        output_size: Size of the destination, terminator included

    Returns:
        Escaped text

    Raises:
        NullArgumentError: If text is None
        InvalidSizeError: If output_size is not positive
        BufferTooSmallError: If the escaped text does not fit
    """
    if text is None:
        raise NullArgumentError("Cannot escape None")
    if output_size <= 0:
        raise InvalidSizeError(f"Invalid output size: {output_size}")
    escaped = escape_html(text)
    if len(escaped) + 1 > output_size:
        raise BufferTooSmallError(len(escaped) + 1, output_size)
    return escaped


def ascii_fold(text: str) -> str:
    """Lowercase ASCII letters only, leaving other characters untouched."""
    return text.translate(_ASCII_FOLD)


__all__ = [
    "HTML_ENTITIES",
    "append_escaped",
    "ascii_fold",
    "escape_html",
    "escape_html_fixed",
]
