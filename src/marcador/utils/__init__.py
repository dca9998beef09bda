"""Utility modules for Marcador.

Provides:
- text: escape_html and the ASCII case fold used for labels
- logger: get_logger for logging
"""

from marcador.utils.logger import get_logger
from marcador.utils.text import append_escaped, ascii_fold, escape_html, escape_html_fixed

__all__ = [
    "append_escaped",
    "ascii_fold",
    "escape_html",
    "escape_html_fixed",
    "get_logger",
]
