"""Minimal logging utilities for Marcador.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from marcador.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsing document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "marcador." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'marcador.mymodule'
    """
    if not (name == "marcador" or name.startswith("marcador.")):
        name = f"marcador.{name}"
    return logging.getLogger(name)
