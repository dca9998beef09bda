"""Parser configuration for Marcador.

A ``MarkerConfig`` is an immutable value. A Parser keeps the instance it was
created with, so the configuration seen by a parse can never change under it.

Usage:
    config = configure_defaults().with_changes(enable_tables=False)
    parser = Parser(config)

Disabling a feature never produces an error: its syntax passes through as
literal text.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

# Default capacity for output buffers
DEFAULT_BUFFER_SIZE = 4096

# Default ceiling for recursive inline descent
MAX_NESTING_DEPTH = 32


@dataclass(frozen=True, slots=True)
class MarkerConfig:
    """Immutable parse configuration.

    Attributes:
        enable_tables: Enable GFM pipe tables
        enable_strikethrough: Enable ~~strikethrough~~ syntax
        enable_task_lists: Enable - [ ] task list items
        enable_autolinks: Enable <https://...> and <user@host> autolinks
        enable_inline_html: Pass <tags> through verbatim
        escape_html: Escape HTML special characters in text
        smart_quotes: Accepted for compatibility; not consulted by the engine
        hard_line_breaks: Render newlines inside inline text as <br>
        max_nesting_depth: Ceiling for recursive inline descent
        initial_buffer_size: Initial capacity of output buffers

    """

    enable_tables: bool = True
    enable_strikethrough: bool = True
    enable_task_lists: bool = True
    enable_autolinks: bool = True
    enable_inline_html: bool = True
    escape_html: bool = True
    smart_quotes: bool = False
    hard_line_breaks: bool = False
    max_nesting_depth: int = MAX_NESTING_DEPTH
    initial_buffer_size: int = DEFAULT_BUFFER_SIZE

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> MarkerConfig:
        """Create MarkerConfig from a mapping.

        Only keys that are MarkerConfig fields are used; unknown keys
        are silently ignored.

        Example:
            >>> config = MarkerConfig.from_dict({
            ...     "enable_tables": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.enable_tables
            False

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    def with_changes(self, **changes: Any) -> MarkerConfig:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


# Module-level default config (immutable, safe to share)
_DEFAULT_CONFIG = MarkerConfig()


def configure_defaults() -> MarkerConfig:
    """Return the default configuration.

    Tables, strikethrough, task lists, autolinks, inline HTML and escaping
    are enabled; smart quotes and hard line breaks are disabled.
    """
    return _DEFAULT_CONFIG


__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "MAX_NESTING_DEPTH",
    "MarkerConfig",
    "configure_defaults",
]
