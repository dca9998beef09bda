"""Inline parsing subsystem for Marcador parser.

Provides mixins for rendering inline Markdown content:
- Emphasis and strong (*, _)
- Strikethrough (~~)
- Code spans (`)
- Links, reference links and images
- Autolinks and raw inline HTML

Architecture:
A recursive scanner over bounded ranges; each construct renders
straight into the output buffer.

"""

from __future__ import annotations

from marcador.parsing.inline.core import InlineParsingCoreMixin
from marcador.parsing.inline.emphasis import EmphasisMixin
from marcador.parsing.inline.links import LinkParsingMixin
from marcador.parsing.inline.special import SpecialInlineMixin


class InlineParsingMixin(
    InlineParsingCoreMixin,
    EmphasisMixin,
    LinkParsingMixin,
    SpecialInlineMixin,
):
    """Combined inline parsing mixin.

    Combines all inline parsing functionality into a single mixin
    that can be inherited by the Parser class.

    Required Host Attributes:
        - _config: MarkerConfig
        - _refs: ReferenceTable
        - _depth: int

    """

    pass


__all__ = [
    "EmphasisMixin",
    "InlineParsingCoreMixin",
    "InlineParsingMixin",
    "LinkParsingMixin",
    "SpecialInlineMixin",
]
