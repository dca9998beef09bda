"""Block-level rendering mixins for Marcador parser."""

from marcador.parsing.blocks.core import BlockParsingMixin, BlockState
from marcador.parsing.blocks.list import ListParsingMixin
from marcador.parsing.blocks.table import TableParsingMixin, split_cells

__all__ = [
    "BlockParsingMixin",
    "BlockState",
    "ListParsingMixin",
    "TableParsingMixin",
    "split_cells",
]
