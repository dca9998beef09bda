"""Line classifiers for the Marcador lexer.

Each classifier is a mixin that provides classification logic for
a specific block type. Classifiers are pure: they look at one trimmed
line and return a Token or None.
"""

from marcador.lexer.classifiers.fence import FenceClassifierMixin
from marcador.lexer.classifiers.heading import HeadingClassifierMixin
from marcador.lexer.classifiers.link_ref import LinkRefClassifierMixin
from marcador.lexer.classifiers.list import ListClassifierMixin
from marcador.lexer.classifiers.quote import QuoteClassifierMixin
from marcador.lexer.classifiers.table import TableClassifierMixin, is_table_separator
from marcador.lexer.classifiers.thematic import ThematicClassifierMixin

__all__ = [
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
    "LinkRefClassifierMixin",
    "ListClassifierMixin",
    "QuoteClassifierMixin",
    "TableClassifierMixin",
    "ThematicClassifierMixin",
    "is_table_separator",
]
