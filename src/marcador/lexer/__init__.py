"""Line lexer for Marcador.

Classifies physical lines into block tokens for the segmenter.
"""

from marcador.lexer.core import Lexer, split_lines
from marcador.lexer.modes import LexerMode

__all__ = ["Lexer", "LexerMode", "split_lines"]
