"""Parsing subsystem for Marcador.

Provides the two engines a Parser combines:
- parsing.inline: recursive span scanner (emphasis, links, code spans)
- parsing.blocks: line-driven block state machine

Submodules are imported directly (``marcador.parsing.charsets`` is shared
with the lexer, so this package stays import-light).
"""
