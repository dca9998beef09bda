"""Tests for the line lexer."""

from __future__ import annotations

import pytest

from marcador.lexer import Lexer, LexerMode, split_lines
from marcador.tokens import Token, TokenType


def _types(source: str, **kwargs: bool) -> list[TokenType]:
    return [token.type for token in Lexer(source, **kwargs).tokenize()]


def _single(source: str, **kwargs: bool) -> Token:
    tokens = list(Lexer(source, **kwargs).tokenize())
    assert len(tokens) == 1
    return tokens[0]


class TestSplitLines:
    """Physical line splitting."""

    def test_empty(self) -> None:
        assert split_lines("") == []

    def test_trailing_newline(self) -> None:
        assert split_lines("a\nb\n") == ["a", "b"]

    def test_trailing_blank_line(self) -> None:
        assert split_lines("a\n\n") == ["a", ""]

    def test_no_trailing_newline(self) -> None:
        assert split_lines("a\nb") == ["a", "b"]


class TestLineClassification:
    """One token per line, first matching classifier wins."""

    def test_document(self) -> None:
        assert _types("# Hello\n\nWorld") == [
            TokenType.ATX_HEADING,
            TokenType.BLANK_LINE,
            TokenType.PARAGRAPH_LINE,
        ]

    def test_line_numbers(self) -> None:
        tokens = list(Lexer("a\n\nb").tokenize())
        assert [t.lineno for t in tokens] == [1, 2, 3]

    @pytest.mark.parametrize(
        ("line", "level", "value"),
        [
            ("# One", 1, "One"),
            ("###   Three", 3, "Three"),
            ("###### Six", 6, "Six"),
            ("####### Seven", 6, "# Seven"),
            ("#tight", 1, "tight"),
        ],
    )
    def test_heading(self, line: str, level: int, value: str) -> None:
        token = _single(line)
        assert token.type is TokenType.ATX_HEADING
        assert token.level == level
        assert token.value == value

    @pytest.mark.parametrize("line", ["---", "***", "___", "* * *", "- - - -"])
    def test_thematic_break(self, line: str) -> None:
        assert _single(line).type is TokenType.THEMATIC_BREAK

    @pytest.mark.parametrize("line", ["--", "-*-", "--- x"])
    def test_not_thematic_break(self, line: str) -> None:
        assert _single(line).type is not TokenType.THEMATIC_BREAK

    @pytest.mark.parametrize(("line", "value"), [("> quoted", "quoted"), (">tight", "tight"), (">  two", " two")])
    def test_block_quote(self, line: str, value: str) -> None:
        token = _single(line)
        assert token.type is TokenType.BLOCK_QUOTE
        assert token.value == value

    def test_surrounding_whitespace_stripped(self) -> None:
        token = _single("   plain text \t")
        assert token.type is TokenType.PARAGRAPH_LINE
        assert token.value == "plain text"

    def test_whitespace_only_is_blank(self) -> None:
        assert _single("  \t ").type is TokenType.BLANK_LINE


class TestListItems:
    """List markers and task checkboxes."""

    @pytest.mark.parametrize("line", ["- item", "* item", "+ item"])
    def test_unordered(self, line: str) -> None:
        token = _single(line)
        assert token.type is TokenType.LIST_ITEM
        assert token.ordered is False
        assert token.value == "item"
        assert token.checked is None

    def test_ordered(self) -> None:
        token = _single("12. item")
        assert token.type is TokenType.LIST_ITEM
        assert token.ordered is True
        assert token.value == "item"

    @pytest.mark.parametrize("line", ["-item", "1.item", "1) item"])
    def test_not_list(self, line: str) -> None:
        assert _single(line).type is TokenType.PARAGRAPH_LINE

    @pytest.mark.parametrize(
        ("line", "checked", "value"),
        [
            ("- [ ] todo", False, "todo"),
            ("- [x] done", True, "done"),
            ("- [X] done", True, "done"),
            ("1. [x] first", True, "first"),
            ("- [x]", True, ""),
        ],
    )
    def test_task(self, line: str, checked: bool, value: str) -> None:
        token = _single(line)
        assert token.checked is checked
        assert token.value == value

    def test_checkbox_needs_space(self) -> None:
        token = _single("- [x]done")
        assert token.checked is None
        assert token.value == "[x]done"

    def test_task_lists_disabled(self) -> None:
        token = _single("- [x] done", task_lists_enabled=False)
        assert token.checked is None
        assert token.value == "[x] done"


class TestReferenceDefinitions:
    """[label]: url "title" lines."""

    def test_with_title(self) -> None:
        token = _single('[Ref]: https://example.com "My Title"')
        assert token.type is TokenType.LINK_REFERENCE_DEF
        assert token.label == "Ref"
        assert token.url == "https://example.com"
        assert token.title == "My Title"

    def test_without_title(self) -> None:
        token = _single("  [ref]:   https://example.com")
        assert token.type is TokenType.LINK_REFERENCE_DEF
        assert token.url == "https://example.com"
        assert token.title is None

    def test_not_definition(self) -> None:
        assert _single("[ref] text").type is TokenType.PARAGRAPH_LINE


class TestFences:
    """Fenced code state."""

    def test_fence_content_untouched(self) -> None:
        tokens = list(Lexer("```py\n  # not a heading\n```").tokenize())
        assert [t.type for t in tokens] == [
            TokenType.FENCED_CODE_START,
            TokenType.FENCED_CODE_CONTENT,
            TokenType.FENCED_CODE_END,
        ]
        assert tokens[0].info == "py"
        assert tokens[1].value == "  # not a heading"

    def test_info_first_word(self) -> None:
        token = list(Lexer("~~~ python linenos\n~~~").tokenize())[0]
        assert token.info == "python"

    def test_unterminated_fence(self) -> None:
        lexer = Lexer("```\ncode")
        types = [t.type for t in lexer.tokenize()]
        assert types == [TokenType.FENCED_CODE_START, TokenType.FENCED_CODE_CONTENT]
        assert lexer._mode is LexerMode.CODE_FENCE

    def test_mode_returns_to_block(self) -> None:
        lexer = Lexer("```\nx\n```\n")
        list(lexer.tokenize())
        assert lexer._mode is LexerMode.BLOCK


class TestTables:
    """Table header detection by lookahead."""

    def test_header_consumes_separator(self) -> None:
        tokens = list(Lexer("| a | b |\n|---|:-:|\n| 1 | 2 |").tokenize())
        assert [t.type for t in tokens] == [TokenType.TABLE_HEADER, TokenType.PIPE_LINE]
        assert [t.lineno for t in tokens] == [1, 3]

    def test_pipe_line_without_separator(self) -> None:
        assert _types("| a | b |\nplain") == [TokenType.PIPE_LINE, TokenType.PARAGRAPH_LINE]

    def test_tables_disabled(self) -> None:
        assert _types("| a |\n|---|", tables_enabled=False) == [
            TokenType.PARAGRAPH_LINE,
            TokenType.PARAGRAPH_LINE,
        ]


class TestLexerState:
    """Bookkeeping exposed after tokenization."""

    def test_longest_line(self) -> None:
        lexer = Lexer("ab\nabcdef\nabc")
        list(lexer.tokenize())
        assert lexer.longest_line == 6

    def test_token_repr(self) -> None:
        assert repr(_single("# Hi")) == "Token(ATX_HEADING, 'Hi', 1)"
