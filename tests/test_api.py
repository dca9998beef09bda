"""Tests for the result-returning interface."""

from __future__ import annotations

from pathlib import Path

import pytest

from marcador import api
from marcador.buffer import OutputBuffer
from marcador.config import MarkerConfig
from marcador.errors import Result
from marcador.parser import Parser


@pytest.fixture
def parser() -> Parser:
    created = api.create_parser()
    assert created is not None
    return created


class TestInfo:
    """Version and messages."""

    def test_version(self) -> None:
        assert api.version() == "1.0.0"

    def test_error_string(self) -> None:
        assert api.error_string(Result.OK) == "Success"
        assert api.error_string(Result.IO_FAILED) == "I/O operation failed"
        assert api.error_string(-4) == "I/O operation failed"

    def test_unknown_error_string(self) -> None:
        assert api.error_string(-99) == "Unknown error"

    def test_configure_defaults(self) -> None:
        assert api.configure_defaults() == MarkerConfig()


class TestParserLifecycle:
    """create_parser / destroy_parser."""

    def test_create_with_config(self) -> None:
        parser = api.create_parser(MarkerConfig(enable_tables=False))
        assert parser is not None
        assert parser.config.enable_tables is False

    def test_create_invalid_config(self) -> None:
        assert api.create_parser(MarkerConfig(initial_buffer_size=-1)) is None

    def test_destroy(self, parser: Parser) -> None:
        assert api.add_reference_link(parser, "r", "u") is Result.OK
        assert api.destroy_parser(parser) is Result.OK
        assert not parser.reference_links

    def test_destroy_none(self) -> None:
        assert api.destroy_parser(None) is Result.NULL_ARGUMENT  # type: ignore[arg-type]


class TestParse:
    """parse / parse_inline."""

    def test_ok(self, parser: Parser) -> None:
        out = OutputBuffer()
        assert api.parse(parser, "*hi*", out) is Result.OK
        assert out.getvalue() == "<p><em>hi</em></p>\n"

    @pytest.mark.parametrize("missing", ["parser", "markdown", "output"])
    def test_null_arguments(self, parser: Parser, missing: str) -> None:
        args = {"parser": parser, "markdown": "x", "output": OutputBuffer()}
        args[missing] = None
        assert api.parse(**args) is Result.NULL_ARGUMENT

    def test_parse_inline(self, parser: Parser) -> None:
        out = OutputBuffer()
        assert api.parse_inline(parser, "**b**", out) is Result.OK
        assert out.getvalue() == "<strong>b</strong>"

    def test_parse_inline_none(self) -> None:
        assert api.parse_inline(None, "x", OutputBuffer()) is Result.NULL_ARGUMENT  # type: ignore[arg-type]


class TestReferenceLinks:
    """add_reference_link / clear_reference_links."""

    def test_add_then_use(self, parser: Parser) -> None:
        assert api.add_reference_link(parser, "r", "https://x.example", "X") is Result.OK
        out = OutputBuffer()
        api.parse(parser, "[r]", out)
        assert '<a href="https://x.example" title="X">r</a>' in out.getvalue()

    @pytest.mark.parametrize(("label", "url"), [(None, "u"), ("r", None)])
    def test_add_null(self, parser: Parser, label: str, url: str) -> None:
        assert api.add_reference_link(parser, label, url) is Result.NULL_ARGUMENT

    def test_add_without_parser(self) -> None:
        assert api.add_reference_link(None, "r", "u") is Result.NULL_ARGUMENT  # type: ignore[arg-type]

    def test_clear(self, parser: Parser) -> None:
        api.add_reference_link(parser, "r", "u")
        assert api.clear_reference_links(parser) is Result.OK
        assert not parser.reference_links

    def test_clear_without_parser(self) -> None:
        assert api.clear_reference_links(None) is Result.NULL_ARGUMENT  # type: ignore[arg-type]


class TestConvert:
    """convert_to_html and file conversion."""

    def test_convert_to_html(self) -> None:
        result, html = api.convert_to_html("# T", "s.css")
        assert result is Result.OK
        assert html == (
            '<!DOCTYPE html><html><head><link rel="stylesheet" href="s.css">'
            "</head><body><h1>T</h1>\n</body></html>"
        )

    def test_convert_none(self) -> None:
        assert api.convert_to_html(None) == (Result.NULL_ARGUMENT, "")  # type: ignore[arg-type]

    def test_convert_buffer_too_small(self) -> None:
        assert api.convert_to_html("# T", html_size=10) == (Result.BUFFER_TOO_SMALL, "")

    def test_convert_invalid_size(self) -> None:
        assert api.convert_to_html("# T", html_size=-1) == (Result.INVALID_SIZE, "")

    def test_file_to_file(self, tmp_path: Path) -> None:
        source = tmp_path / "a.md"
        source.write_text("- item", encoding="utf-8")
        target = tmp_path / "a.html"
        assert api.convert_file_to_file(str(source), str(target)) is Result.OK
        assert "<li>item</li>" in target.read_text(encoding="utf-8")

    def test_file_missing(self, tmp_path: Path) -> None:
        result = api.convert_file_to_file(str(tmp_path / "nope.md"), str(tmp_path / "x.html"))
        assert result is Result.IO_FAILED

    def test_files_empty(self) -> None:
        assert api.convert_files_to_files([]) is Result.INVALID_SIZE

    def test_files_none(self) -> None:
        assert api.convert_files_to_files(None) is Result.NULL_ARGUMENT  # type: ignore[arg-type]

    def test_files_stops_at_failure(self, tmp_path: Path) -> None:
        good = tmp_path / "good.md"
        good.write_text("x", encoding="utf-8")
        pairs = [
            (str(tmp_path / "bad.md"), str(tmp_path / "bad.html")),
            (str(good), str(tmp_path / "good.html")),
        ]
        assert api.convert_files_to_files(pairs) is Result.IO_FAILED
        assert not (tmp_path / "good.html").exists()


class TestEscapeAndValidate:
    """escape / validate."""

    def test_escape(self) -> None:
        assert api.escape("<a & b>") == (Result.OK, "&lt;a &amp; b&gt;")

    def test_escape_fixed(self) -> None:
        assert api.escape("<", 5) == (Result.OK, "&lt;")

    def test_escape_too_small(self) -> None:
        assert api.escape("<", 4) == (Result.BUFFER_TOO_SMALL, "")

    def test_escape_invalid_size(self) -> None:
        assert api.escape("x", 0) == (Result.INVALID_SIZE, "")

    def test_escape_none(self) -> None:
        assert api.escape(None) == (Result.NULL_ARGUMENT, "")  # type: ignore[arg-type]
        assert api.escape(None, 10) == (Result.NULL_ARGUMENT, "")  # type: ignore[arg-type]

    def test_validate(self) -> None:
        assert api.validate("```\nx\n```") == (True, "")
        assert api.validate("```\nx") == (False, "Unclosed code fence")


class TestBlankLabelDefinitions:
    """Unusable definitions are not errors."""

    def test_parse_ok(self, parser: Parser) -> None:
        out = OutputBuffer()
        assert api.parse(parser, "[]: https://x\n\nhello\n", out) is Result.OK
        assert out.getvalue() == "\n<p>hello</p>\n"

    def test_convert_ok(self) -> None:
        result, html = api.convert_to_html("[ ]: https://x\n")
        assert result is Result.OK
        assert html == "<!DOCTYPE html><html><head></head><body></body></html>"
