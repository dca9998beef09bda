"""Tests for the high-level Markdown class."""

from __future__ import annotations

from pathlib import Path

import marcador
from marcador import Markdown, MarkerConfig


class TestMarkdownOptions:
    """Short option names map onto config fields."""

    def test_defaults(self) -> None:
        assert Markdown().config == MarkerConfig()

    def test_aliases(self) -> None:
        md = Markdown(tables=False, task_lists=False, inline_html=False)
        assert md.config.enable_tables is False
        assert md.config.enable_task_lists is False
        assert md.config.enable_inline_html is False

    def test_full_field_names(self) -> None:
        assert Markdown(hard_line_breaks=True).config.hard_line_breaks is True

    def test_options_override_config(self) -> None:
        md = Markdown(MarkerConfig(escape_html=False), tables=False)
        assert md.config.escape_html is False
        assert md.config.enable_tables is False

    def test_unknown_options_ignored(self) -> None:
        assert Markdown(sparkles=True).config == MarkerConfig()


class TestMarkdownRendering:
    """Body, inline and document output."""

    def test_call(self) -> None:
        assert Markdown()("# Hello **World**") == "<h1>Hello <strong>World</strong></h1>\n"

    def test_document(self) -> None:
        html = Markdown().document("Some *text*", css_path="style.css")
        assert html == (
            '<!DOCTYPE html><html><head><link rel="stylesheet" href="style.css">'
            "</head><body><p>Some <em>text</em></p>\n</body></html>"
        )

    def test_convert_file(self, tmp_path: Path) -> None:
        source = tmp_path / "in.md"
        target = tmp_path / "out.html"
        source.write_text("| a |\n|---|", encoding="utf-8")
        Markdown(tables=False).convert_file(source, target)
        assert "<table>" not in target.read_text(encoding="utf-8")


class TestPackage:
    """Top-level exports."""

    def test_version(self) -> None:
        assert marcador.__version__ == marcador.api.version() == "1.0.0"

    def test_all_exports_resolve(self) -> None:
        for name in marcador.__all__:
            assert hasattr(marcador, name), name
