"""Property-based tests using Hypothesis.

These tests verify invariants that hold for any input:
1. Rendering never raises on arbitrary text, for any feature combination
2. Escaping is not idempotent and removes every special character
3. Code spans escape their content
4. validate() agrees with a plain marker count
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from marcador import Markdown
from marcador.config import MarkerConfig
from marcador.utils.text import HTML_ENTITIES, escape_html
from marcador.validation import validate

markdown_alphabet = st.sampled_from(list("abc 123\n\t*_~`![]()<>|#-+.:\"'&\\@/x"))
markdown_text = st.text(alphabet=markdown_alphabet, max_size=200)

feature_flags = st.fixed_dictionaries(
    {
        "enable_tables": st.booleans(),
        "enable_strikethrough": st.booleans(),
        "enable_task_lists": st.booleans(),
        "enable_autolinks": st.booleans(),
        "enable_inline_html": st.booleans(),
        "escape_html": st.booleans(),
        "hard_line_breaks": st.booleans(),
        "max_nesting_depth": st.integers(0, 40),
    }
)


class TestRenderingProperties:
    """Rendering is total and deterministic."""

    @given(source=markdown_text, flags=feature_flags)
    @settings(max_examples=200)
    def test_never_raises(self, source: str, flags: dict) -> None:
        html = Markdown(MarkerConfig.from_dict(flags))(source)
        assert isinstance(html, str)

    @given(source=st.text(max_size=200))
    def test_arbitrary_unicode(self, source: str) -> None:
        assert isinstance(Markdown()(source), str)

    @given(source=markdown_text)
    def test_deterministic(self, source: str) -> None:
        assert Markdown()(source) == Markdown()(source)

    @given(source=st.text(alphabet=st.characters(blacklist_characters="\\*_~`![<\n\r\t "), max_size=80))
    def test_plain_text_is_escaped(self, source: str) -> None:
        html = Markdown().inline(source)
        assert html == escape_html(source)


class TestEscapeProperties:
    """The escaper."""

    @given(text=st.text())
    def test_no_raw_specials(self, text: str) -> None:
        escaped = escape_html(text)
        for char in "<>\"'":
            assert char not in escaped

    @given(text=st.text())
    def test_not_idempotent_with_specials(self, text: str) -> None:
        escaped = escape_html(text)
        if any(char in HTML_ENTITIES for char in text):
            assert escape_html(escaped) != escaped
        else:
            assert escaped == text


class TestCodeSpanProperties:
    """Code spans render escaped content."""

    @given(content=st.text(min_size=1).filter(lambda s: "`" not in s))
    def test_escaped_content(self, content: str) -> None:
        trimmed = content[1:] if content.startswith(" ") else content
        trimmed = trimmed[:-1] if trimmed.endswith(" ") else trimmed
        html = Markdown().inline(f"`{content}`")
        assert html == f"<code>{escape_html(trimmed)}</code>"


class TestValidateProperties:
    """validate() is a fence-marker parity check."""

    @given(text=st.text(alphabet=st.sampled_from(list("`a\n")), max_size=60))
    def test_parity(self, text: str) -> None:
        valid, message = validate(text)
        assert valid == (text.count("```") % 2 == 0)
        assert message == ("" if valid else "Unclosed code fence")
