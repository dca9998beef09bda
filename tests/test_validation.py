"""Tests for fence balance validation."""

import pytest

from marcador.validation import count_fence_markers, validate


class TestCountFenceMarkers:
    """Non-overlapping marker counting."""

    @pytest.mark.parametrize(
        ("text", "count"),
        [("", 0), ("```", 1), ("````", 1), ("``````", 2), ("a ``` b ``` c", 2), ("``", 0)],
    )
    def test_count(self, text: str, count: int) -> None:
        assert count_fence_markers(text) == count


class TestValidate:
    """Valid means an even number of markers."""

    @pytest.mark.parametrize("text", ["", "plain", "```\ncode\n```", "```a```", "~~~\nx"])
    def test_valid(self, text: str) -> None:
        assert validate(text) == (True, "")

    @pytest.mark.parametrize("text", ["```", "```\ncode", "```\n```\n```"])
    def test_unclosed(self, text: str) -> None:
        assert validate(text) == (False, "Unclosed code fence")

    def test_none(self) -> None:
        assert validate(None) == (False, "Null markdown input")
