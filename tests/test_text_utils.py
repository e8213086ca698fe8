"""Tests for text utilities module."""

from __future__ import annotations

import pytest

from texdsl.exceptions import InvalidMarginPrefixError, TexDslError
from texdsl.text_utils import split_lines, trim_margin


class TestSplitLines:
    """Tests for split_lines function."""

    def test_splits_on_all_line_breaks(self) -> None:
        """Unix, Windows and old Mac line breaks all separate lines."""
        assert split_lines("a\nb\r\nc\rd") == ["a", "b", "c", "d"]

    def test_keeps_trailing_empty_line(self) -> None:
        """A trailing break yields an empty last line."""
        assert split_lines("a\n") == ["a", ""]

    def test_single_line(self) -> None:
        """Text without breaks is a single line."""
        assert split_lines("plain") == ["plain"]


class TestTrimMargin:
    """Tests for trim_margin function."""

    def test_strips_margin_prefix(self) -> None:
        """Leading whitespace and the marker are removed from each line."""
        text = """
            |first
            |  second
        """

        assert trim_margin(text) == "first\n  second"

    def test_keeps_lines_without_prefix(self) -> None:
        """Lines not starting with the marker are left untouched."""
        text = "|one\n   two\n|three"

        assert trim_margin(text) == "one\n   two\nthree"

    def test_drops_blank_first_and_last_lines_only(self) -> None:
        """Blank lines in the middle survive."""
        text = "\n|a\n\n|b\n   "

        assert trim_margin(text) == "a\n\nb"

    def test_drops_trailing_newline(self) -> None:
        """A single trailing newline becomes an empty last line and is dropped."""
        assert trim_margin("text\n") == "text"

    def test_empty_text(self) -> None:
        """Empty input stays empty."""
        assert trim_margin("") == ""

    def test_custom_prefix(self) -> None:
        """Any non-blank marker can be used."""
        assert trim_margin("  >> quoted\n  >>again", margin_prefix=">>") == " quoted\nagain"

    def test_marker_only_strips_first_occurrence(self) -> None:
        """Markers after the first one are content."""
        assert trim_margin("||double") == "|double"

    @pytest.mark.parametrize("prefix", ["", " ", "\t"])
    def test_rejects_blank_prefix(self, prefix: str) -> None:
        """Blank markers are refused."""
        with pytest.raises(InvalidMarginPrefixError, match="non-blank"):
            trim_margin("|text", margin_prefix=prefix)

    def test_error_hierarchy(self) -> None:
        """Blank marker errors are both library and value errors."""
        with pytest.raises(TexDslError):
            trim_margin("x", margin_prefix="")
        with pytest.raises(ValueError):
            trim_margin("x", margin_prefix="")
