"""Unit tests for text transformations."""

import pytest

from template_renderers.render_utils.text import (
    abbreviate,
    capitalize_words,
    lowercase,
    plural,
    rot13,
    swap_case,
    trim,
    uncapitalize,
    uppercase,
)

SAMPLE_TEXT = "This is a test."


class TestAbbreviate:
    """Test abbreviate()."""

    def test_abbreviate_with_marker(self):
        """Test abbreviation keeps room for the marker."""
        # Arrange & Act
        result = abbreviate(SAMPLE_TEXT, 12, "...")

        # Assert
        assert result == "This is a..."

    def test_abbreviate_with_ellipsis(self):
        """Test a single-character marker."""
        assert abbreviate(SAMPLE_TEXT, 10, "…") == "This is a…"

    def test_abbreviate_with_empty_marker(self):
        """Test max applies to the text alone when the marker is empty."""
        assert abbreviate(SAMPLE_TEXT, 9, "") == "This is a"

    def test_abbreviate_negative_max_returns_source(self):
        """Test negative max disables abbreviation."""
        assert abbreviate(SAMPLE_TEXT, -1, "") == SAMPLE_TEXT
        assert abbreviate(SAMPLE_TEXT, -1, "...") == SAMPLE_TEXT

    def test_abbreviate_zero_max(self):
        """Test zero max with an empty marker gives an empty string."""
        assert abbreviate(SAMPLE_TEXT, 0, "") == ""

    def test_abbreviate_marker_longer_than_max(self):
        """Test the kept prefix is clamped to empty, leaving only the marker."""
        assert abbreviate(SAMPLE_TEXT, 2, "...") == "..."

    def test_abbreviate_short_source_unchanged(self):
        """Test sources within max are returned as is."""
        assert abbreviate(SAMPLE_TEXT, len(SAMPLE_TEXT), "...") == SAMPLE_TEXT

    @pytest.mark.parametrize("src", [None, "", "   "])
    def test_abbreviate_none_and_blank_pass_through(self, src):
        """Test None and blank input are returned unchanged."""
        assert abbreviate(src, 2, "...") == src

    def test_abbreviate_none_marker_returns_source(self):
        """Test a None marker returns the source."""
        assert abbreviate(SAMPLE_TEXT, 2, None) == SAMPLE_TEXT


class TestCapitalizeWords:
    """Test capitalize_words()."""

    def test_capitalize_words_mixed_case(self):
        """Test each word gets one capital and lowercase remainder."""
        assert capitalize_words("hELLo WoRLd") == "Hello World"

    def test_capitalize_words_hyphen_is_not_a_boundary(self):
        """Test only whitespace separates words."""
        assert capitalize_words("hello-world") == "Hello-world"

    def test_capitalize_words_preserves_whitespace(self):
        """Test whitespace runs are kept verbatim."""
        assert capitalize_words("  hello \t world\n") == "  Hello \t World\n"

    def test_capitalize_words_none_and_empty(self):
        """Test None stays None and empty stays empty."""
        assert capitalize_words(None) is None
        assert capitalize_words("") == ""

    def test_capitalize_words_keeps_expanding_characters(self):
        """Test characters whose uppercase expands are left alone."""
        assert capitalize_words("ßtraße") == "ßtraße"


class TestCaseConversion:
    """Test lowercase(), uppercase(), uncapitalize() and trim()."""

    def test_lowercase(self):
        assert lowercase(SAMPLE_TEXT) == "this is a test."

    def test_uppercase(self):
        assert uppercase(SAMPLE_TEXT) == "THIS IS A TEST."

    @pytest.mark.parametrize("src", [None, "", "  "])
    def test_case_conversion_blank_pass_through(self, src):
        """Test None and blank input pass through unchanged."""
        assert lowercase(src) == src
        assert uppercase(src) == src

    def test_uncapitalize(self):
        assert uncapitalize(SAMPLE_TEXT) == "this is a test."
        assert uncapitalize("ABC") == "aBC"
        assert uncapitalize(None) is None
        assert uncapitalize("") == ""

    def test_trim(self):
        """Test surrounding whitespace is removed."""
        assert trim("\t" + SAMPLE_TEXT + " \n") == SAMPLE_TEXT
        assert trim(None) is None
        assert trim("") == ""


class TestPlural:
    """Test plural()."""

    @pytest.mark.parametrize(
        "count,expected",
        [(0, "minutes"), (1, "minute"), (2, "minutes"), (59, "minutes")],
    )
    def test_plural(self, count, expected):
        """Test singular only for exactly one."""
        assert plural(count, "minute", "minutes") == expected


class TestRot13:
    """Test rot13()."""

    def test_rot13_encode(self):
        assert rot13(SAMPLE_TEXT) == "Guvf vf n grfg."

    def test_rot13_decode(self):
        assert rot13("Guvf vf n grfg.") == SAMPLE_TEXT

    def test_rot13_is_involution(self):
        """Test applying twice returns the original."""
        src = "Hello, World! 123 ÀÉ"
        assert rot13(rot13(src)) == src

    def test_rot13_non_letters_fixed(self):
        assert rot13("123 !?é") == "123 !?é"

    def test_rot13_none_and_empty(self):
        """Test None and empty input give an empty string."""
        assert rot13(None) == ""
        assert rot13("") == ""


class TestSwapCase:
    """Test swap_case()."""

    def test_swap_case(self):
        assert swap_case("Hello World") == "hELLO wORLD"

    def test_swap_case_is_involution_for_letters(self):
        src = "AbCdÉé"
        assert swap_case(swap_case(src)) == src

    def test_swap_case_uses_single_character_mappings(self):
        """Test expanding case mappings collapse to one character or stay put."""
        assert swap_case("\u0130") == "i"
        assert swap_case("\u00df") == "\u00df"
        assert swap_case("\u1fb3") == "\u1fbc"

    def test_swap_case_digits_and_symbols_fixed(self):
        assert swap_case("123 -+!") == "123 -+!"

    def test_swap_case_none_and_empty(self):
        assert swap_case(None) == ""
        assert swap_case("") == ""
