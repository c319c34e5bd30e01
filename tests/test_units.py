"""
Tests for unit and value normalizers.
"""

import math

import pytest

from richdoc_docx.utils.units import (
    clamp_number,
    coerce_positive_int,
    normalize_hex_color,
    normalize_run_text,
    split_run_text,
    strip_xml_invalid_chars,
    to_half_points,
    to_number,
    to_twips,
    line_spacing_to_twips,
)


class TestNormalizeHexColor:
    """Test cases for normalize_hex_color."""

    def test_short_and_long_forms_agree(self):
        """Test 3-digit colors expand to the 6-digit form."""
        assert normalize_hex_color("#abc") == "AABBCC"
        assert normalize_hex_color("AABBCC") == "AABBCC"
        assert normalize_hex_color("aabbcc") == "AABBCC"

    def test_surrounding_whitespace(self):
        """Test whitespace around the value is ignored."""
        assert normalize_hex_color("  #1a2B3c ") == "1A2B3C"

    @pytest.mark.parametrize("value", ["not-a-color", "#abcd", "#12345g", "", None, 123, ["ff0000"]])
    def test_invalid_values(self, value):
        """Test invalid values yield None."""
        assert normalize_hex_color(value) is None


class TestSizeConversion:
    """Test cases for half-point and twip conversion."""

    def test_half_points_clamped(self):
        """Test font sizes are clamped to 1..400pt."""
        assert to_half_points(0) == 2
        assert to_half_points(500) == 800
        assert to_half_points(12) == 24

    def test_half_points_round_half_up(self):
        """Test fractional sizes round to the nearest half-point."""
        assert to_half_points(10.25) == 21
        assert to_half_points(10.2) == 20

    @pytest.mark.parametrize("value", ["x", "12", None, True, float("nan")])
    def test_half_points_non_numeric(self, value):
        """Test non-numeric sizes yield None."""
        assert to_half_points(value) is None

    def test_twips(self):
        """Test points to twips conversion."""
        assert to_twips(18) == 360
        assert to_twips(0.5) == 10
        assert to_twips(-9) == -180
        assert to_twips(0.025) == 1

    @pytest.mark.parametrize("value", ["10", None, float("nan"), float("inf")])
    def test_twips_invalid(self, value):
        """Test non-numeric or infinite lengths yield None."""
        assert to_twips(value) is None

    def test_line_spacing(self):
        """Test line spacing multiples are clamped and scaled by 240."""
        assert line_spacing_to_twips(1) == 240
        assert line_spacing_to_twips(1.5) == 360
        assert line_spacing_to_twips(0.1) == 120
        assert line_spacing_to_twips(10) == 960


class TestClampNumber:
    """Test cases for clamp_number."""

    def test_in_range(self):
        assert clamp_number(3, 0, 8) == 3

    def test_out_of_range(self):
        """Test values outside the range are clamped."""
        assert clamp_number(20, 0, 8) == 8
        assert clamp_number(-5, 0, 8) == 0

    @pytest.mark.parametrize("value", [None, "3", float("nan"), object()])
    def test_non_numeric_returns_minimum(self, value):
        assert clamp_number(value, 0.5, 4) == 0.5


class TestCoercion:
    """Test cases for loose number coercion."""

    def test_to_number(self):
        assert to_number("2") == 2.0
        assert to_number(None) == 0.0
        assert to_number("") == 0.0
        assert math.isnan(to_number("abc"))
        assert math.isnan(to_number({}))

    @pytest.mark.parametrize("value,expected", [
        (3, 3), ("3", 3), (3.0, 3), (" 7 ", 7),
        (0, None), (-1, None), ("abc", None), (2.5, None),
        (None, None), (True, None), (float("inf"), None),
    ])
    def test_coerce_positive_int(self, value, expected):
        assert coerce_positive_int(value) == expected


class TestRunText:
    """Test cases for run text sanitization and splitting."""

    def test_zero_width_spaces_removed(self):
        assert normalize_run_text("a\u200bb\u200b") == "ab"

    def test_non_string(self):
        assert normalize_run_text(None) == ""
        assert normalize_run_text(42) == ""

    def test_split_on_newlines(self):
        """Test a break marker separates consecutive pieces."""
        assert split_run_text("a\nb") == ["a", None, "b"]

    def test_empty_pieces_dropped(self):
        """Test empty pieces are dropped but their breaks are kept."""
        assert split_run_text("a\n\nb") == ["a", None, None, "b"]
        assert split_run_text("\nx") == [None, "x"]
        assert split_run_text("x\n") == ["x", None]

    def test_only_zero_width(self):
        assert split_run_text("\u200b\u200b") == []

    def test_xml_invalid_characters_removed(self):
        """Test control characters are dropped while tab and newline are kept."""
        assert normalize_run_text("a\x00b\x08c\x0bd\x0ce\x1ff") == "abcdef"
        assert normalize_run_text("a\tb") == "a\tb"
        assert split_run_text("x\x0c\ny") == ["x", None, "y"]

    def test_strip_xml_invalid_chars(self):
        assert strip_xml_invalid_chars("\x01ok\x0e\r") == "ok\r"
