"""Tests for value normalization helpers."""

import pytest

from tailwindify.values import (
    collapse_whitespace,
    escape_arbitrary,
    format_number,
    is_css_variable,
    normalize_color,
    normalize_number,
    normalize_numbers_in_string,
    normalize_size,
    normalize_value,
    parse_css_function,
    rem_to_px,
    remove_unnecessary_spaces,
    split_top_level,
)


class TestNumbers:
    @pytest.mark.parametrize(
        "value, expected",
        [(".5", "0.5"), ("-.5", "-0.5"), ("0.5", "0.5"), ("12", "12"), (" .25em ", "0.25em")],
    )
    def test_normalize_number(self, value, expected):
        assert normalize_number(value) == expected

    def test_numbers_in_string(self):
        assert normalize_numbers_in_string("rgb(0 0 0 / .5)") == "rgb(0 0 0 / 0.5)"
        assert normalize_numbers_in_string(".5s, .75s") == "0.5s, 0.75s"

    def test_format_number(self):
        assert format_number(12.0) == "12"
        assert format_number(0.5) == "0.5"
        assert format_number(1 / 3) == "0.333333"


class TestSizes:
    def test_rem_to_px(self):
        assert rem_to_px("0.75rem", 16) == "12px"
        assert rem_to_px("-1.5rem", 16) == "-24px"
        assert rem_to_px("2em", 16) == "2em"
        assert rem_to_px("1rem", None) == "1rem"

    def test_normalize_size(self):
        assert normalize_size(" .5rem ", 16) == "8px"
        assert normalize_size(".5rem") == "0.5rem"

    @pytest.mark.parametrize("value", ["0", "0.0", "-0", "0px"])
    def test_zero_is_zero_px(self, value):
        assert normalize_size(value) == "0px"

    def test_zero_with_other_unit_is_kept(self):
        assert normalize_size("0em") == "0em"


class TestColors:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("#FFF", "#ffffff"),
            ("#ffffff", "#ffffff"),
            ("white", "#ffffff"),
            ("rgb(255, 0, 0)", "#ff0000"),
            ("rgba(0, 0, 0, 0.5)", "#00000080"),
            ("hsl(0, 100%, 50%)", "#ff0000"),
        ],
    )
    def test_normalize_color(self, value, expected):
        assert normalize_color(value) == expected

    def test_current_color_keyword(self):
        assert normalize_color("currentcolor") == "currentColor"

    def test_non_colors_unchanged(self):
        assert normalize_color("some-invalid-color") == "some-invalid-color"
        assert normalize_color("var(--brand)") == "var(--brand)"


class TestText:
    def test_collapse_whitespace(self):
        assert collapse_whitespace("  a \n\t b  ") == "a b"

    def test_remove_unnecessary_spaces(self):
        assert remove_unnecessary_spaces("a , b ; c : d") == "a,b;c:d"

    def test_normalize_value(self):
        assert normalize_value("cubic-bezier(.4, 0,  .2, 1)") == "cubic-bezier(0.4,0,0.2,1)"

    def test_escape_arbitrary(self):
        assert escape_arbitrary("12% 25.5%") == "12%_25.5%"
        assert escape_arbitrary("some_name") == "some\\_name"
        assert escape_arbitrary("cubic-bezier(0.23, 0, 0.25, 1)") == "cubic-bezier(0.23,0,0.25,1)"

    def test_is_css_variable(self):
        assert is_css_variable("var(--x)")
        assert is_css_variable(" var(--some-color) ")
        assert not is_css_variable("calc(var(--x) + 1px)")


class TestSplitting:
    def test_split_on_whitespace(self):
        assert split_top_level("1px solid rgb(0, 0, 0)") == ["1px", "solid", "rgb(0, 0, 0)"]

    def test_split_on_separator(self):
        assert split_top_level("a, b(c, d), e", ",") == ["a", "b(c, d)", "e"]

    def test_quotes_protect_separators(self):
        assert split_top_level("'a b' c") == ["'a b'", "c"]

    def test_empty(self):
        assert split_top_level("   ") == []

    def test_parse_css_function(self):
        assert parse_css_function("translateX(12px)") == ("translateX", "12px")
        assert parse_css_function("hue-rotate( 30deg )") == ("hue-rotate", "30deg")
        assert parse_css_function("12px") is None
