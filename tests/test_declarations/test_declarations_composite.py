"""Tests for shorthand (composite) declaration converters."""

import pytest

from tailwindify.config import ConverterConfig, resolve_config
from tailwindify.declarations import convert_declaration
from tailwindify.declarations.composite import expand_box


@pytest.fixture(scope="module")
def config():
    return resolve_config(ConverterConfig(rem_in_px=16))


class TestExpandBox:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("1px", ("1px", "1px", "1px", "1px")),
            ("1px 2px", ("1px", "2px", "1px", "2px")),
            ("1px 2px 3px", ("1px", "2px", "3px", "2px")),
            ("1px 2px 3px 4px", ("1px", "2px", "3px", "4px")),
            ("calc(1px + 2px) 0", ("calc(1px + 2px)", "0", "calc(1px + 2px)", "0")),
        ],
    )
    def test_expand(self, value, expected):
        assert expand_box(value) == expected

    def test_too_many_values(self):
        assert expand_box("1px 2px 3px 4px 5px") is None


# ---------------------------------------------------------------------------
# Box shorthands
# ---------------------------------------------------------------------------


class TestBox:
    def test_margin_one_value(self, config):
        assert convert_declaration("margin", "1rem", config) == ["mt-4", "mr-4", "mb-4", "ml-4"]

    def test_margin_negative(self, config):
        assert convert_declaration("margin", "-1rem 0", config) == ["-mt-4", "mr-0", "-mb-4", "ml-0"]

    def test_padding_arbitrary_side(self, config):
        assert convert_declaration("padding", "256px 100vw 4px 12%", config) == [
            "pt-64",
            "pr-[100vw]",
            "pb-1",
            "pl-[12%]",
        ]

    def test_border_width_single(self, config):
        assert convert_declaration("border-width", "2px", config) == ["border-2"]

    def test_border_width_sides(self, config):
        assert convert_declaration("border-width", "1px 2px", config) == [
            "border-t",
            "border-r-2",
            "border-b",
            "border-l-2",
        ]

    def test_border_radius(self, config):
        assert convert_declaration("border-radius", "0.25rem", config) == ["rounded"]
        assert convert_declaration("border-radius", "9999px", config) == ["rounded-full"]

    def test_border_radius_elliptical_not_convertible(self, config):
        assert convert_declaration("border-radius", "10px / 20px", config) == []

    def test_inset(self, config):
        assert convert_declaration("inset", "0 auto", config) == ["top-0", "right-auto", "bottom-0", "left-auto"]


# ---------------------------------------------------------------------------
# Border and outline
# ---------------------------------------------------------------------------


class TestBorder:
    def test_width_style_color(self, config):
        assert convert_declaration("border", "2px dashed #ef4444", config) == [
            "border-2",
            "border-dashed",
            "border-red-500",
        ]

    def test_any_order(self, config):
        assert convert_declaration("border", "solid #ef4444 1px", config) == [
            "border",
            "border-solid",
            "border-red-500",
        ]

    def test_keyword_width(self, config):
        assert convert_declaration("border", "thin solid", config) == ["border", "border-solid"]

    def test_side(self, config):
        assert convert_declaration("border-bottom", "2px", config) == ["border-b-2"]

    def test_duplicate_component_fails(self, config):
        assert convert_declaration("border", "1px 2px solid", config) == []

    def test_unknown_component_fails(self, config):
        assert convert_declaration("border", "1px solid url(x.png)", config) == []

    @pytest.mark.parametrize("prefix", ["", "tw-"])
    def test_color_theme_token(self, prefix):
        config = resolve_config(
            ConverterConfig(
                tailwind_config={
                    "prefix": prefix,
                    "theme": {"extend": {"colors": {"gold": "hsl(41, 28.3%, 79.8%)"}}},
                },
                rem_in_px=16,
            )
        )
        assert convert_declaration("border-color", "hsl(41,28.3%,79.8%)", config) == [
            f"{prefix}border-gold"
        ]

    @pytest.mark.parametrize("prefix", ["", "tw-"])
    def test_color_arbitrary(self, prefix):
        config = resolve_config(ConverterConfig(tailwind_config={"prefix": prefix}))
        assert convert_declaration("border-color", "#123", config) == [f"{prefix}border-[#123]"]

    def test_color_sides(self, config):
        assert convert_declaration("border-color", "#ef4444 #123", config) == [
            "border-t-red-500",
            "border-r-[#123]",
            "border-b-red-500",
            "border-l-[#123]",
        ]

    def test_outline(self, config):
        assert convert_declaration("outline", "2px dotted #65a30d", config) == [
            "outline-2",
            "outline-dotted",
            "outline-lime-600",
        ]


# ---------------------------------------------------------------------------
# Transforms and filters
# ---------------------------------------------------------------------------


class TestTransform:
    def test_functions(self, config):
        assert convert_declaration("transform", "translateX(1rem) rotate(-45deg)", config) == [
            "translate-x-4",
            "-rotate-45",
        ]

    def test_two_axis_function(self, config):
        assert convert_declaration("transform", "scale(.75, 1.05)", config) == [
            "scale-x-75",
            "scale-y-105",
        ]

    def test_single_argument_scale(self, config):
        assert convert_declaration("transform", "scale(0.5)", config) == ["scale-50"]

    def test_negative_arbitrary_translate(self, config):
        assert convert_declaration("transform", "translateY(-0.5em)", config) == [
            "-translate-y-[0.5em]"
        ]

    def test_none(self, config):
        assert convert_declaration("transform", "none", config) == ["transform-none"]

    def test_unsupported_function_fails_atomically(self, config):
        value = "translateX(12px) translateY(0.5em) translateZ(0.5rem) scaleY(0.725)"
        assert convert_declaration("transform", value, config) == []

    def test_repeated_target_fails(self, config):
        assert convert_declaration("transform", "translateX(1rem) translate(2px)", config) == []


class TestFilter:
    def test_functions(self, config):
        value = "blur(4px) brightness(0.5) sepia(100%) contrast(1) hue-rotate(30deg) invert(0) saturate(1.5)"
        assert convert_declaration("filter", value, config) == [
            "blur-sm",
            "brightness-50",
            "sepia",
            "contrast-100",
            "hue-rotate-30",
            "invert-0",
            "saturate-150",
        ]

    def test_negative_hue_rotate(self, config):
        assert convert_declaration("filter", "hue-rotate(-30deg)", config) == ["-hue-rotate-30"]

    def test_opacity_is_not_a_filter_utility(self, config):
        assert convert_declaration("filter", "blur(4px) opacity(0.5)", config) == []

    def test_repeated_function_fails(self, config):
        assert convert_declaration("filter", "blur(4px) blur(8px)", config) == []

    def test_none(self, config):
        assert convert_declaration("filter", "none", config) == ["filter-none"]

    def test_backdrop(self, config):
        assert convert_declaration("backdrop-filter", "opacity(0.5) blur(8px)", config) == [
            "backdrop-opacity-50",
            "backdrop-blur",
        ]


# ---------------------------------------------------------------------------
# Other shorthands
# ---------------------------------------------------------------------------


class TestOtherShorthands:
    def test_transition(self, config):
        assert convert_declaration("transition", "opacity 200ms linear 100ms", config) == [
            "transition-opacity",
            "duration-200",
            "ease-linear",
            "delay-100",
        ]

    def test_transition_duration_then_delay(self, config):
        assert convert_declaration("transition", "all 150ms 75ms", config) == [
            "transition-all",
            "duration-150",
            "delay-75",
        ]

    def test_transition_list_fails(self, config):
        assert convert_declaration("transition", "opacity 1s, color 2s", config) == []

    def test_flex_flow(self, config):
        assert convert_declaration("flex-flow", "column wrap-reverse", config) == [
            "flex-col",
            "flex-wrap-reverse",
        ]
        assert convert_declaration("flex-flow", "wrap nowrap", config) == []

    def test_text_decoration(self, config):
        assert convert_declaration("text-decoration", "underline dotted #ef4444", config) == [
            "underline",
            "decoration-dotted",
            "decoration-red-500",
        ]

    def test_gap(self, config):
        assert convert_declaration("gap", "1rem", config) == ["gap-4"]
        assert convert_declaration("gap", "1rem 2rem", config) == ["gap-y-4", "gap-x-8"]

    def test_background(self, config):
        assert convert_declaration("background", "#ef4444", config) == ["bg-red-500"]
        assert convert_declaration("background", "none", config) == ["bg-none"]
        assert convert_declaration("background", "url(x.png) no-repeat", config) == []
