"""End-to-end tests for TailwindConverter."""

import logging
from pathlib import Path

import pytest

from tailwindify import ConverterConfig, TailwindConverter
from tailwindify.css import parse_css, render_css
from tailwindify.errors import CSSParseError

FIXTURES = Path(__file__).parent.parent / "fixtures"

FILTER_CLASSES = [
    "blur-sm",
    "brightness-50",
    "sepia",
    "contrast-100",
    "hue-rotate-30",
    "invert-0",
    "saturate-150",
]


@pytest.fixture
def simple_css():
    return (FIXTURES / "simple.css").read_text()


def _convert(css, **options):
    options.setdefault("rem_in_px", 16)
    return TailwindConverter(ConverterConfig(**options)).convert_css(css)


def _classes(result):
    return [(node.selector, node.classes) for node in result.nodes]


# ---------------------------------------------------------------------------
# Fixture stylesheet
# ---------------------------------------------------------------------------


class TestSimpleFixture:
    def test_nodes(self, simple_css):
        result = _convert(simple_css)
        assert _classes(result) == [
            (
                ".foo",
                [
                    "text-center",
                    "text-xs",
                    *(f"hover:{cls}" for cls in FILTER_CLASSES),
                    "hover:text-base",
                    "md:font-semibold",
                ],
            )
        ]

    def test_rewritten_css(self, simple_css):
        css = _convert(simple_css).css
        assert css.startswith(".foo {\n  @apply text-center text-xs hover:blur-sm ")
        assert "md:font-semibold;\n  animation-delay: 200ms;\n}\n" in css
        assert "\n\n.foo:hover {\n  transform: translateX(12px)" in css
        assert "filter" not in css
        assert "@media" not in css

    def test_prefix_separator_and_core_plugins(self, simple_css):
        result = _convert(
            simple_css,
            tailwind_config={
                "prefix": "tw-",
                "separator": "_",
                "corePlugins": {"fontWeight": False},
            },
        )
        assert _classes(result) == [
            (
                ".foo",
                [
                    "tw-text-center",
                    "tw-text-xs",
                    *(f"hover_tw-{cls}" for cls in FILTER_CLASSES),
                    "hover_tw-text-base",
                ],
            )
        ]
        assert "font-weight: 600;" in result.css

    def test_arbitrary_properties(self, simple_css):
        result = _convert(simple_css, arbitrary_properties=True)
        (node,) = result.nodes
        assert node.classes[:3] == ["text-center", "text-xs", "[animation-delay:200ms]"]
        transform = (
            "hover:[transform:translateX(12px)_translateY(0.5em)"
            "_translateZ(0.5rem)_scaleY(0.725)_rotate(124deg)]"
        )
        assert node.classes[-3:] == [transform, "hover:text-base", "md:font-semibold"]
        assert result.css.count("{") == 1

    def test_convert_stylesheet_leaves_tree(self, simple_css):
        stylesheet = parse_css(simple_css)
        before = render_css(stylesheet)
        nodes = TailwindConverter(ConverterConfig(rem_in_px=16)).convert_stylesheet(stylesheet)
        assert [node.selector for node in nodes] == [".foo", "&:hover"]
        assert render_css(stylesheet) == before


# ---------------------------------------------------------------------------
# Node placement
# ---------------------------------------------------------------------------


class TestPlacement:
    def test_empty(self):
        result = _convert("")
        assert result.nodes == []
        assert result.css == ""

    def test_invalid_css(self):
        with pytest.raises(CSSParseError):
            _convert((FIXTURES / "invalid.css").read_text())

    def test_variant_without_base_stays_on_rule(self):
        result = _convert(".foo:focus { text-align: center }")
        assert _classes(result) == [(".foo:focus", ["text-center"])]
        assert result.css == ".foo:focus {\n  @apply text-center;\n}\n"

    def test_variant_before_base_stays_separate(self):
        result = _convert(".foo:hover { text-align: center } .foo { font-size: 12px }")
        assert _classes(result) == [(".foo:hover", ["text-center"]), (".foo", ["text-xs"])]

    def test_variant_after_base_merges(self):
        result = _convert(".foo { font-size: 12px } .foo:hover { text-align: center }")
        assert _classes(result) == [(".foo", ["text-xs", "hover:text-center"])]
        assert result.css == ".foo {\n  @apply text-xs hover:text-center;\n}\n"

    def test_media_merges_into_top_level_rule(self):
        result = _convert(
            ".a { text-align: left }"
            " @media (min-width: 768px) { .a { text-align: center } .b { display: none } }"
        )
        assert _classes(result) == [(".a", ["text-left", "md:text-center"]), (".b", ["hidden"])]
        assert result.css == (
            ".a {\n  @apply text-left md:text-center;\n}\n\n"
            "@media (min-width: 768px) {\n  .b {\n    @apply hidden;\n  }\n}\n"
        )

    def test_unknown_media_keeps_rule_in_place(self):
        result = _convert("@media (min-width: 100px) { .a { text-align: center } }")
        assert result.css == "@media (min-width: 100px) {\n  .a {\n    @apply text-center;\n  }\n}\n"

    def test_supports(self):
        result = _convert(".a { display: block } @supports (display: grid) { .a { display: grid } }")
        assert _classes(result) == [(".a", ["block", "supports-[display:grid]:grid"])]

    def test_selector_list(self):
        result = _convert(".a, .b:hover { text-align: center }")
        assert result.css == (
            ".a {\n  @apply text-center;\n}\n\n.b:hover {\n  @apply text-center;\n}\n"
        )

    def test_keyframes_skipped(self):
        css = "@keyframes spin {\n  to {\n    transform: rotate(360deg);\n  }\n}\n"
        result = _convert(css)
        assert result.nodes == []
        assert result.css == css

    def test_empty_selector(self):
        result = _convert(
            "{ text-align: center; font-size: 12px; &:hover { font-size: 16px }"
            " @media screen and (min-width: 768px) { font-weight: 600 } }"
        )
        assert _classes(result) == [
            ("", ["text-center", "text-xs", "hover:text-base", "md:font-semibold"])
        ]

    def test_context_variants_before_selector_variants(self):
        result = _convert(
            ".a { display: block }"
            " @media (min-width: 768px) { .a:hover { display: none } }"
        )
        assert _classes(result) == [(".a", ["block", "md:hover:hidden"])]

    def test_source_indent_kept(self):
        result = _convert(".foo {\n    text-align: center;\n    animation-delay: 1s;\n}\n")
        assert result.css == ".foo {\n    @apply text-center;\n    animation-delay: 1s;\n}\n"

    def test_nesting_kept_when_not_flattened(self):
        result = _convert(
            ".a { text-align: center; &:hover { font-size: 12px } }", flatten_nesting=False
        )
        assert result.css == (
            ".a {\n  @apply text-center;\n  &:hover {\n    @apply text-xs;\n  }\n}\n"
        )


# ---------------------------------------------------------------------------
# Declarations and reduction
# ---------------------------------------------------------------------------


class TestClasses:
    def test_reduced(self):
        result = _convert(
            ".a { margin-top: 1rem; margin-right: 1rem; margin-bottom: 1rem; margin-left: 1rem }"
        )
        assert _classes(result) == [(".a", ["m-4"])]

    def test_not_reduced(self):
        result = _convert(".a { margin-top: 1rem; margin-bottom: 1rem }", reduce=False)
        assert _classes(result) == [(".a", ["mt-4", "mb-4"])]

    def test_important(self):
        result = _convert(".a { margin-top: 1rem !important }")
        assert _classes(result) == [(".a", ["!mt-4"])]

    def test_theme_extension(self):
        result = _convert(
            ".a { color: hsl(41, 28.3%, 79.8%) }",
            tailwind_config={"theme": {"extend": {"colors": {"gold": "hsl(41, 28.3%, 79.8%)"}}}},
        )
        assert _classes(result) == [(".a", ["text-gold"])]

    def test_quoted_values_kept(self):
        result = _convert("[data-foo='bar'] { content: 'x'; animation-delay: 1s }")
        assert _classes(result) == [("[data-foo='bar']", ["content-['x']"])]
        assert result.css.startswith("[data-foo='bar'] {\n")

    def test_convert_declaration(self):
        converter = TailwindConverter(ConverterConfig(rem_in_px=16))
        assert converter.convert_declaration("padding", "1rem 2rem") == [
            "pt-4",
            "pr-8",
            "pb-4",
            "pl-8",
        ]
        assert converter.convert_declaration("animation-delay", "200ms") == []

    def test_arbitrary_property_respects_core_plugins(self):
        converter = TailwindConverter(
            ConverterConfig(
                tailwind_config={"corePlugins": {"textAlign": False}},
                arbitrary_properties=True,
            )
        )
        assert converter.convert_declaration("text-align", "center") == []


class TestLogging:
    def test_debug_messages(self, caplog):
        caplog.set_level(logging.DEBUG, logger="tailwindify")
        _convert(
            "@layer base { .a { animation-delay: 1s; text-align: center } } .b & { display: none }"
        )
        messages = [record.getMessage() for record in caplog.records]
        assert any("Cannot convert declaration 'animation-delay: 1s'" in m for m in messages)
        assert any("Context of '.a' is not convertible" in m for m in messages)
        assert any("Selector '.b &' is not decomposable" in m for m in messages)
        assert messages[-1] == "Converted 2 declarations from 2 rules into 2 nodes"

    def test_injected_logger(self, caplog):
        logger = logging.getLogger("tests.converter")
        caplog.set_level(logging.INFO, logger="tests.converter")
        TailwindConverter(logger=logger).convert_css(".a { display: none }")
        assert [record.name for record in caplog.records] == ["tests.converter"]
