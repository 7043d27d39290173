"""Tests for splitting selectors into a base selector and variants."""

import pytest

from tailwindify.config import ConverterConfig, resolve_config
from tailwindify.selectors import decompose_selector_list


@pytest.fixture(scope="module")
def mapping():
    return resolve_config().mapping


def _one(selector, mapping):
    decomposed = decompose_selector_list(selector, mapping)
    assert len(decomposed) == 1
    return decomposed[0]


class TestPseudoVariants:
    def test_hover(self, mapping):
        decomposed = _one(".foo:hover", mapping)
        assert decomposed.selector == ".foo"
        assert decomposed.prefix() == "hover:"
        assert decomposed.source == ".foo:hover"
        assert decomposed.decomposable

    def test_variants_keep_selector_order(self, mapping):
        assert _one(".foo:hover:focus", mapping).prefix() == "hover:focus:"

    def test_pseudo_element(self, mapping):
        decomposed = _one(".foo:first-child::before", mapping)
        assert decomposed.selector == ".foo"
        assert decomposed.prefix() == "first:before:"

    def test_custom_separator(self, mapping):
        assert _one(".foo:hover", mapping).prefix("_") == "hover_"

    def test_only_rightmost_compound(self, mapping):
        decomposed = _one(".card:hover > a.link:focus", mapping)
        assert decomposed.selector == ".card:hover > a.link"
        assert decomposed.prefix() == "focus:"

    def test_structural_part_stops_the_run(self, mapping):
        decomposed = _one(".foo:hover:not(.x)", mapping)
        assert decomposed.selector == ".foo:hover:not(.x)"
        assert decomposed.variants == ()

    def test_no_variants(self, mapping):
        decomposed = _one(".foo .bar", mapping)
        assert decomposed.selector == ".foo .bar"
        assert decomposed.variants == ()
        assert decomposed.source == ".foo .bar"

    def test_variants_only(self, mapping):
        decomposed = _one(":hover", mapping)
        assert decomposed.selector == ""
        assert decomposed.prefix() == "hover:"

    def test_vanishing_rightmost_compound(self, mapping):
        decomposed = _one(".a :hover", mapping)
        assert not decomposed.decomposable
        assert decomposed.selector == ".a :hover"

    def test_nth_child(self, mapping):
        decomposed = _one("li:nth-child(2n+1)", mapping)
        assert decomposed.selector == "li"
        assert decomposed.prefix() == "odd:"


class TestAttributeVariants:
    def test_aria_shortcut(self, mapping):
        decomposed = _one(".btn[aria-checked='true']", mapping)
        assert decomposed.selector == ".btn"
        assert decomposed.prefix() == "aria-checked:"

    def test_aria_bare_value(self, mapping):
        assert _one(".btn[aria-checked=true]", mapping).prefix() == "aria-checked:"

    def test_unknown_aria_value_is_structural(self, mapping):
        decomposed = _one(".foo[aria-hidden='false']", mapping)
        assert decomposed.selector == '.foo[aria-hidden="false"]'
        assert decomposed.variants == ()

    def test_data_shortcut_from_theme(self):
        mapping = resolve_config(
            ConverterConfig(
                tailwind_config={"theme": {"data": {"open": 'state="open"'}}}
            )
        ).mapping
        decomposed = _one(".panel[data-state=open]:hover", mapping)
        assert decomposed.selector == ".panel"
        assert decomposed.prefix() == "data-open:hover:"

    def test_presence_attribute_is_structural(self, mapping):
        decomposed = _one("div > [data-zoo]", mapping)
        assert decomposed.selector == "div > [data-zoo]"


class TestSelectorLists:
    def test_each_selector_decomposed(self, mapping):
        decomposed = decompose_selector_list(".a:hover, .b", mapping)
        assert [(item.selector, item.prefix()) for item in decomposed] == [
            (".a", "hover:"),
            (".b", ""),
        ]

    def test_unparsable_selectors_flagged(self, mapping):
        decomposed = decompose_selector_list("&:hover,  .x", mapping)
        assert [item.selector for item in decomposed] == ["&:hover", ".x"]
        assert not any(item.decomposable for item in decomposed)

    def test_empty_selector(self, mapping):
        decomposed = decompose_selector_list("", mapping)
        assert len(decomposed) == 1
        assert decomposed[0].selector == ""
        assert not decomposed[0].decomposable
