"""Selector parsing and decomposition into base selector plus variants."""

from tailwindify.selectors.decomposer import (
    DecomposedSelector,
    decompose,
    decompose_selector_list,
)
from tailwindify.selectors.model import (
    Attribute,
    ComplexSelector,
    SelectorPart,
    VariantToken,
)
from tailwindify.selectors.parser import parse_selector_list
from tailwindify.selectors.pseudos import PSEUDO_VARIANTS, pseudo_variant

__all__ = [
    "Attribute",
    "ComplexSelector",
    "DecomposedSelector",
    "PSEUDO_VARIANTS",
    "SelectorPart",
    "VariantToken",
    "decompose",
    "decompose_selector_list",
    "parse_selector_list",
    "pseudo_variant",
]
