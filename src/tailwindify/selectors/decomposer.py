"""Split selectors into a structural base and ordered variant tokens.

Only the rightmost compound selector is decomposed, and only the run of
convertible items after its last structural item: ``.card > a.link:hover``
becomes base ``.card > a.link`` with the ``hover`` variant.  Items left of
the last combinator stay in the base verbatim.  A lone compound made only
of variants (``:hover``, left over by nesting ``&:hover`` in a rule with
an empty selector) decomposes to an empty base.
"""

from __future__ import annotations

from dataclasses import dataclass

from tailwindify.errors import SelectorSyntaxError
from tailwindify.selectors.model import (
    ATTRIBUTE,
    PSEUDO_CLASS,
    PSEUDO_ELEMENT,
    ComplexSelector,
    SelectorPart,
    VariantToken,
)
from tailwindify.selectors.parser import parse_selector_list
from tailwindify.selectors.pseudos import pseudo_variant
from tailwindify.theme.mapper import ThemeMapping
from tailwindify.values import collapse_whitespace, split_top_level

__all__ = [
    "DecomposedSelector",
    "decompose",
    "decompose_selector_list",
    "part_variant",
]


@dataclass(frozen=True)
class DecomposedSelector:
    """A base selector plus the variants stripped from it.

    ``source`` is the whole selector the base was taken from.
    """

    selector: str
    variants: tuple[VariantToken, ...] = ()
    decomposable: bool = True
    source: str = ""

    def __post_init__(self) -> None:
        if not self.source:
            object.__setattr__(self, "source", self.selector)

    def prefix(self, separator: str = ":") -> str:
        return "".join(token.render(separator) for token in self.variants)


def _attribute_variant(part: SelectorPart, mapping: ThemeMapping) -> VariantToken | None:
    attribute = part.attribute
    if attribute is None or attribute.operator is None:
        return None
    name = attribute.name.lower()
    for family, lookup in (("aria", mapping.aria), ("data", mapping.data)):
        if not name.startswith(f"{family}-"):
            continue
        condition = f'{attribute.name[len(family) + 1:]}{attribute.operator}"{attribute.value}"'
        token = lookup(condition)
        if token is not None:
            return VariantToken("ariaData", f"{family}-{token}")
    return None


def part_variant(part: SelectorPart, mapping: ThemeMapping) -> VariantToken | None:
    """The variant *part* converts to, or ``None`` for structural parts."""
    if part.kind in (PSEUDO_CLASS, PSEUDO_ELEMENT):
        name = pseudo_variant(part.name, part.argument)
        return VariantToken("pseudo", name) if name else None
    if part.kind == ATTRIBUTE:
        return _attribute_variant(part, mapping)
    return None


def decompose(selector: ComplexSelector, mapping: ThemeMapping) -> DecomposedSelector:
    """Strip the trailing convertible run of *selector*'s rightmost compound."""
    start = selector.rightmost_start
    compound = selector.parts[start:]

    variants: list[VariantToken] = []
    split = len(compound)
    for index in range(len(compound) - 1, -1, -1):
        token = part_variant(compound[index], mapping)
        if token is None:
            break
        variants.append(token)
        split = index

    if split == 0 and start > 0:
        # ".a :hover": the rightmost compound would vanish.
        return DecomposedSelector(str(selector), decomposable=False)

    base = ComplexSelector(selector.parts[: start + split])
    return DecomposedSelector(str(base), tuple(reversed(variants)), source=str(selector))


def decompose_selector_list(
    selector: str, mapping: ThemeMapping
) -> list[DecomposedSelector]:
    """Decompose each selector of a comma separated list independently.

    Selectors the grammar cannot parse are returned unchanged and flagged
    as not decomposable.
    """
    try:
        parsed = parse_selector_list(selector)
    except SelectorSyntaxError:
        items = split_top_level(selector, ",") or [selector]
        return [
            DecomposedSelector(collapse_whitespace(item), decomposable=False)
            for item in items
        ]
    return [decompose(item, mapping) for item in parsed]
