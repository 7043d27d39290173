"""At-rule context: ``@media`` / ``@supports`` ancestors as variant tokens.

    >>> resolve_context(rule, mapping)            # inside @media (min-width: 768px)
    (VariantToken(kind='media', name='md'),)

Any ancestor other than ``@media`` or ``@supports`` (including a plain
rule, with native nesting) vetoes the whole chain and ``None`` is
returned.  So does a media feature with no variant.
"""

from __future__ import annotations

import re
from typing import Iterable

from tailwindify.css.tree import AtRule, Rule
from tailwindify.selectors.model import VariantToken
from tailwindify.theme.mapper import ThemeMapping, normalize_media_query
from tailwindify.values import (
    collapse_whitespace,
    escape_arbitrary,
    remove_unnecessary_spaces,
)

__all__ = [
    "MEDIA_FEATURE_VARIANTS",
    "media_variants",
    "resolve_context",
    "supports_variant",
]

MEDIA_FEATURE_VARIANTS: dict[str, str] = {
    "print": "print",
    "orientation:portrait": "portrait",
    "orientation:landscape": "landscape",
    "prefers-contrast:more": "contrast-more",
    "prefers-contrast:less": "contrast-less",
    "prefers-color-scheme:dark": "dark",
    "prefers-reduced-motion:no-preference": "motion-safe",
    "prefers-reduced-motion:reduce": "motion-reduce",
}

_AND_RE = re.compile(r"\s+and\s+", re.IGNORECASE)
_SIZE_FEATURE_RE = re.compile(r"\b(?:min-|max-)?(?:width|height)\b")


def _unwrap(condition: str) -> str:
    """Drop one pair of parentheses wrapping the whole *condition*."""
    text = condition.strip()
    if text.startswith("(") and text.endswith(")") and _balanced(text[1:-1]):
        return text[1:-1].strip()
    return text


def _balanced(text: str) -> bool:
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def media_variants(params: str, mapping: ThemeMapping) -> list[VariantToken] | None:
    """Variant tokens for one ``@media`` prelude, or ``None`` if any part is unknown."""
    screen = mapping.screen(params)
    if screen is not None:
        return [VariantToken("media", screen)]

    size_conditions: list[str] = []
    features: list[VariantToken] = []
    for token in _AND_RE.split(collapse_whitespace(params)):
        normalized = normalize_media_query(token)
        if normalized in ("screen", "only screen"):
            continue
        if _SIZE_FEATURE_RE.search(normalized):
            size_conditions.append(normalized)
            continue
        variant = MEDIA_FEATURE_VARIANTS.get(_unwrap(normalized))
        if variant is None:
            return None
        features.append(VariantToken("media", variant))

    tokens: list[VariantToken] = []
    if size_conditions:
        screen = mapping.screen(" and ".join(size_conditions))
        if screen is None:
            return None
        tokens.append(VariantToken("media", screen))
    return tokens + features


def supports_variant(conditions: Iterable[str], mapping: ThemeMapping) -> VariantToken:
    """One token for all ``@supports`` conditions, shortcut or arbitrary."""
    joined = " and ".join(collapse_whitespace(condition) for condition in conditions)
    shortcut = mapping.supports(_unwrap(joined))
    if shortcut is not None:
        return VariantToken("supports", f"supports-{shortcut}")
    condition = remove_unnecessary_spaces(_unwrap(joined))
    return VariantToken("supports", f"supports-[{escape_arbitrary(condition)}]")


def resolve_context(
    node: Rule | AtRule, mapping: ThemeMapping
) -> tuple[VariantToken, ...] | None:
    """Variant tokens contributed by *node*'s ancestors, or ``None`` (veto).

    Media tokens come first, then the supports token, both in authoring
    order (outermost at-rule first).
    """
    media: list[str] = []
    supports: list[str] = []
    for ancestor in node.ancestors():
        if not isinstance(ancestor, AtRule):
            return None
        name = ancestor.name.lower()
        if name == "media":
            media.append(ancestor.params)
        elif name == "supports":
            supports.append(ancestor.params)
        else:
            return None

    tokens: list[VariantToken] = []
    for params in reversed(media):
        converted = media_variants(params, mapping)
        if converted is None:
            return None
        tokens.extend(converted)
    if supports:
        tokens.append(supports_variant(reversed(supports), mapping))
    return tuple(tokens)
