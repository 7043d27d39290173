"""ThemeMapping: a resolved theme inverted into value -> token tables.

Each theme category is flattened (nested scales joined with ``-``), each
raw value normalized with the normalizer matching the category's kind,
and the pairs inverted.  When two tokens normalize to the same value the
later one in the category's insertion order wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping

from tailwindify.values import (
    collapse_whitespace,
    normalize_color,
    normalize_size,
    normalize_value,
    remove_unnecessary_spaces,
)

__all__ = [
    "DEFAULT_TOKEN",
    "SIZE_CATEGORIES",
    "ThemeMapping",
    "build_media_query",
    "build_theme_mapping",
    "flatten_tokens",
    "normalize_media_query",
]

DEFAULT_TOKEN = "DEFAULT"

SKIPPED_CATEGORIES = frozenset({"keyframes", "container", "fontFamily"})

SIZE_CATEGORIES = frozenset(
    {
        "backdropBlur",
        "backgroundSize",
        "blur",
        "borderRadius",
        "borderSpacing",
        "borderWidth",
        "columns",
        "divideWidth",
        "flexBasis",
        "gap",
        "height",
        "inset",
        "letterSpacing",
        "lineHeight",
        "margin",
        "maxHeight",
        "maxWidth",
        "minHeight",
        "minWidth",
        "outlineOffset",
        "outlineWidth",
        "padding",
        "ringOffsetWidth",
        "ringWidth",
        "scrollMargin",
        "scrollPadding",
        "space",
        "spacing",
        "strokeWidth",
        "textDecorationThickness",
        "textIndent",
        "textUnderlineOffset",
        "translate",
        "width",
    }
)

Normalizer = Callable[[str], str]


def _is_color_category(name: str) -> bool:
    return name in ("fill", "stroke") or "color" in name.lower()


def flatten_tokens(tokens: Mapping[str, Any], separator: str = "-") -> dict[str, Any]:
    """Flatten nested token dicts into ``{"red-500": value}`` pairs.

    A ``DEFAULT`` segment at the end of a nested path is dropped, so
    ``{"red": {"DEFAULT": ...}}`` yields the token ``red``; a top-level
    ``DEFAULT`` keeps its sentinel name.
    """
    flat: dict[str, Any] = {}
    for key, value in tokens.items():
        if isinstance(value, Mapping):
            for sub_key, sub_value in flatten_tokens(value, separator).items():
                name = str(key) if sub_key == DEFAULT_TOKEN else f"{key}{separator}{sub_key}"
                flat[name] = sub_value
        else:
            flat[str(key)] = value
    return flat


def normalize_media_query(query: str) -> str:
    """Normalize a media query for breakpoint lookup."""
    return remove_unnecessary_spaces(collapse_whitespace(query)).lower()


def build_media_query(screen: Any) -> str:
    """Render a ``screens`` entry as the media query it stands for.

    Strings mean ``min-width``; dicts may carry ``min``, ``max`` or ``raw``;
    lists render each entry and join them with ``, ``.
    """
    if isinstance(screen, str):
        return f"(min-width: {screen})"
    screens = screen if isinstance(screen, (list, tuple)) else [screen]
    queries: list[str] = []
    for item in screens:
        if isinstance(item, str):
            queries.append(f"(min-width: {item})")
            continue
        if item.get("raw"):
            queries.append(item["raw"])
            continue
        conditions = []
        if item.get("min"):
            conditions.append(f"(min-width: {item['min']})")
        if item.get("max"):
            conditions.append(f"(max-width: {item['max']})")
        if conditions:
            queries.append(" and ".join(conditions))
    return ", ".join(queries)


def _stringify(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    return str(value)


def _invert(pairs: Mapping[str, Any], normalizer: Normalizer) -> dict[str, str]:
    inverted: dict[str, str] = {}
    for token, raw in pairs.items():
        text = _stringify(raw)
        if text:
            inverted[normalizer(text)] = token
    return inverted


def _normalize_attribute_shortcut(value: str) -> str:
    return collapse_whitespace(value).replace("'", '"')


@dataclass(frozen=True)
class ThemeMapping:
    """Per-category lookup tables built from a resolved theme."""

    tables: Mapping[str, Mapping[str, str]]
    normalizers: Mapping[str, Normalizer]

    def table(self, category: str) -> Mapping[str, str]:
        return self.tables.get(category, MappingProxyType({}))

    def normalize(self, category: str, value: str) -> str:
        normalizer = self.normalizers.get(category, normalize_value)
        return normalizer(value)

    def lookup(self, category: str, value: str) -> str | None:
        """Token for *value* in *category*, or ``None``."""
        return self.table(category).get(self.normalize(category, value))

    def screen(self, query: str) -> str | None:
        return self.table("screens").get(normalize_media_query(query))

    def supports(self, condition: str) -> str | None:
        return self.table("supports").get(remove_unnecessary_spaces(condition))

    def aria(self, condition: str) -> str | None:
        return self.table("aria").get(_normalize_attribute_shortcut(condition))

    def data(self, condition: str) -> str | None:
        return self.table("data").get(_normalize_attribute_shortcut(condition))


def build_theme_mapping(
    theme: Mapping[str, Any], rem_in_px: float | None = None
) -> ThemeMapping:
    """Invert every category of a resolved *theme* into a lookup table."""
    tables: dict[str, Mapping[str, str]] = {}
    normalizers: dict[str, Normalizer] = {}

    def size(value: str) -> str:
        return normalize_size(value, rem_in_px)

    for category, tokens in theme.items():
        if category in SKIPPED_CATEGORIES or not isinstance(tokens, Mapping):
            continue

        if category == "fontSize":
            normalizers[category] = size
            first_values = {
                token: value[0] if isinstance(value, (list, tuple)) else value
                for token, value in tokens.items()
            }
            table = _invert(first_values, size)
        elif category == "screens":
            table = {
                normalize_media_query(build_media_query(screen)): token
                for token, screen in tokens.items()
            }
        elif category == "supports":
            table = _invert(
                tokens,
                lambda value: remove_unnecessary_spaces(collapse_whitespace(value)),
            )
        elif category in ("aria", "data"):
            table = _invert(tokens, _normalize_attribute_shortcut)
        elif _is_color_category(category):
            normalizers[category] = normalize_color
            table = _invert(flatten_tokens(tokens), normalize_color)
        elif category in SIZE_CATEGORIES:
            normalizers[category] = size
            table = _invert(flatten_tokens(tokens), size)
        else:
            normalizers[category] = normalize_value
            table = _invert(flatten_tokens(tokens), normalize_value)

        tables[category] = MappingProxyType(table)

    return ThemeMapping(
        tables=MappingProxyType(tables), normalizers=MappingProxyType(normalizers)
    )