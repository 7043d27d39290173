"""Declaration conversion: one CSS declaration to utility classes.

    >>> convert_declaration("padding-top", "1rem", config)
    ['pt-4']

Unknown properties, disabled core plugins and unconvertible values all
yield an empty list; the caller decides what to do with the declaration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tailwindify.declarations.properties import CONVERTERS, Property, PropertySpec
from tailwindify.values import collapse_whitespace, escape_arbitrary

if TYPE_CHECKING:
    from tailwindify.config import ResolvedConfig

__all__ = [
    "CONVERTERS",
    "Property",
    "PropertySpec",
    "all_core_plugins",
    "apply_modifiers",
    "arbitrary_property",
    "convert_declaration",
    "find_property",
    "is_property_enabled",
]


def find_property(prop: str) -> Property | None:
    """The :class:`Property` named *prop*, or ``None`` when unsupported."""
    try:
        return Property(prop.strip().lower())
    except ValueError:
        return None


def all_core_plugins() -> list[str]:
    """Every core plugin name some property belongs to, sorted."""
    return sorted({plugin for spec in CONVERTERS.values() for plugin in spec.plugins})


def is_property_enabled(prop: Property, config: ResolvedConfig) -> bool:
    return all(config.is_plugin_enabled(plugin) for plugin in CONVERTERS[prop].plugins)


def apply_modifiers(utility: str, prefix: str = "", important: bool = False) -> str:
    """Add the class-name *prefix* and important marker to *utility*.

    Placement follows Tailwind: ``!`` first, then the negative sign, then
    the prefix (``!-tw-mt-2``).
    """
    negative = utility.startswith("-")
    body = utility[1:] if negative else utility
    return f"{'!' if important else ''}{'-' if negative else ''}{prefix}{body}"


def arbitrary_property(
    prop: str, value: str, config: ResolvedConfig, important: bool = False
) -> str:
    """``[prop:value]`` escape for a declaration no utility covers."""
    utility = f"[{prop.strip().lower()}:{escape_arbitrary(collapse_whitespace(value))}]"
    return apply_modifiers(utility, config.prefix, important)


def convert_declaration(
    prop: str, value: str, config: ResolvedConfig, important: bool = False
) -> list[str]:
    """Utility classes for ``prop: value``, or ``[]`` when not convertible."""
    prop_id = find_property(prop)
    if prop_id is None or not is_property_enabled(prop_id, config):
        return []
    classes = CONVERTERS[prop_id].convert(value, config)
    if not classes:
        return []
    return [apply_modifiers(utility, config.prefix, important) for utility in classes]
