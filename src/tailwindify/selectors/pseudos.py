"""Pseudo-class and pseudo-element names with a Tailwind variant."""

from __future__ import annotations

__all__ = ["PSEUDO_VARIANTS", "pseudo_variant"]

# Functional pseudos are keyed with their argument, spaces removed.
PSEUDO_VARIANTS: dict[str, str] = {
    "hover": "hover",
    "focus": "focus",
    "focus-within": "focus-within",
    "focus-visible": "focus-visible",
    "active": "active",
    "visited": "visited",
    "target": "target",
    "first-child": "first",
    "last-child": "last",
    "only-child": "only",
    "nth-child(odd)": "odd",
    "nth-child(2n+1)": "odd",
    "nth-child(even)": "even",
    "nth-child(2n)": "even",
    "first-of-type": "first-of-type",
    "last-of-type": "last-of-type",
    "only-of-type": "only-of-type",
    "empty": "empty",
    "disabled": "disabled",
    "enabled": "enabled",
    "checked": "checked",
    "indeterminate": "indeterminate",
    "default": "default",
    "required": "required",
    "valid": "valid",
    "invalid": "invalid",
    "in-range": "in-range",
    "out-of-range": "out-of-range",
    "placeholder-shown": "placeholder-shown",
    "autofill": "autofill",
    "read-only": "read-only",
    "before": "before",
    "after": "after",
    "first-letter": "first-letter",
    "first-line": "first-line",
    "marker": "marker",
    "selection": "selection",
    "placeholder": "placeholder",
    "file-selector-button": "file",
    "backdrop": "backdrop",
}


def pseudo_variant(name: str, argument: str | None = None) -> str | None:
    """Variant name for ``:name(argument)``, or ``None`` when it has none."""
    key = name.lower()
    if argument is not None:
        key = f"{key}({''.join(argument.split()).lower()})"
    return PSEUDO_VARIANTS.get(key)
