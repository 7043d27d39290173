"""Converters for shorthand properties made of several sub-components.

A composite converts atomically: when one required sub-component cannot be
expressed the whole declaration yields ``None``.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Sequence

from tinycss2.color3 import parse_color

from tailwindify.declarations.common import convert_all, keyword, themed
from tailwindify.declarations.keywords import KEYWORD_UTILITIES
from tailwindify.values import (
    collapse_whitespace,
    is_css_variable,
    parse_css_function,
    split_top_level,
)

if TYPE_CHECKING:
    from tailwindify.config import ResolvedConfig

__all__ = [
    "BACKDROP_FILTER_FUNCTIONS",
    "FILTER_FUNCTIONS",
    "background",
    "border",
    "box",
    "expand_box",
    "filters",
    "flex_flow",
    "gap",
    "outline",
    "single_or_box",
    "text_decoration",
    "transform",
    "transition",
]

_LENGTH_RE = re.compile(r"^-?(\d+\.?\d*|\.\d+)([a-z]+|%)?$", re.IGNORECASE)
_TIME_RE = re.compile(r"^-?(\d+\.?\d*|\.\d+)m?s$", re.IGNORECASE)
_MATH_FUNCTIONS = frozenset({"calc", "min", "max", "clamp"})
_LINE_WIDTHS = {"thin": "1px", "medium": "3px", "thick": "5px"}


def _is_length(token: str) -> bool:
    if _LENGTH_RE.match(token):
        return True
    parsed = parse_css_function(token)
    return parsed is not None and parsed[0].lower() in _MATH_FUNCTIONS


def _is_time(token: str) -> bool:
    return _TIME_RE.match(token) is not None


def _is_color(token: str) -> bool:
    return is_css_variable(token) or parse_color(token) is not None


def expand_box(value: str) -> tuple[str, str, str, str] | None:
    """Expand 1-4 box values to ``(top, right, bottom, left)``."""
    parts = split_top_level(value)
    if not 1 <= len(parts) <= 4:
        return None
    top = parts[0]
    right = parts[1] if len(parts) > 1 else top
    bottom = parts[2] if len(parts) > 2 else top
    left = parts[3] if len(parts) > 3 else right
    return top, right, bottom, left


def box(
    value: str,
    config: ResolvedConfig,
    category: str,
    prefixes: Sequence[str],
    *,
    hint: str | None = "length",
    negative: bool = False,
) -> list[str] | None:
    """A 1-4 value box shorthand, one class per side in *prefixes* order."""
    sides = expand_box(value)
    if sides is None:
        return None
    return convert_all(
        themed(side, config, category, prefix, hint=hint, negative=negative)
        for side, prefix in zip(sides, prefixes)
    )


def single_or_box(
    value: str,
    config: ResolvedConfig,
    category: str,
    prefix: str,
    prefixes: Sequence[str],
    *,
    hint: str | None,
) -> list[str] | None:
    """One class under *prefix* for a single value, else a box per side."""
    if len(split_top_level(value)) == 1:
        return themed(value, config, category, prefix, hint=hint)
    if "/" in value:
        return None
    return box(value, config, category, prefixes, hint=hint)


def _line(
    value: str,
    config: ResolvedConfig,
    prefix: str,
    width_category: str,
    style_prop: str,
    color_category: str,
) -> list[str] | None:
    parts = split_top_level(value)
    if not 1 <= len(parts) <= 3:
        return None

    width = style = color = None
    for part in parts:
        lowered = part.lower()
        if lowered in KEYWORD_UTILITIES[style_prop]:
            if style is not None:
                return None
            style = lowered
        elif lowered in _LINE_WIDTHS or _is_length(part):
            if width is not None:
                return None
            width = _LINE_WIDTHS.get(lowered, part)
        elif _is_color(part):
            if color is not None:
                return None
            color = part
        else:
            return None

    conversions = []
    if width is not None:
        conversions.append(themed(width, config, width_category, prefix, hint="length"))
    if style is not None:
        conversions.append(keyword(style_prop, style))
    if color is not None:
        conversions.append(themed(color, config, color_category, prefix, hint="color"))
    return convert_all(conversions)


def border(value: str, config: ResolvedConfig, prefix: str) -> list[str] | None:
    """``border`` and ``border-{side}``: width, style and color, any order."""
    return _line(value, config, prefix, "borderWidth", "border-style", "borderColor")


def outline(value: str, config: ResolvedConfig) -> list[str] | None:
    """``outline``: width, style and color, any order."""
    return _line(value, config, "outline", "outlineWidth", "outline-style", "outlineColor")


# name -> (theme category, axis prefixes, prefix when given a single argument)
_TRANSFORMS: dict[str, tuple[str, tuple[str, ...], str | None]] = {
    "translate": ("translate", ("translate-x", "translate-y"), None),
    "translatex": ("translate", ("translate-x",), None),
    "translatey": ("translate", ("translate-y",), None),
    "scale": ("scale", ("scale-x", "scale-y"), "scale"),
    "scalex": ("scale", ("scale-x",), None),
    "scaley": ("scale", ("scale-y",), None),
    "skew": ("skew", ("skew-x", "skew-y"), None),
    "skewx": ("skew", ("skew-x",), None),
    "skewy": ("skew", ("skew-y",), None),
    "rotate": ("rotate", ("rotate",), None),
}


def transform(value: str, config: ResolvedConfig) -> list[str] | None:
    """``transform``: each function maps onto one utility per axis.

    Unsupported functions (``translateZ``, ``matrix`` ...) and functions
    that target a utility already produced fail the declaration.
    """
    if collapse_whitespace(value).lower() == "none":
        return ["transform-none"]

    targets: list[tuple[str, str, str]] = []
    for function in split_top_level(value):
        parsed = parse_css_function(function)
        if parsed is None or parsed[0].lower() not in _TRANSFORMS:
            return None
        name, arguments = parsed
        category, axes, single = _TRANSFORMS[name.lower()]
        args = split_top_level(arguments, ",")
        if not args or len(args) > len(axes):
            return None
        if single and len(args) == 1:
            targets.append((category, single, args[0]))
        else:
            targets.extend((category, axis, arg) for axis, arg in zip(axes, args))

    prefixes = [prefix for _, prefix, _ in targets]
    if not targets or len(set(prefixes)) != len(prefixes):
        return None

    return convert_all(
        themed(
            arg,
            config,
            category,
            prefix,
            hint="length" if category == "translate" else None,
            negative=True,
        )
        for category, prefix, arg in targets
    )


# function -> (theme category, utility prefix, allows negative values)
FILTER_FUNCTIONS: dict[str, tuple[str, str, bool]] = {
    "blur": ("blur", "blur", False),
    "brightness": ("brightness", "brightness", False),
    "contrast": ("contrast", "contrast", False),
    "drop-shadow": ("dropShadow", "drop-shadow", False),
    "grayscale": ("grayscale", "grayscale", False),
    "hue-rotate": ("hueRotate", "hue-rotate", True),
    "invert": ("invert", "invert", False),
    "saturate": ("saturate", "saturate", False),
    "sepia": ("sepia", "sepia", False),
}

BACKDROP_FILTER_FUNCTIONS: dict[str, tuple[str, str, bool]] = {
    "blur": ("backdropBlur", "backdrop-blur", False),
    "brightness": ("backdropBrightness", "backdrop-brightness", False),
    "contrast": ("backdropContrast", "backdrop-contrast", False),
    "grayscale": ("backdropGrayscale", "backdrop-grayscale", False),
    "hue-rotate": ("backdropHueRotate", "backdrop-hue-rotate", True),
    "invert": ("backdropInvert", "backdrop-invert", False),
    "opacity": ("backdropOpacity", "backdrop-opacity", False),
    "saturate": ("backdropSaturate", "backdrop-saturate", False),
    "sepia": ("backdropSepia", "backdrop-sepia", False),
}


def filters(
    value: str,
    config: ResolvedConfig,
    functions: dict[str, tuple[str, str, bool]],
    none_class: str,
) -> list[str] | None:
    """``filter`` / ``backdrop-filter``: a list of distinct filter functions."""
    if collapse_whitespace(value).lower() == "none":
        return [none_class]

    calls: list[tuple[str, str]] = []
    for function in split_top_level(value):
        parsed = parse_css_function(function)
        if parsed is None:
            return None
        name = parsed[0].lower()
        if name not in functions or any(seen == name for seen, _ in calls):
            return None
        calls.append((name, parsed[1]))

    return convert_all(
        themed(
            argument,
            config,
            functions[name][0],
            functions[name][1],
            negative=functions[name][2],
        )
        for name, argument in calls
    )


def transition(value: str, config: ResolvedConfig) -> list[str] | None:
    """``transition``: ``property [duration [timing-function|delay [delay]]]``.

    The third slot is a delay when it parses as a time.  Lists of several
    transitions are not convertible.
    """
    if len(split_top_level(value, ",")) != 1:
        return None
    parts = split_top_level(value)
    if not 1 <= len(parts) <= 4 or _is_time(parts[0]):
        return None

    def delay(token: str) -> list[str] | None:
        if not _is_time(token):
            return None
        return themed(token, config, "transitionDelay", "delay")

    conversions = [themed(parts[0], config, "transitionProperty", "transition")]
    rest = parts[1:]
    if rest:
        duration = rest.pop(0)
        if not _is_time(duration):
            return None
        conversions.append(themed(duration, config, "transitionDuration", "duration"))
    if rest:
        third = rest.pop(0)
        if _is_time(third):
            if rest:
                return None
            conversions.append(delay(third))
        else:
            conversions.append(
                themed(third, config, "transitionTimingFunction", "ease")
            )
            if rest:
                conversions.append(delay(rest.pop(0)))
    return convert_all(conversions)


def flex_flow(value: str, config: ResolvedConfig) -> list[str] | None:
    """``flex-flow``: a direction and/or a wrap keyword."""
    parts = split_top_level(value)
    if not 1 <= len(parts) <= 2:
        return None
    seen: set[str] = set()
    conversions = []
    for part in parts:
        for prop in ("flex-direction", "flex-wrap"):
            if part.lower() in KEYWORD_UTILITIES[prop]:
                break
        else:
            return None
        if prop in seen:
            return None
        seen.add(prop)
        conversions.append(keyword(prop, part))
    return convert_all(conversions)


_DECORATION_THICKNESS_KEYWORDS = frozenset({"auto", "from-font"})


def text_decoration(value: str, config: ResolvedConfig) -> list[str] | None:
    """``text-decoration``: line, style, thickness and color, any order."""
    slots: dict[str, str] = {}
    for part in split_top_level(value):
        lowered = part.lower()
        if lowered in KEYWORD_UTILITIES["text-decoration-line"]:
            slot = "line"
        elif lowered in KEYWORD_UTILITIES["text-decoration-style"]:
            slot = "style"
        elif lowered in _DECORATION_THICKNESS_KEYWORDS or _is_length(part):
            slot = "thickness"
        elif _is_color(part):
            slot = "color"
        else:
            return None
        if slot in slots:
            return None
        slots[slot] = part
    if not slots:
        return None

    conversions = []
    if "line" in slots:
        conversions.append(keyword("text-decoration-line", slots["line"]))
    if "style" in slots:
        conversions.append(keyword("text-decoration-style", slots["style"]))
    if "thickness" in slots:
        conversions.append(
            themed(slots["thickness"], config, "textDecorationThickness", "decoration", hint="length")
        )
    if "color" in slots:
        conversions.append(
            themed(slots["color"], config, "textDecorationColor", "decoration", hint="color")
        )
    return convert_all(conversions)


def gap(value: str, config: ResolvedConfig) -> list[str] | None:
    """``gap``: one value for both axes, or ``row column``."""
    parts = split_top_level(value)
    if len(parts) == 1 or len(parts) == 2 and parts[0] == parts[1]:
        return themed(parts[0], config, "gap", "gap", hint="length")
    if len(parts) != 2:
        return None
    return convert_all(
        themed(part, config, "gap", prefix, hint="length")
        for part, prefix in zip(parts, ("gap-y", "gap-x"))
    )


def background(value: str, config: ResolvedConfig) -> list[str] | None:
    """``background``: only the single-color and ``none`` forms."""
    parts = split_top_level(value)
    if len(parts) != 1:
        return None
    if parts[0].lower() == "none":
        return ["bg-none"]
    if not _is_color(parts[0]):
        return None
    return themed(parts[0], config, "backgroundColor", "bg", hint="color")
