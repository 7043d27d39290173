"""Value normalization: canonical forms of CSS value text for theme lookup.

Every lookup against a theme table goes through one of the normalizers in
this module, on both sides: theme values are normalized when the table is
built, declaration values when they are converted.  Lookups are plain
string equality on the normalized text.
"""

from __future__ import annotations

import re

from tinycss2.color3 import parse_color

__all__ = [
    "collapse_whitespace",
    "escape_arbitrary",
    "format_number",
    "is_css_variable",
    "normalize_color",
    "normalize_number",
    "normalize_numbers_in_string",
    "normalize_size",
    "normalize_value",
    "parse_css_function",
    "rem_to_px",
    "remove_unnecessary_spaces",
    "split_top_level",
]

_LEADING_DOT_RE = re.compile(r"^(-?)\.(\d)")
_NUMBERS_IN_STRING_RE = re.compile(r"(^|[,;+\-/*\s(])(\.\d+)")
_PUNCTUATION_SPACES_RE = re.compile(r"\s*([,;:])\s*")
_REM_RE = re.compile(r"^-?(\d+)?\.?\d+rem$")
_ZERO_RE = re.compile(r"^[-+]?0*\.?0+$")
_CSS_VARIABLE_RE = re.compile(r"^var\((--.+?)\)$")
_CSS_FUNCTION_RE = re.compile(r"^(?P<name>[\w-]+)\((?P<value>.*)\)$", re.DOTALL)


def collapse_whitespace(value: str) -> str:
    """Trim *value* and collapse every whitespace run to a single space."""
    return " ".join(value.split())


def normalize_number(value: str) -> str:
    """Add the leading ``0`` a value starting with a decimal point omits."""
    return _LEADING_DOT_RE.sub(r"\g<1>0.\g<2>", value.strip())


def normalize_numbers_in_string(value: str) -> str:
    """Like :func:`normalize_number`, for every number inside *value*."""
    return _NUMBERS_IN_STRING_RE.sub(r"\g<1>0\g<2>", value)


def remove_unnecessary_spaces(value: str) -> str:
    """Drop whitespace around ``,``, ``;`` and ``:``."""
    return _PUNCTUATION_SPACES_RE.sub(r"\1", value)


def format_number(number: float) -> str:
    """Render *number* without a trailing ``.0`` for integral values."""
    return f"{number:.6f}".rstrip("0").rstrip(".")


def rem_to_px(value: str, rem_in_px: float | None) -> str:
    """Convert a ``rem`` length to pixels; other values pass through."""
    stripped = value.strip()
    if rem_in_px is None or not _REM_RE.match(stripped):
        return value
    return f"{format_number(float(stripped[:-3]) * rem_in_px)}px"


def is_css_variable(value: str) -> bool:
    """True for a bare ``var(--name)`` reference."""
    return _CSS_VARIABLE_RE.match(value.strip()) is not None


def normalize_value(value: str) -> str:
    """Generic normalization for keyword and free-form values."""
    return remove_unnecessary_spaces(
        normalize_numbers_in_string(collapse_whitespace(value))
    )


def normalize_size(value: str, rem_in_px: float | None = None) -> str:
    """Normalization for lengths: rem to px, then a leading ``0``.

    A unitless zero is the same length as ``0px``.
    """
    normalized = normalize_number(rem_to_px(collapse_whitespace(value), rem_in_px))
    return "0px" if _ZERO_RE.match(normalized) else normalized


def normalize_color(value: str) -> str:
    """Canonical lowercase hex for any CSS color, else *value* unchanged.

    Fully opaque colors render as ``#rrggbb``; translucent ones append the
    alpha channel as ``#rrggbbaa``.  ``currentColor`` keeps its keyword.
    """
    text = collapse_whitespace(value)
    if not text or is_css_variable(text):
        return text
    color = parse_color(text)
    if color is None:
        return text
    if color == "currentColor":
        return "currentColor"
    channels = [round(channel * 255) for channel in color[:3]]
    hex_value = "#" + "".join(f"{channel:02x}" for channel in channels)
    if color.alpha < 1:
        hex_value += f"{round(color.alpha * 255):02x}"
    return hex_value


def escape_arbitrary(value: str) -> str:
    """Render *value* for use inside an arbitrary-value bracket."""
    normalized = normalize_value(value)
    return re.sub(r"\s+", "_", normalized.replace("_", "\\_"))


def split_top_level(value: str, separator: str | None = None) -> list[str]:
    """Split *value* outside of parentheses.

    With *separator* ``None`` the split happens on whitespace runs, otherwise
    on the given single character.  Empty parts are dropped.
    """
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    quote: str | None = None
    for char in value:
        if quote:
            current.append(char)
            if char == quote:
                quote = None
            continue
        if char in "\"'":
            quote = char
        elif char == "(":
            depth += 1
        elif char == ")":
            depth = max(depth - 1, 0)
        is_boundary = char.isspace() if separator is None else char == separator
        if is_boundary and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return [part.strip() for part in parts if part.strip()]


def parse_css_function(value: str) -> tuple[str, str] | None:
    """Split ``name(args)`` into ``(name, args)``; ``None`` if not a call."""
    match = _CSS_FUNCTION_RE.match(value.strip())
    if match is None:
        return None
    return match.group("name"), match.group("value").strip()
