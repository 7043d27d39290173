"""Building blocks shared by the declaration converters.

Every converter returns ``list[str]`` on success and ``None`` when the
declaration cannot be expressed with utilities.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from tailwindify.declarations.keywords import KEYWORD_UTILITIES
from tailwindify.theme.mapper import DEFAULT_TOKEN
from tailwindify.values import collapse_whitespace, escape_arbitrary, is_css_variable

if TYPE_CHECKING:
    from tailwindify.config import ResolvedConfig

__all__ = [
    "arbitrary",
    "convert_all",
    "keyword",
    "themed",
    "utility",
]


def utility(prefix: str, token: str) -> str:
    """``prefix`` for the ``DEFAULT`` token, ``prefix-token`` otherwise."""
    return prefix if token == DEFAULT_TOKEN else f"{prefix}-{token}"


def arbitrary(prefix: str, value: str, hint: str | None = None) -> str:
    """Arbitrary-value utility: ``prefix-[value]`` or ``prefix-[hint:value]``."""
    type_hint = f"{hint}:" if hint else ""
    return f"{prefix}-[{type_hint}{escape_arbitrary(value)}]"


def keyword(prop: str, value: str) -> list[str] | None:
    """Static keyword lookup; ``None`` when the keyword is not mapped."""
    classes = KEYWORD_UTILITIES[prop].get(collapse_whitespace(value).lower())
    return classes.split() if classes else None


def themed(
    value: str,
    config: ResolvedConfig,
    category: str,
    prefix: str,
    *,
    hint: str | None = None,
    negative: bool = False,
) -> list[str] | None:
    """Convert *value* through the theme table of *category*.

    A matching token yields ``prefix-token``; anything else becomes an
    arbitrary value.  ``var()`` references never match a token and carry
    *hint* inside their bracket.  With *negative*, a value that does not
    match as written but whose absolute value does is emitted as
    ``-prefix-token``.
    """
    raw = collapse_whitespace(value)
    if not raw:
        return None
    if is_css_variable(raw):
        return [arbitrary(prefix, raw, hint)]

    mapping = config.mapping
    token = mapping.lookup(category, raw)
    if token is not None:
        return [utility(prefix, token)]

    if negative and raw.startswith("-"):
        absolute = raw[1:]
        if not absolute:
            return None
        token = mapping.lookup(category, absolute)
        if token is not None:
            return [f"-{utility(prefix, token)}"]
        return [f"-{arbitrary(prefix, absolute)}"]

    return [arbitrary(prefix, raw)]


def convert_all(conversions: Iterable[list[str] | None]) -> list[str] | None:
    """Concatenate conversions, or ``None`` as soon as one of them fails.

    Pass a generator to stop converting at the first failure.
    """
    classes: list[str] = []
    for converted in conversions:
        if not converted:
            return None
        classes.extend(converted)
    return classes
