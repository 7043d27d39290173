"""Lark-based selector parser producing :class:`ComplexSelector` lists."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from tailwindify.errors import SelectorSyntaxError
from tailwindify.selectors.model import (
    ATTRIBUTE,
    CLASS,
    COMBINATOR,
    ID,
    PSEUDO_CLASS,
    PSEUDO_ELEMENT,
    TYPE,
    Attribute,
    ComplexSelector,
    SelectorPart,
)

__all__ = ["parse_selector_list"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_ATTRIBUTE_RE = re.compile(
    r"""
    ^\[\s*
    (?P<name>[^\]\s=~|^$*]+)\s*
    (?:
        (?P<operator>[~|^$*]?=)\s*
        (?:"(?P<double>(?:[^"\\]|\\.)*)"|'(?P<single>(?:[^'\\]|\\.)*)'|(?P<bare>[^\]\s"']+))\s*
        (?P<flags>[iIsS])?\s*
    )?
    \]$
    """,
    re.VERBOSE,
)


def _attribute(text: str) -> Attribute:
    match = _ATTRIBUTE_RE.match(text)
    if match is None:  # pragma: no cover - the grammar already matched it
        raise SelectorSyntaxError(f"Invalid attribute selector: {text!r}")
    value = match.group("double")
    if value is None:
        value = match.group("single")
    if value is None:
        value = match.group("bare")
    return Attribute(
        name=match.group("name"),
        operator=match.group("operator"),
        value=value,
        flags=(match.group("flags") or "").lower(),
    )


def _argument(tokens: list[Token]) -> str | None:
    if len(tokens) < 2:
        return None
    return " ".join(str(tokens[1])[1:-1].split())


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a selector parse tree into :class:`ComplexSelector` objects."""

    def type_selector(self, items: list[Token]) -> SelectorPart:
        return SelectorPart(TYPE, str(items[0]))

    def id_selector(self, items: list[Token]) -> SelectorPart:
        return SelectorPart(ID, str(items[0]))

    def class_selector(self, items: list[Token]) -> SelectorPart:
        return SelectorPart(CLASS, str(items[0]))

    def attribute_selector(self, items: list[Token]) -> SelectorPart:
        attribute = _attribute(str(items[0]))
        return SelectorPart(ATTRIBUTE, attribute.name, attribute=attribute)

    def pseudo_class(self, items: list[Token]) -> SelectorPart:
        return SelectorPart(PSEUDO_CLASS, str(items[0]).lower(), _argument(items))

    def pseudo_element(self, items: list[Token]) -> SelectorPart:
        return SelectorPart(PSEUDO_ELEMENT, str(items[0]).lower(), _argument(items))

    def combinator(self, items: list[Token]) -> SelectorPart:
        return SelectorPart(COMBINATOR, str(items[0]).strip() or " ")

    def compound(self, items: list[SelectorPart]) -> list[SelectorPart]:
        return list(items)

    def complex(self, items: list[object]) -> ComplexSelector:
        parts: list[SelectorPart] = []
        for item in items:
            if isinstance(item, list):
                parts.extend(item)
            else:
                parts.append(item)  # type: ignore[arg-type]
        return ComplexSelector(tuple(parts))

    def start(self, items: list[object]) -> list[ComplexSelector]:
        return [item for item in items if isinstance(item, ComplexSelector)]


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


@lru_cache(maxsize=1024)
def parse_selector_list(selector: str) -> tuple[ComplexSelector, ...]:
    """Parse a selector list such as ``.a:hover, .b > .c``.

    Raises :class:`SelectorSyntaxError` for anything the grammar does not
    cover (nesting ``&``, namespaces, invalid selectors...).
    """
    try:
        tree = _parser().parse(selector.strip())
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise SelectorSyntaxError(str(e), line=line, column=column) from e
    return tuple(SelectorTransformer().transform(tree))
