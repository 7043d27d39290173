"""Selector data model: complex selectors as flat lists of parts."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "Attribute",
    "ComplexSelector",
    "SelectorPart",
    "VariantToken",
]

# SelectorPart.kind values.
TYPE = "type"
ID = "id"
CLASS = "class"
ATTRIBUTE = "attribute"
PSEUDO_CLASS = "pseudo-class"
PSEUDO_ELEMENT = "pseudo-element"
COMBINATOR = "combinator"


@dataclass(frozen=True)
class Attribute:
    """An attribute selector split into its parts."""

    name: str
    operator: str | None = None
    value: str | None = None
    flags: str = ""

    def __str__(self) -> str:
        if self.operator is None:
            return f"[{self.name}]"
        flags = f" {self.flags}" if self.flags else ""
        value = self.value or ""
        quote = "'" if '"' in value else '"'
        return f"[{self.name}{self.operator}{quote}{value}{quote}{flags}]"


@dataclass(frozen=True)
class SelectorPart:
    """One simple selector or combinator.

    ``name`` is the tag, id, class, attribute or pseudo name (without its
    sigil) or the combinator character (``" "`` for descendants).
    ``argument`` holds the text inside a functional pseudo's parentheses.
    """

    kind: str
    name: str
    argument: str | None = None
    attribute: Attribute | None = None

    def __str__(self) -> str:
        if self.kind == TYPE:
            return self.name
        if self.kind == ID:
            return f"#{self.name}"
        if self.kind == CLASS:
            return f".{self.name}"
        if self.kind == ATTRIBUTE and self.attribute is not None:
            return str(self.attribute)
        if self.kind == COMBINATOR:
            return " " if self.name == " " else f" {self.name} "
        sigil = "::" if self.kind == PSEUDO_ELEMENT else ":"
        argument = f"({self.argument})" if self.argument is not None else ""
        return f"{sigil}{self.name}{argument}"


@dataclass(frozen=True)
class ComplexSelector:
    """Compound selectors joined by combinators, as one flat part list."""

    parts: tuple[SelectorPart, ...]

    def __str__(self) -> str:
        return "".join(str(part) for part in self.parts)

    @property
    def rightmost_start(self) -> int:
        """Index of the first part of the rightmost compound selector."""
        for index in range(len(self.parts) - 1, -1, -1):
            if self.parts[index].kind == COMBINATOR:
                return index + 1
        return 0


@dataclass(frozen=True)
class VariantToken:
    """A variant contributed by a selector or an at-rule context.

    ``kind`` is one of ``pseudo``, ``ariaData``, ``media`` or ``supports``.
    """

    kind: str
    name: str

    def render(self, separator: str = ":") -> str:
        return f"{self.name}{separator}"
