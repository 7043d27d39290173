"""Mutable CSS tree: stylesheet, rules, at-rules, declarations and comments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

__all__ = [
    "AtRule",
    "Comment",
    "Container",
    "Declaration",
    "Node",
    "Rule",
    "Stylesheet",
]


class _Child:
    """Parent-link helpers shared by every node that can live in a container."""

    parent: Container | None

    def remove(self) -> None:
        if self.parent is not None:
            self.parent.children.remove(self)  # type: ignore[arg-type]
            self.parent = None

    def ancestors(self) -> Iterator[Rule | AtRule]:
        """Enclosing rules and at-rules, nearest first."""
        node = self.parent
        while isinstance(node, (Rule, AtRule)):
            yield node
            node = node.parent


class _Container:
    """Child-list helpers for nodes holding other nodes."""

    children: list[Node]

    def append(self, node: Node) -> Node:
        node.parent = self  # type: ignore[assignment]
        self.children.append(node)
        return node

    def prepend(self, node: Node) -> Node:
        node.parent = self  # type: ignore[assignment]
        self.children.insert(0, node)
        return node

    def insert_before(self, reference: Node, node: Node) -> Node:
        node.parent = self  # type: ignore[assignment]
        self.children.insert(self.children.index(reference), node)
        return node

    @property
    def declarations(self) -> list[Declaration]:
        return [child for child in self.children if isinstance(child, Declaration)]

    def walk(self) -> Iterator[Node]:
        """Every descendant in document order."""
        for child in list(self.children):
            yield child
            if isinstance(child, (Rule, AtRule)) and child.children is not None:
                yield from child.walk()

    def walk_rules(self) -> Iterator[Rule]:
        """Every descendant rule in document order."""
        for node in self.walk():
            if isinstance(node, Rule):
                yield node


@dataclass(eq=False)
class Declaration(_Child):
    prop: str
    value: str
    important: bool = False
    line: int | None = None
    column: int | None = None
    parent: Container | None = field(default=None, repr=False)

    def __str__(self) -> str:
        important = " !important" if self.important else ""
        return f"{self.prop}: {self.value}{important}"


@dataclass(eq=False)
class Comment(_Child):
    text: str
    parent: Container | None = field(default=None, repr=False)


@dataclass(eq=False)
class Rule(_Child, _Container):
    """A qualified rule: ``selector { ... }``."""

    selector: str
    children: list[Node] = field(default_factory=list)
    line: int | None = None
    column: int | None = None
    parent: Container | None = field(default=None, repr=False)


@dataclass(eq=False)
class AtRule(_Child, _Container):
    """An at-rule.  ``children`` is ``None`` for statements like ``@import``."""

    name: str
    params: str = ""
    children: list[Node] | None = None  # type: ignore[assignment]
    line: int | None = None
    column: int | None = None
    parent: Container | None = field(default=None, repr=False)

    @property
    def has_block(self) -> bool:
        return self.children is not None


@dataclass(eq=False)
class Stylesheet(_Container):
    """The root node.  ``indent`` is the nesting indent the source used, if any."""

    children: list[Node] = field(default_factory=list)
    indent: str | None = None


Node = Union[Declaration, Comment, Rule, AtRule]
Container = Union[Stylesheet, Rule, AtRule]
