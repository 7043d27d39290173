"""Node registry: merges per-rule conversion results by structural identity.

A *resolved* node is already bound to the rule its classes will be
written on.  An *unresolved* node carries classes and a variant prefix for a
base selector (``.foo`` for ``.foo:hover``, or a rule nested in
``@media``); it joins the node registered under its dependent key when
there is one, prefixed with its variants.  Otherwise it becomes a node of
its own at its fallback rule, unprefixed: that rule's own selector and
at-rules already express the variants.  Nodes are merged
strictly in arrival order, so an unresolved node that arrives before its
dependent key exists stays a separate node.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Union

from tailwindify.css.tree import AtRule, Rule
from tailwindify.values import collapse_whitespace

__all__ = [
    "ConvertedNode",
    "NodeRegistry",
    "ResolvedNode",
    "TailwindNode",
    "UnresolvedNode",
    "make_key",
]

KEY_SEPARATOR = "__"


def make_key(ancestors: Sequence[Rule | AtRule], selector: str) -> str:
    """Registry key for *selector* nested in *ancestors* (outermost first)."""
    parts = []
    for ancestor in ancestors:
        if isinstance(ancestor, AtRule):
            parts.append(f"a({ancestor.name.lower()}|{collapse_whitespace(ancestor.params)})")
        else:
            parts.append(f"r({collapse_whitespace(ancestor.selector)})")
    parts.append(collapse_whitespace(selector))
    return KEY_SEPARATOR.join(parts)


@dataclass
class ConvertedNode:
    """Classes to ``@apply`` on *selector*, written at *rule*'s position.

    When *selector* differs from ``rule.selector`` the classes go on a
    new rule inserted before *rule*.
    """

    rule: Rule
    selector: str
    classes: list[str] = field(default_factory=list)

    @property
    def overrides_selector(self) -> bool:
        return collapse_whitespace(self.selector) != collapse_whitespace(self.rule.selector)


@dataclass(frozen=True)
class ResolvedNode:
    key: str
    rule: Rule
    selector: str
    classes: tuple[str, ...]


@dataclass(frozen=True)
class UnresolvedNode:
    dependent_key: str
    fallback_key: str
    fallback_rule: Rule
    fallback_selector: str
    prefix: str
    classes: tuple[str, ...]

    def prefixed(self) -> list[str]:
        return [f"{self.prefix}{utility}" for utility in self.classes]


TailwindNode = Union[ResolvedNode, UnresolvedNode]


class NodeRegistry:
    """Per-session store of :class:`ConvertedNode` objects keyed by identity."""

    def __init__(self) -> None:
        self._nodes: dict[str, ConvertedNode] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def get(self, key: str) -> ConvertedNode | None:
        return self._nodes.get(key)

    def merge(self, node: TailwindNode) -> ConvertedNode:
        """Merge *node* and return the registry entry it landed in."""
        if isinstance(node, ResolvedNode):
            entry = self._nodes.get(node.key)
            if entry is None:
                entry = self._nodes[node.key] = ConvertedNode(node.rule, node.selector)
            entry.classes.extend(node.classes)
            return entry

        entry = self._nodes.get(node.dependent_key)
        if entry is not None:
            entry.classes.extend(node.prefixed())
            return entry

        entry = self._nodes.get(node.fallback_key)
        if entry is None:
            entry = self._nodes[node.fallback_key] = ConvertedNode(
                node.fallback_rule, node.fallback_selector
            )
        entry.classes.extend(node.classes)
        return entry

    @property
    def nodes(self) -> list[ConvertedNode]:
        """Entries in creation order."""
        return list(self._nodes.values())
