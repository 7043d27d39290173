"""Shorthand reduction: collapse longhand utility classes into shorthands.

Box-model families (margin, padding, scroll-margin, scroll-padding,
border-radius corners, border sides, inset sides, scale axes) are encoded
as a forest of grouping nodes stored in an id-indexed arena.  A value
collapses into a grouping node only when every child of that node carries
the same value; anything else is emitted under the child's own prefix.
Complete pairs still collapse when the family as a whole does not.

    >>> reduce_classes(["pt-4", "pr-4", "pb-4", "pl-4"])
    ['p-4']
    >>> reduce_classes(["pt-4", "pr-4", "pb-4"])
    ['pr-4', 'py-4']

Border-radius corners each belong to two sides, so that family is resolved
per value: a side is used when both of its corners hold the value.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["FAMILIES", "GroupNode", "ClassSetReducer", "reduce_classes"]


@dataclass(frozen=True)
class GroupNode:
    """One node of the grouping forest.  Leaves have no children."""

    id: int
    prefix: str
    children: tuple[int, ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.children


class _ForestBuilder:
    def __init__(self) -> None:
        self.nodes: list[GroupNode] = []

    def leaf(self, prefix: str) -> int:
        return self.group(prefix)

    def group(self, prefix: str, *children: int) -> int:
        node = GroupNode(id=len(self.nodes), prefix=prefix, children=children)
        self.nodes.append(node)
        return node.id


def _build_forest() -> tuple[tuple[GroupNode, ...], tuple[int, ...]]:
    b = _ForestBuilder()

    def box(prefix: str, x: str, y: str, left: str, right: str, top: str, bottom: str) -> int:
        return b.group(
            prefix,
            b.group(x, b.leaf(left), b.leaf(right)),
            b.group(y, b.leaf(top), b.leaf(bottom)),
        )

    roots = (
        box("m", "mx", "my", "ml", "mr", "mt", "mb"),
        box("p", "px", "py", "pl", "pr", "pt", "pb"),
        box(
            "scroll-m",
            "scroll-mx",
            "scroll-my",
            "scroll-ml",
            "scroll-mr",
            "scroll-mt",
            "scroll-mb",
        ),
        box(
            "scroll-p",
            "scroll-px",
            "scroll-py",
            "scroll-pl",
            "scroll-pr",
            "scroll-pt",
            "scroll-pb",
        ),
        # Each corner belongs to two sides.
        b.group(
            "rounded",
            b.group("rounded-t", b.leaf("rounded-tl"), b.leaf("rounded-tr")),
            b.group("rounded-r", b.leaf("rounded-tr"), b.leaf("rounded-br")),
            b.group("rounded-b", b.leaf("rounded-bl"), b.leaf("rounded-br")),
            b.group("rounded-l", b.leaf("rounded-tl"), b.leaf("rounded-bl")),
        ),
        box("border", "border-x", "border-y", "border-l", "border-r", "border-t", "border-b"),
        b.group("scale", b.leaf("scale-x"), b.leaf("scale-y")),
        box("inset", "inset-x", "inset-y", "left", "right", "top", "bottom"),
    )
    return tuple(b.nodes), roots


NODES, FAMILIES = _build_forest()


def _preorder(node_id: int) -> list[int]:
    order = [node_id]
    for child in NODES[node_id].children:
        order.extend(_preorder(child))
    return order


# Lookup order for a class prefix: the first node in this order wins.
_SEARCH_ORDER: tuple[int, ...] = tuple(
    node_id for root in FAMILIES for node_id in _preorder(root)
)


def _find_node(prefix: str) -> int | None:
    for node_id in _SEARCH_ORDER:
        if NODES[node_id].prefix == prefix:
            return node_id
    return None


def _leaf_prefixes(node_id: int) -> tuple[str, ...]:
    """Distinct leaf prefixes below *node_id*, in preorder."""
    leaves = (NODES[i].prefix for i in _preorder(node_id) if NODES[i].is_leaf)
    return tuple(dict.fromkeys(leaves))


# Families whose groups share leaves (a corner belongs to two sides).
_OVERLAPPING: frozenset[int] = frozenset(
    root
    for root in FAMILIES
    if sum(1 for i in _preorder(root) if NODES[i].is_leaf) != len(_leaf_prefixes(root))
)


def _split_outside_brackets(text: str, char: str) -> int:
    """Index of the last *char* not inside ``[...]`` or ``(...)``, or -1."""
    depth = 0
    for index in range(len(text) - 1, -1, -1):
        current = text[index]
        if current in "])":
            depth += 1
        elif current in "[(":
            depth -= 1
        elif current == char and depth == 0:
            return index
    return -1


def _parse_class(utility: str) -> tuple[str, str | None]:
    """Split a utility into ``(prefix, signed value)``."""
    negative = utility.startswith("-")
    if negative:
        utility = utility[1:]
    dash = _split_outside_brackets(utility, "-")
    if dash == -1:
        return utility, None
    value = utility[dash + 1 :]
    return utility[:dash], f"-{value}" if negative else value


def _to_class(prefix: str, value: str) -> str:
    if value.startswith("-"):
        return f"-{prefix}-{value[1:]}"
    return f"{prefix}-{value}"


class ClassSetReducer:
    """Accumulates classes for one variant group and reduces the families.

    Per-instance state maps each leaf prefix to the values recorded for it
    in arrival order.  A leaf listed under several groups shares one entry.
    """

    def __init__(self) -> None:
        self._values: dict[str, list[str]] = {}

    def add(self, utility: str) -> bool:
        """Record *utility*; ``False`` if it belongs to no family."""
        prefix, value = _parse_class(utility)
        if not value:
            return False
        node_id = _find_node(prefix)
        if node_id is None:
            return False
        self._fan_out(node_id, value)
        return True

    def _fan_out(self, node_id: int, value: str) -> None:
        node = NODES[node_id]
        if node.is_leaf:
            values = self._values.setdefault(node.prefix, [])
            if value not in values:
                values.append(value)
            return
        for child in node.children:
            self._fan_out(child, value)

    def _resolve(self, node_id: int, out: list[str]) -> dict[str, str]:
        common: dict[str, str] | None = None
        for child_id in NODES[node_id].children:
            child = NODES[child_id]
            if child.is_leaf:
                values = {v: child.prefix for v in self._values.get(child.prefix, [])}
            else:
                values = {v: child.prefix for v in self._resolve(child_id, out)}

            if common is None:
                common = values
                continue

            for value, common_prefix in list(common.items()):
                if value in values:
                    common[value] = values[value]
                else:
                    del common[value]
                    out.append(_to_class(common_prefix, value))
            for value, prefix in values.items():
                if value in common:
                    common[value] = prefix
                else:
                    out.append(_to_class(prefix, value))
        return common or {}

    def _resolve_overlapping(self, root: int, out: list[str]) -> dict[str, str]:
        """Resolve a family whose groups share leaves.

        A value held by every leaf is returned for the root.  Otherwise each
        group whose leaves all hold it is emitted, skipping groups that would
        repeat an already emitted leaf, and the remaining leaves are emitted
        under their own prefix.
        """
        leaves = _leaf_prefixes(root)
        ordered = dict.fromkeys(v for leaf in leaves for v in self._values.get(leaf, []))
        common: dict[str, str] = {}
        for value in ordered:
            holders = {leaf for leaf in leaves if value in self._values.get(leaf, [])}
            if len(holders) == len(leaves):
                common[value] = NODES[root].prefix
                continue
            covered: set[str] = set()
            for group_id in NODES[root].children:
                members = set(_leaf_prefixes(group_id))
                if members <= holders and not members & covered:
                    out.append(_to_class(NODES[group_id].prefix, value))
                    covered |= members
            for leaf in leaves:
                if leaf in holders and leaf not in covered:
                    out.append(_to_class(leaf, value))
        return common

    def reduce(self) -> list[str]:
        """Family classes in fixed family order."""
        out: list[str] = []
        for root in FAMILIES:
            resolve = self._resolve_overlapping if root in _OVERLAPPING else self._resolve
            for value in resolve(root, out):
                out.append(_to_class(NODES[root].prefix, value))
        return out


def _split_variants(cls: str, separator: str) -> tuple[str, str]:
    index = _split_outside_brackets(cls, separator[-1])
    if index == -1 or not cls[: index + 1].endswith(separator):
        return "", cls
    return cls[: index + 1], cls[index + 1 :]


def reduce_classes(
    classes: list[str], separator: str | None = None, prefix: str = ""
) -> list[str]:
    """Reduce longhand classes to shorthands.

    Classes outside every family pass through first, in their original
    order, followed by the family classes.  Without *separator* every class
    is treated as a bare utility.  With it, classes are grouped by their
    variant prefix (``hover:``, ``md:hover:`` ...) and important marker and
    each group is reduced on its own; *prefix* is the configured class-name
    prefix (``tw-``) that utilities carry after the negative sign.
    """
    passthrough: list[str] = []
    groups: dict[tuple[str, bool], ClassSetReducer] = {}

    for cls in classes:
        variants, utility = _split_variants(cls, separator) if separator else ("", cls)
        important = utility.startswith("!")
        if important:
            utility = utility[1:]
        negative = utility.startswith("-")
        body = utility[1:] if negative else utility
        if prefix:
            if not body.startswith(prefix):
                passthrough.append(cls)
                continue
            body = body[len(prefix) :]
        key = (variants, important)
        reducer = groups.get(key) or ClassSetReducer()
        if reducer.add(f"-{body}" if negative else body):
            groups[key] = reducer
        else:
            passthrough.append(cls)

    result = passthrough
    for (variants, important), reducer in groups.items():
        for utility in reducer.reduce():
            negative = utility.startswith("-")
            body = utility[1:] if negative else utility
            result.append(
                f"{variants}{'!' if important else ''}{'-' if negative else ''}{prefix}{body}"
            )
    return result
