"""Write conversion results back into a tree and render it as CSS."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from tailwindify.css.tree import AtRule, Comment, Declaration, Node, Rule, Stylesheet

if TYPE_CHECKING:
    from tailwindify.nodes import ConvertedNode

__all__ = ["DEFAULT_INDENT", "apply_nodes", "prune_empty", "render_css"]

DEFAULT_INDENT = "  "


def prune_empty(container: Stylesheet | Rule | AtRule) -> None:
    """Remove rules and block at-rules left without children, bottom-up."""
    for child in list(container.children or []):
        if isinstance(child, (Rule, AtRule)) and child.children is not None:
            prune_empty(child)
            if not child.children:
                child.remove()


def apply_nodes(
    stylesheet: Stylesheet,
    nodes: Iterable[ConvertedNode],
    converted: Iterable[Declaration],
) -> Stylesheet:
    """Replace *converted* declarations by ``@apply`` rules built from *nodes*.

    A node whose selector differs from its rule's gets a new rule, inserted
    right before that rule.
    """
    for declaration in converted:
        declaration.remove()

    for node in nodes:
        if not node.classes:
            continue
        apply = AtRule("apply", " ".join(node.classes))
        if node.overrides_selector and node.rule.parent is not None:
            target = Rule(node.selector)
            node.rule.parent.insert_before(node.rule, target)
        else:
            target = node.rule
        target.prepend(apply)

    prune_empty(stylesheet)
    return stylesheet


def _render(node: Node, indent: str, depth: int, lines: list[str]) -> None:
    pad = indent * depth
    if isinstance(node, Declaration):
        lines.append(f"{pad}{node};")
    elif isinstance(node, Comment):
        lines.append(f"{pad}/*{node.text}*/")
    elif isinstance(node, AtRule) and node.children is None:
        params = f" {node.params}" if node.params else ""
        lines.append(f"{pad}@{node.name}{params};")
    else:
        if isinstance(node, AtRule):
            params = f" {node.params}" if node.params else ""
            lines.append(f"{pad}@{node.name}{params} {{")
        else:
            lines.append(f"{pad}{node.selector} {{")
        for child in node.children or []:
            _render(child, indent, depth + 1, lines)
        lines.append(f"{pad}}}")


def render_css(stylesheet: Stylesheet, indent: str | None = None) -> str:
    """Pretty-print *stylesheet*, one blank line between top-level nodes.

    Without *indent*, nesting uses the indent detected in the parsed source,
    falling back to :data:`DEFAULT_INDENT`.
    """
    if indent is None:
        indent = stylesheet.indent or DEFAULT_INDENT
    blocks = []
    for node in stylesheet.children:
        lines: list[str] = []
        _render(node, indent, 0, lines)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n" if blocks else ""
