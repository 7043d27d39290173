"""Native CSS nesting flattening.

    .card { color: red; &:hover { color: blue } .title { margin: 0 } }

becomes ``.card { color: red }``, ``.card:hover { color: blue }`` and
``.card .title { margin: 0 }``, in that order.  Conditional at-rules nested
in a rule move out of it, wrapping their declarations in a copy of the
rule.  Rules left without children are dropped.
"""

from __future__ import annotations

from tailwindify.css.tree import AtRule, Node, Rule, Stylesheet
from tailwindify.values import split_top_level

__all__ = ["flatten_nesting", "nest_selector"]


def nest_selector(parent: str, child: str) -> str:
    """Resolve the nested selector *child* against *parent*.

    ``&`` is replaced by each parent selector; a child without ``&`` is a
    descendant (or, with a leading combinator, a child or sibling) of it.
    """
    selectors = []
    for outer in split_top_level(parent, ",") or [""]:
        for inner in split_top_level(child, ","):
            if "&" in inner:
                selectors.append(inner.replace("&", outer).strip())
            else:
                selectors.append(f"{outer} {inner}".strip())
    return ", ".join(selectors)


def _unnest(children: list[Node], selector: str, holder: Rule) -> list[Node]:
    """Move the plain children into *holder*; return the flattened nested nodes."""
    nested: list[Node] = []
    for child in children:
        if isinstance(child, Rule):
            nested.extend(_flatten_rule(child, nest_selector(selector, child.selector)))
        elif isinstance(child, AtRule) and child.has_block:
            at_rule = _bubble(child, selector)
            if at_rule.children:
                nested.append(at_rule)
        else:
            holder.append(child)
    return nested


def _flatten_rule(rule: Rule, selector: str) -> list[Node]:
    own = Rule(selector, line=rule.line, column=rule.column)
    nested = _unnest(list(rule.children), selector, own)
    return ([own] if own.children else []) + nested


def _bubble(at_rule: AtRule, selector: str) -> AtRule:
    bubbled = AtRule(
        at_rule.name, at_rule.params, children=[], line=at_rule.line, column=at_rule.column
    )
    wrapper = Rule(selector, line=at_rule.line, column=at_rule.column)
    nested = _unnest(list(at_rule.children or []), selector, wrapper)
    for node in ([wrapper] if wrapper.children else []) + nested:
        bubbled.append(node)
    return bubbled


def _flatten_container(container: Stylesheet | AtRule) -> None:
    flattened: list[Node] = []
    for child in container.children or []:
        if isinstance(child, Rule):
            flattened.extend(_flatten_rule(child, child.selector))
        else:
            if isinstance(child, AtRule) and child.has_block:
                _flatten_container(child)
            flattened.append(child)
    container.children = []
    for node in flattened:
        container.append(node)


def flatten_nesting(stylesheet: Stylesheet) -> Stylesheet:
    """Flatten every nested rule of *stylesheet* in place and return it."""
    _flatten_container(stylesheet)
    return stylesheet
