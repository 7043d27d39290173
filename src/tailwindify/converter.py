"""TailwindConverter: turns CSS rules into ``@apply`` utility classes.

Rules are visited in document order.  For each rule the convertible
declarations become utility classes, the selector is split into a base
selector plus variants, and ``@media`` / ``@supports`` ancestors add
their own variants.  The results are merged into a per-call
:class:`NodeRegistry` and, once every rule has been visited, each node's
classes are reduced to shorthands.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from tailwindify.config import ConverterConfig, ResolvedConfig, resolve_config
from tailwindify.context import resolve_context
from tailwindify.css import (
    Declaration,
    Rule,
    Stylesheet,
    apply_nodes,
    flatten_nesting,
    parse_css,
    render_css,
)
from tailwindify.css.tree import AtRule
from tailwindify.declarations import (
    arbitrary_property,
    convert_declaration,
    find_property,
    is_property_enabled,
)
from tailwindify.nodes import (
    ConvertedNode,
    NodeRegistry,
    ResolvedNode,
    TailwindNode,
    UnresolvedNode,
    make_key,
)
from tailwindify.reduction import reduce_classes
from tailwindify.selectors import DecomposedSelector, VariantToken, decompose_selector_list

__all__ = ["ConversionResult", "ConvertedNode", "TailwindConverter"]


@dataclass(frozen=True)
class ConversionResult:
    """The rewritten tree, the nodes written into it and the rendered CSS."""

    stylesheet: Stylesheet
    nodes: list[ConvertedNode]
    css: str


def _in_keyframes(rule: Rule) -> bool:
    return any(
        isinstance(ancestor, AtRule) and ancestor.name.lower().endswith("keyframes")
        for ancestor in rule.ancestors()
    )


class TailwindConverter:
    """Converts CSS into utility classes for one Tailwind configuration.

    The converter holds no per-conversion state; every call builds its own
    :class:`NodeRegistry`.
    """

    def __init__(
        self,
        config: ConverterConfig | None = None,
        logger: logging.Logger | None = None,
    ):
        self.config = config or ConverterConfig()
        self.resolved: ResolvedConfig = resolve_config(self.config)
        self.logger = logger or logging.getLogger("tailwindify")

    # ---- entry points ----

    def convert_css(self, css: str) -> ConversionResult:
        """Parse, convert and rewrite *css*.

        Raises :class:`~tailwindify.errors.CSSParseError` on malformed CSS.
        """
        stylesheet = parse_css(css)
        if self.config.flatten_nesting:
            flatten_nesting(stylesheet)
        nodes, converted = self._convert(stylesheet)
        apply_nodes(stylesheet, nodes, converted)
        return ConversionResult(stylesheet, nodes, render_css(stylesheet))

    def convert_stylesheet(self, stylesheet: Stylesheet) -> list[ConvertedNode]:
        """Nodes for an already parsed tree, which is left untouched."""
        nodes, _ = self._convert(stylesheet)
        return nodes

    def convert_rule(self, rule: Rule, registry: NodeRegistry) -> list[Declaration]:
        """Merge the nodes for *rule* into *registry*.

        Returns the declarations that were converted.
        """
        if _in_keyframes(rule):
            return []

        classes: list[str] = []
        converted: list[Declaration] = []
        for declaration in rule.declarations:
            result = self.convert_declaration(
                declaration.prop, declaration.value, declaration.important
            )
            if result:
                classes.extend(result)
                converted.append(declaration)
            else:
                self.logger.debug(
                    "Cannot convert declaration %r in %r", str(declaration), rule.selector
                )
        if not classes:
            return []

        context = resolve_context(rule, self.resolved.mapping)
        if context is None:
            self.logger.debug("Context of %r is not convertible", rule.selector)

        selectors = decompose_selector_list(rule.selector, self.resolved.mapping)
        for decomposed in selectors:
            if not decomposed.decomposable:
                self.logger.debug("Selector %r is not decomposable", decomposed.source)
            registry.merge(
                self._make_node(rule, decomposed, context, classes, len(selectors) == 1)
            )
        return converted

    def convert_declaration(
        self, prop: str, value: str, important: bool = False
    ) -> list[str]:
        """Utility classes for one declaration, ``[]`` when unconvertible.

        With ``arbitrary_properties`` an unconvertible declaration becomes a
        ``[prop:value]`` class, unless its core plugin is disabled.
        """
        classes = convert_declaration(prop, value, self.resolved, important)
        if classes or not self.resolved.arbitrary_properties:
            return classes
        prop_id = find_property(prop)
        if prop_id is not None and not is_property_enabled(prop_id, self.resolved):
            return []
        return [arbitrary_property(prop, value, self.resolved, important)]

    # ---- internals ----

    def _convert(
        self, stylesheet: Stylesheet
    ) -> tuple[list[ConvertedNode], list[Declaration]]:
        registry = NodeRegistry()
        converted: list[Declaration] = []
        visited = 0
        for rule in stylesheet.walk_rules():
            visited += 1
            converted.extend(self.convert_rule(rule, registry))

        nodes = registry.nodes
        if self.resolved.reduce:
            for node in nodes:
                node.classes = reduce_classes(
                    node.classes, self.resolved.separator, self.resolved.prefix
                )
        self.logger.info(
            "Converted %d declarations from %d rules into %d nodes",
            len(converted),
            visited,
            len(nodes),
        )
        return nodes, converted

    def _make_node(
        self,
        rule: Rule,
        decomposed: DecomposedSelector,
        context: tuple[VariantToken, ...] | None,
        classes: list[str],
        single: bool,
    ) -> TailwindNode:
        separator = self.resolved.separator
        ancestors = list(rule.ancestors())[::-1]
        context_prefix = "".join(token.render(separator) for token in context or ())
        prefix = context_prefix + decomposed.prefix(separator)

        if not prefix:
            selector = rule.selector if single else decomposed.selector
            return ResolvedNode(
                key=make_key(ancestors, decomposed.selector),
                rule=rule,
                selector=selector,
                classes=tuple(classes),
            )

        # Converted at-rules become variants, so they leave the key.
        dependent_ancestors = ancestors if context is None else []
        return UnresolvedNode(
            dependent_key=make_key(dependent_ancestors, decomposed.selector),
            fallback_key=make_key(ancestors, decomposed.source),
            fallback_rule=rule,
            fallback_selector=rule.selector if single else decomposed.source,
            prefix=prefix,
            classes=tuple(classes),
        )
