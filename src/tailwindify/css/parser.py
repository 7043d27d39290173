"""Read CSS text into a :class:`Stylesheet` tree using tinycss2."""

from __future__ import annotations

import re
from typing import Iterable

import tinycss2
from tinycss2 import ast

from tailwindify.css.tree import AtRule, Comment, Declaration, Rule, Stylesheet
from tailwindify.errors import CSSParseError
from tailwindify.values import collapse_whitespace

__all__ = ["parse_css"]

# At-rules whose block holds declarations rather than rules.
_DECLARATION_AT_RULES = frozenset(
    {
        "counter-style",
        "font-face",
        "font-palette-values",
        "page",
        "property",
        "viewport",
    }
)


_AT_KEYWORD_RE = re.compile(r"@(?:[-\w]|\\.)+")
_IMPORTANT_RE = re.compile(r"!\s*important", re.IGNORECASE)
_COMMENT_RE = re.compile(r"(\"(?:\\.|[^\"\\])*\"|'(?:\\.|[^'\\])*')|/\*.*?(?:\*/|$)", re.DOTALL)


def _error(node: ast.ParseError) -> CSSParseError:
    return CSSParseError(node.message, line=node.source_line, column=node.source_column)


def _string_end(text: str, start: int) -> int:
    quote = text[start]
    index = start + 1
    while index < len(text):
        char = text[index]
        if char == "\\":
            index += 2
        elif char in (quote, "\n"):
            return index + 1
        else:
            index += 1
    return len(text)


class _Source:
    """The stylesheet text, addressed by tinycss2 line and column positions.

    Selectors, at-rule params and declaration values are sliced from here so
    they keep the quoting and spelling they were written with.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._line_starts = [0]
        self._line_starts.extend(match.end() for match in re.finditer("\n", text))

    def offset(self, node: ast.Node) -> int:
        return self._line_starts[node.source_line - 1] + node.source_column - 1

    def indent(self, node: ast.Node) -> str:
        """Whitespace before *node* on its line, or ``""`` if it does not start the line."""
        lead = self.text[self._line_starts[node.source_line - 1] : self.offset(node)]
        return "" if lead.strip() else lead

    def scan(self, start: int, stops: str) -> int:
        """Index of the first top-level *stops* character at or after *start*.

        Strings, comments and bracketed groups are skipped over.  An unmatched
        closing bracket also ends the scan.
        """
        text = self.text
        depth = 0
        index = start
        while index < len(text):
            char = text[index]
            if char == "\\":
                index += 2
                continue
            if char in "\"'":
                index = _string_end(text, index)
                continue
            if text.startswith("/*", index):
                end = text.find("*/", index + 2)
                index = len(text) if end == -1 else end + 2
                continue
            if depth == 0 and char in stops:
                return index
            if char in "([{":
                depth += 1
            elif char in ")]}":
                if depth == 0:
                    return index
                depth -= 1
            index += 1
        return len(text)

    def prelude(self, start: int, stops: str) -> str:
        raw = self.text[start : self.scan(start, stops)]
        return collapse_whitespace(_COMMENT_RE.sub(lambda m: m.group(1) or "", raw))


def _declaration(node: ast.Declaration, source: _Source) -> Declaration:
    name = node.name if node.name.startswith("--") else node.lower_name
    start = source.offset(node)
    raw = source.text[start : source.scan(start, ";")]
    value = raw[raw.index(":") + 1 :]
    bangs = list(_IMPORTANT_RE.finditer(value)) if node.important else []
    if bangs:
        value = value[: bangs[-1].start()]
    elif node.important:
        value = tinycss2.serialize(node.value)
    return Declaration(
        prop=name,
        value=value.strip(),
        important=node.important,
        line=node.source_line,
        column=node.source_column,
    )


def _at_rule_params(node: ast.AtRule, source: _Source) -> str:
    start = source.offset(node)
    keyword = _AT_KEYWORD_RE.match(source.text, start)
    return source.prelude(keyword.end() if keyword else start + 1, "{;")


def _append_nodes(
    container: Stylesheet | Rule | AtRule, nodes: Iterable[ast.Node], source: _Source
) -> None:
    for node in nodes:
        if node.type == "error":
            raise _error(node)
        root = getattr(container, "parent", None)
        if isinstance(root, Stylesheet) and root.indent is None:
            root.indent = source.indent(node) or None
        if node.type == "comment":
            container.append(Comment(node.value))
        elif node.type == "declaration":
            container.append(_declaration(node, source))
        elif node.type == "qualified-rule":
            rule = Rule(
                selector=source.prelude(source.offset(node), "{"),
                line=node.source_line,
                column=node.source_column,
            )
            container.append(rule)
            _append_nodes(
                rule,
                tinycss2.parse_blocks_contents(
                    node.content, skip_comments=False, skip_whitespace=True
                ),
                source,
            )
        elif node.type == "at-rule":
            at_rule = AtRule(
                name=node.lower_at_keyword,
                params=_at_rule_params(node, source),
                children=None if node.content is None else [],
                line=node.source_line,
                column=node.source_column,
            )
            container.append(at_rule)
            if node.content is None:
                continue
            if _holds_declarations(at_rule):
                contents = tinycss2.parse_blocks_contents(
                    node.content, skip_comments=False, skip_whitespace=True
                )
            else:
                contents = tinycss2.parse_rule_list(
                    node.content, skip_comments=False, skip_whitespace=True
                )
            _append_nodes(at_rule, contents, source)


def _holds_declarations(at_rule: AtRule) -> bool:
    if at_rule.name in _DECLARATION_AT_RULES:
        return True
    # Conditional at-rules nested in a rule hold the rule's declarations.
    return any(isinstance(ancestor, Rule) for ancestor in at_rule.ancestors())


def parse_css(text: str) -> Stylesheet:
    """Parse *text* into a :class:`Stylesheet`.

    Raises :class:`CSSParseError` for any syntax error tinycss2 reports.
    """
    # Same newline handling as the tinycss2 tokenizer, so positions line up.
    text = text.replace("\r\n", "\n").replace("\r", "\n").replace("\f", "\n")
    stylesheet = Stylesheet()
    _append_nodes(
        stylesheet,
        tinycss2.parse_stylesheet(text, skip_comments=False, skip_whitespace=True),
        _Source(text),
    )
    return stylesheet
