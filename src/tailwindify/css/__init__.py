"""CSS tree: parsing with tinycss2, nesting flattening and writing back."""

from tailwindify.css.nesting import flatten_nesting, nest_selector
from tailwindify.css.parser import parse_css
from tailwindify.css.tree import AtRule, Comment, Declaration, Rule, Stylesheet
from tailwindify.css.writer import apply_nodes, prune_empty, render_css

__all__ = [
    "AtRule",
    "Comment",
    "Declaration",
    "Rule",
    "Stylesheet",
    "apply_nodes",
    "flatten_nesting",
    "nest_selector",
    "parse_css",
    "prune_empty",
    "render_css",
]
