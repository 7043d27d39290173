"""Tests for writing @apply rules back and rendering CSS."""

from tailwindify.css import (
    AtRule,
    Comment,
    Declaration,
    Rule,
    Stylesheet,
    apply_nodes,
    parse_css,
    prune_empty,
    render_css,
)
from tailwindify.nodes import ConvertedNode


class TestRenderCss:
    def test_render(self):
        stylesheet = Stylesheet()
        stylesheet.append(AtRule("import", '"base.css"'))
        rule = stylesheet.append(Rule(".a"))
        rule.append(Comment(" note "))
        rule.append(Declaration("color", "red", important=True))
        assert render_css(stylesheet) == (
            '@import "base.css";\n\n.a {\n  /* note */\n  color: red !important;\n}\n'
        )

    def test_indent(self):
        stylesheet = parse_css("@media print { .a { color: red } }")
        assert render_css(stylesheet, indent="\t") == "@media print {\n\t.a {\n\t\tcolor: red;\n\t}\n}\n"

    def test_source_indent_kept(self):
        css = ".a {\n    color: red;\n}\n\n@media print {\n    .b {\n        color: blue;\n    }\n}\n"
        stylesheet = parse_css(css)
        assert stylesheet.indent == "    "
        assert render_css(stylesheet) == css

    def test_source_tab_indent_kept(self):
        stylesheet = parse_css("@media print {\n\t.a {\n\t\tcolor: red;\n\t}\n}")
        assert stylesheet.indent == "\t"
        assert render_css(stylesheet) == "@media print {\n\t.a {\n\t\tcolor: red;\n\t}\n}\n"

    def test_single_line_source_uses_default_indent(self):
        stylesheet = parse_css("@media print { .a { color: red } }")
        assert stylesheet.indent is None
        assert render_css(stylesheet) == "@media print {\n  .a {\n    color: red;\n  }\n}\n"

    def test_empty(self):
        assert render_css(Stylesheet()) == ""


class TestPruneEmpty:
    def test_bottom_up(self):
        stylesheet = parse_css("@media print { .a { } } .b { color: red } .c {}")
        prune_empty(stylesheet)
        assert render_css(stylesheet) == ".b {\n  color: red;\n}\n"

    def test_statements_kept(self):
        stylesheet = parse_css('@import "x.css"; .a {}')
        prune_empty(stylesheet)
        assert [node.name for node in stylesheet.children] == ["import"]


class TestApplyNodes:
    def test_apply_in_place(self):
        stylesheet = parse_css(".a { color: red; animation-delay: 200ms }")
        rule = stylesheet.children[0]
        color = rule.declarations[0]
        apply_nodes(stylesheet, [ConvertedNode(rule, ".a", ["text-red-500"])], [color])
        assert render_css(stylesheet) == (
            ".a {\n  @apply text-red-500;\n  animation-delay: 200ms;\n}\n"
        )

    def test_override_rule_inserted_before(self):
        stylesheet = parse_css(".a:hover { color: red }")
        rule = stylesheet.children[0]
        apply_nodes(
            stylesheet,
            [ConvertedNode(rule, ".a", ["hover:text-red-500"])],
            rule.declarations,
        )
        assert render_css(stylesheet) == ".a {\n  @apply hover:text-red-500;\n}\n"

    def test_override_keeps_unconverted(self):
        stylesheet = parse_css(".a:hover { color: red; transform: translateZ(1px) }")
        rule = stylesheet.children[0]
        apply_nodes(
            stylesheet,
            [ConvertedNode(rule, ".a", ["hover:text-red-500"])],
            rule.declarations[:1],
        )
        assert [node.selector for node in stylesheet.children] == [".a", ".a:hover"]
        assert render_css(stylesheet).endswith(".a:hover {\n  transform: translateZ(1px);\n}\n")

    def test_nodes_without_classes_skipped(self):
        stylesheet = parse_css(".a { color: red }")
        rule = stylesheet.children[0]
        apply_nodes(stylesheet, [ConvertedNode(rule, ".a")], [])
        assert render_css(stylesheet) == ".a {\n  color: red;\n}\n"
