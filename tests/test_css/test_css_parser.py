"""Tests for reading CSS into the tree with tinycss2."""

from pathlib import Path

import pytest

from tailwindify.css import AtRule, Comment, Declaration, Rule, parse_css
from tailwindify.errors import CSSParseError

FIXTURES = Path(__file__).parent.parent / "fixtures"


class TestParseCss:
    def test_rule_and_declarations(self):
        stylesheet = parse_css(".foo ,\n .bar { COLOR: red; margin: 0 auto !important }")
        rule = stylesheet.children[0]
        assert isinstance(rule, Rule)
        assert rule.selector == ".foo , .bar"
        assert [(d.prop, d.value, d.important) for d in rule.declarations] == [
            ("color", "red", False),
            ("margin", "0 auto", True),
        ]
        assert rule.declarations[0].parent is rule

    def test_custom_property_keeps_case(self):
        rule = parse_css(".a { --Brand-Color: #fff }").children[0]
        assert rule.declarations[0].prop == "--Brand-Color"

    def test_source_positions(self):
        stylesheet = parse_css("\n\n.foo {\n  color: red;\n}")
        rule = stylesheet.children[0]
        assert rule.line == 3
        assert rule.declarations[0].line == 4

    def test_at_rules(self):
        stylesheet = parse_css(
            '@import "base.css";\n@MEDIA (min-width: 768px) { .a { color: red } }'
        )
        statement, media = stylesheet.children
        assert isinstance(statement, AtRule)
        assert statement.name == "import"
        assert not statement.has_block
        assert media.name == "media"
        assert media.params == "(min-width: 768px)"
        assert isinstance(media.children[0], Rule)

    def test_declaration_at_rule(self):
        font_face = parse_css("@font-face { font-family: x; src: url(x.woff) }").children[0]
        assert [d.prop for d in font_face.children] == ["font-family", "src"]

    def test_native_nesting(self):
        rule = parse_css(
            ".a { color: red; &:hover { color: blue } @media print { color: green } }"
        ).children[0]
        declaration, nested, media = rule.children
        assert isinstance(declaration, Declaration)
        assert nested.selector == "&:hover"
        assert isinstance(media.children[0], Declaration)

    def test_comments_kept(self):
        stylesheet = parse_css("/* header */ .a { /* inner */ color: red }")
        assert isinstance(stylesheet.children[0], Comment)
        assert stylesheet.children[0].text == " header "
        assert isinstance(stylesheet.children[1].children[0], Comment)

    def test_empty(self):
        assert parse_css("").children == []

    def test_syntax_error(self):
        with pytest.raises(CSSParseError) as excinfo:
            parse_css((FIXTURES / "invalid.css").read_text())
        assert excinfo.value.line is not None

    def test_source_text_kept_as_written(self):
        stylesheet = parse_css(
            "[data-foo='bar'] { content: 'x'; font-family: 'Open Sans', serif }\n"
            "@supports (content: 'x') { .a { color: red } }"
        )
        rule, supports = stylesheet.children
        assert rule.selector == "[data-foo='bar']"
        assert [d.value for d in rule.declarations] == ["'x'", "'Open Sans', serif"]
        assert supports.params == "(content: 'x')"

    def test_selector_comments_dropped(self):
        rule = parse_css(".a /* card */ .b, .c { color: red }").children[0]
        assert rule.selector == ".a .b, .c"

    def test_important_removed_from_value(self):
        rule = parse_css(".a { color: red ! IMPORTANT; margin: 0 }").children[0]
        assert [(d.value, d.important) for d in rule.declarations] == [
            ("red", True),
            ("0", False),
        ]

    def test_nested_values_and_line_endings(self):
        stylesheet = parse_css(
            "@media print {\r\n  .a {\r\n    content: \"}\";\r\n    margin: 0\r\n  }\r\n}"
        )
        rule = stylesheet.children[0].children[0]
        assert rule.selector == ".a"
        assert [d.value for d in rule.declarations] == ['"}"', "0"]

    def test_walk_rules_document_order(self):
        stylesheet = parse_css(".a {} @media print { .b {} } .c {}")
        assert [rule.selector for rule in stylesheet.walk_rules()] == [".a", ".b", ".c"]
