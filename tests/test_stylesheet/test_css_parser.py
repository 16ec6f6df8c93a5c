"""Tests for the compiled CSS parser."""

import pytest

from less_theme.stylesheet import (
    AtRule,
    Comment,
    Declaration,
    Rule,
    StylesheetParseError,
    parse_stylesheet,
)


# ---------------------------------------------------------------------------
# Rules and declarations
# ---------------------------------------------------------------------------


class TestRules:
    def test_single_rule(self):
        sheet = parse_stylesheet(".btn {\n  color: #1890ff;\n  font-size: 12px;\n}\n")
        assert sheet.nodes == [
            Rule(
                selector=".btn",
                nodes=[
                    Declaration(prop="color", value="#1890ff"),
                    Declaration(prop="font-size", value="12px"),
                ],
            )
        ]

    def test_multiline_selector_joined(self):
        sheet = parse_stylesheet(".a,\n.b:hover {\n  color: red;\n}")
        assert sheet.rules[0].selector == ".a, .b:hover"

    def test_last_declaration_without_semicolon(self):
        sheet = parse_stylesheet(".a { color: red; background: blue }")
        assert sheet.rules[0].declarations == [
            Declaration(prop="color", value="red"),
            Declaration(prop="background", value="blue"),
        ]

    def test_value_with_colon(self):
        sheet = parse_stylesheet(
            ".a { filter: progid:DXImageTransform.Microsoft.gradient(enabled = false); }"
        )
        decl = sheet.rules[0].declarations[0]
        assert decl.prop == "filter"
        assert decl.value == "progid:DXImageTransform.Microsoft.gradient(enabled = false)"

    def test_strings_may_contain_braces(self):
        sheet = parse_stylesheet('.a::after { content: "}"; color: #fff; }')
        assert sheet.rules[0].declarations[0].value == '"}"'
        assert sheet.rules[0].declarations[1].value == "#fff"

    def test_attribute_selector(self):
        sheet = parse_stylesheet("a[href^='http'] { color: #1890ff; }")
        assert sheet.rules[0].selector == "a[href^='http']"

    def test_empty_input(self):
        assert parse_stylesheet("").nodes == []
        assert parse_stylesheet("\n\n").nodes == []


# ---------------------------------------------------------------------------
# At-rules and comments
# ---------------------------------------------------------------------------


class TestAtRules:
    def test_media_block(self):
        sheet = parse_stylesheet("@media screen and (max-width: 575px) {\n  .a {\n    color: red;\n  }\n}\n")
        at_rule = sheet.nodes[0]
        assert isinstance(at_rule, AtRule)
        assert at_rule.name == "media"
        assert at_rule.params == "screen and (max-width: 575px)"
        assert at_rule.nodes == [Rule(selector=".a", nodes=[Declaration("color", "red")])]

    def test_statement_at_rule(self):
        sheet = parse_stylesheet('@charset "utf-8";\n.a { color: red; }')
        assert sheet.nodes[0] == AtRule(name="charset", params='"utf-8"', nodes=None)
        assert isinstance(sheet.nodes[1], Rule)

    def test_font_face_declarations(self):
        sheet = parse_stylesheet("@font-face {\n  font-family: 'x';\n  src: url(a.woff);\n}")
        assert sheet.nodes[0].nodes == [
            Declaration("font-family", "'x'"),
            Declaration("src", "url(a.woff)"),
        ]

    def test_rules_inside_at_rules_are_walked(self):
        sheet = parse_stylesheet("@media print { .a { color: red; } }\n.b { color: blue; }")
        assert [r.selector for r in sheet.rules] == [".a", ".b"]


class TestComments:
    def test_top_level_comment(self):
        sheet = parse_stylesheet("/* header */\n.a { color: red; }")
        assert sheet.nodes[0] == Comment("/* header */")
        assert sheet.nodes[1].selector == ".a"

    def test_comment_before_closing_brace(self):
        sheet = parse_stylesheet(".a { color: red; /* end */ }")
        assert sheet.rules[0].nodes == [Declaration("color", "red"), Comment("/* end */")]

    def test_comment_with_braces(self):
        sheet = parse_stylesheet("/* .x { color: red; } */")
        assert sheet.nodes == [Comment("/* .x { color: red; } */")]

    def test_trailing_comment(self):
        sheet = parse_stylesheet(".a { color: red; }\n/* eof */")
        assert sheet.nodes[-1] == Comment("/* eof */")


# ---------------------------------------------------------------------------
# Serialization and errors
# ---------------------------------------------------------------------------


class TestSerialization:
    def test_one_rule_per_line(self):
        sheet = parse_stylesheet(".a {\n  color: red;\n}\n.b {\n  color: blue;\n}\n")
        assert sheet.to_css() == ".a {color: red;}\n.b {color: blue;}\n"

    def test_serialized_output_parses_back(self):
        css = ".a, .b {color: red;background: #fff;}\n"
        assert parse_stylesheet(css).to_css() == css


class TestParseErrors:
    def test_unclosed_block(self):
        with pytest.raises(StylesheetParseError):
            parse_stylesheet(".a { color: red;")

    def test_stray_closing_brace(self):
        with pytest.raises(StylesheetParseError) as exc_info:
            parse_stylesheet(".a { color: red; }\n}")
        assert exc_info.value.line == 2
