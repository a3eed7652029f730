"""Tests for the rule-table text format."""

from shadelab.logic.rules.dsl import format_rule_table, parse_rule_table
from shadelab.logic.rules.tables import (
    DYNAMIC_THEME_FIXES,
    INVERSION_FIXES,
    STATIC_THEMES,
    FieldKind,
    InversionFixCommand,
)

SEPARATOR = "=" * 32

TABLE_TEXT = """*

INVERT
img.logo

CSS
.common {
  color: red;
}

================================

Mail.example.com
mail.example.org

NO INVERT
.avatar
   .photo

REMOVE BG
body

================================

b.example.com

INVERT
.b
"""


class TestParse:
    def test_single_block(self):
        rules = parse_rule_table("example.com\n\nINVERT\nselector1\nselector2\n", INVERSION_FIXES)
        assert rules == [{"url": ["example.com"], "invert": ["selector1", "selector2"]}]

    def test_full_table(self):
        rules = parse_rule_table(TABLE_TEXT, INVERSION_FIXES)
        assert [r["url"] for r in rules] == [["*"], ["Mail.example.com", "mail.example.org"], ["b.example.com"]]
        assert rules[0]["css"] == ".common {\n  color: red;\n}"
        assert rules[1]["no_invert"] == [".avatar", ".photo"]
        assert rules[1]["remove_bg"] == ["body"]

    def test_carriage_returns_are_dropped(self):
        rules = parse_rule_table("example.com\r\n\r\nINVERT\r\n.a\r\n", INVERSION_FIXES)
        assert rules == [{"url": ["example.com"], "invert": [".a"]}]

    def test_unknown_command_is_ignored(self):
        rules = parse_rule_table("example.com\n\nFOO BAR\n.x\n\nINVERT\n.y\n", INVERSION_FIXES)
        assert rules == [{"url": ["example.com"], "invert": [".y"]}]

    def test_block_without_command_is_skipped(self):
        assert parse_rule_table("example.com\n\n====\n\nother.com\n\nINVERT\n.z\n", INVERSION_FIXES) == [
            {"url": ["other.com"], "invert": [".z"]}
        ]

    def test_flag_command(self):
        rules = parse_rule_table("example.com\n\nNO COMMON\n\nNEUTRAL BG\nbody\n", STATIC_THEMES)
        assert rules == [{"url": ["example.com"], "no_common": True, "neutral_bg": ["body"]}]

    def test_multi_word_commands(self):
        rules = parse_rule_table("example.com\n\nIGNORE INLINE STYLE\n.x\n", DYNAMIC_THEME_FIXES)
        assert rules[0]["ignore_inline_style"] == [".x"]


class TestFormat:
    def test_single_rule(self):
        rules = [{"url": ["example.com"], "invert": ["s1", "s2"]}]
        assert format_rule_table(rules, INVERSION_FIXES) == "example.com\n\nINVERT\n\ns1\ns2\n"

    def test_common_rule_first_then_case_folded(self):
        rules = [
            {"url": ["b.com"], "invert": [".b"]},
            {"url": ["A.com"], "invert": [".a"]},
            {"url": ["*"], "invert": [".c"]},
        ]
        text = format_rule_table(rules, INVERSION_FIXES)
        assert text == (
            "*\n\nINVERT\n\n.c\n"
            f"\n{SEPARATOR}\n\n"
            "A.com\n\nINVERT\n\n.a\n"
            f"\n{SEPARATOR}\n\n"
            "b.com\n\nINVERT\n\n.b\n"
        )

    def test_empty_fields_are_omitted(self):
        rules = [{"url": ["example.com"], "invert": [], "css": "", "no_invert": [".x"]}]
        assert format_rule_table(rules, INVERSION_FIXES) == "example.com\n\nNO INVERT\n\n.x\n"

    def test_flag_has_no_value_line(self):
        rules = [{"url": ["example.com"], "no_common": True}]
        assert format_rule_table(rules, STATIC_THEMES) == "example.com\n\nNO COMMON\n"

    def test_format_is_stable(self):
        once = format_rule_table(parse_rule_table(TABLE_TEXT, INVERSION_FIXES), INVERSION_FIXES)
        twice = format_rule_table(parse_rule_table(once, INVERSION_FIXES), INVERSION_FIXES)
        assert once == twice

    def test_parse_after_format_keeps_rules(self):
        rules = parse_rule_table(TABLE_TEXT, INVERSION_FIXES)
        again = parse_rule_table(format_rule_table(rules, INVERSION_FIXES), INVERSION_FIXES)
        assert {r["url"][0]: r for r in again} == {r["url"][0]: r for r in rules}


class TestTableSpecs:
    def test_field_names_follow_commands(self):
        field = INVERSION_FIXES.field_for(InversionFixCommand.NO_INVERT)
        assert field.name == "no_invert"
        assert field.kind == FieldKind.LIST

    def test_unknown_command_lookup(self):
        assert INVERSION_FIXES.command_for("NOT A COMMAND") is None

    def test_static_command_order(self):
        names = [f.name for f in STATIC_THEMES.fields.values()]
        assert names[0] == "no_common"
        assert names[-1] == "invert"
        assert len(names) == 26
