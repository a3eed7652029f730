"""Tests for rule resolution and merging."""

import copy

import pytest

from shadelab.core.errors import MalformedRuleTableError
from shadelab.logic.rules.resolver import (
    PDF_EMBED_SELECTOR,
    get_dynamic_theme_fixes_for,
    get_inversion_fixes_for,
    get_static_theme_for,
    resolve_rule,
)
from shadelab.logic.rules.tables import INVERSION_FIXES, STATIC_THEMES


class TestSpecificity:
    def test_most_specific_rule_wins(self, google_rules):
        result = resolve_rule(INVERSION_FIXES, google_rules, "https://mail.google.com/mail/u/0")
        assert result["url"] == ["mail.google.com"]
        assert result["invert"] == ["img.common", "img.mail"]

    def test_less_specific_rule(self, google_rules):
        result = resolve_rule(INVERSION_FIXES, google_rules, "https://maps.google.com")
        assert result["url"] == ["google.com"]
        assert result["invert"] == ["img.common", "img.google"]

    def test_ties_go_to_first_rule(self):
        rules = [
            {"url": ["*"]},
            {"url": ["a.site.com"], "invert": ["first"]},
            {"url": ["*.site.com"], "invert": ["second"]},
        ]
        result = resolve_rule(INVERSION_FIXES, rules, "https://a.site.com")
        assert result["invert"] == ["first"]

    def test_frame_url_takes_precedence(self, google_rules):
        result = resolve_rule(
            INVERSION_FIXES, google_rules, "https://example.com", frame_url="https://mail.google.com"
        )
        assert result["url"] == ["mail.google.com"]

    def test_empty_frame_url_is_not_replaced_by_page_url(self, google_rules):
        result = resolve_rule(INVERSION_FIXES, google_rules, "https://mail.google.com", frame_url="")
        assert result["url"] == ["*"]


class TestMerge:
    def test_no_match_returns_common_with_defaults(self, google_rules):
        result = resolve_rule(INVERSION_FIXES, google_rules, "https://example.com")
        assert result == {
            "url": ["*"],
            "invert": ["img.common"],
            "no_invert": [],
            "remove_bg": [],
            "css": ".common {}",
        }

    def test_text_fields_join_with_newline(self, google_rules):
        result = resolve_rule(INVERSION_FIXES, google_rules, "https://mail.google.com")
        assert result["css"] == ".common {}\n.mail {}"

    def test_empty_text_is_skipped(self, google_rules):
        result = resolve_rule(INVERSION_FIXES, google_rules, "https://google.com")
        assert result["css"] == ".common {}"

    def test_inputs_are_not_mutated(self, google_rules):
        before = copy.deepcopy(google_rules)
        resolve_rule(INVERSION_FIXES, google_rules, "https://mail.google.com")
        assert google_rules == before


class TestMalformedTables:
    @pytest.mark.parametrize("rules", [[], [{"url": ["example.com"]}], [{"url": ["*", "x.com"]}]])
    def test_lenient_returns_none(self, rules):
        assert resolve_rule(INVERSION_FIXES, rules, "https://example.com") is None

    def test_strict_raises(self):
        with pytest.raises(MalformedRuleTableError):
            resolve_rule(INVERSION_FIXES, [], "https://example.com", strict=True)


class TestTableHelpers:
    def test_inversion(self, google_rules):
        assert get_inversion_fixes_for("https://google.com", google_rules)["url"] == ["google.com"]

    def test_dynamic_pdf_selector(self):
        rules = [{"url": ["*"], "invert": [".x"]}]
        result = get_dynamic_theme_fixes_for("https://example.com", None, rules, enabled_for_pdf=True)
        assert result["invert"] == [".x", PDF_EMBED_SELECTOR]
        assert rules[0]["invert"] == [".x"]

    def test_static_no_common(self):
        rules = [
            {"url": ["*"], "neutral_bg": ["body"]},
            {"url": ["example.com"], "no_common": True, "neutral_bg": ["main"]},
        ]
        result = get_static_theme_for("https://example.com", rules)
        assert result["neutral_bg"] == ["main"]
        assert result["no_common"] is True

    def test_static_merges_without_flag(self):
        rules = [
            {"url": ["*"], "neutral_bg": ["body"]},
            {"url": ["example.com"], "neutral_bg": ["main"]},
        ]
        result = resolve_rule(STATIC_THEMES, rules, "https://example.com")
        assert result["neutral_bg"] == ["body", "main"]
        assert result["no_common"] is False
