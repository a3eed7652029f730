"""Tests for site pattern matching."""

import pytest

from shadelab.logic.rules.url import (
    compare_ipv6,
    create_url_regex,
    filter_valid_patterns,
    get_url_host_or_protocol,
    is_ipv6,
    is_url_in_list,
    is_url_matched,
    matches_any,
)


class TestTemplates:
    @pytest.mark.parametrize(
        "url, template, expected",
        [
            ("https://example.com", "example.com", True),
            ("https://www.example.com/page", "example.com", True),
            ("https://notexample.com", "example.com", False),
            ("https://EXAMPLE.com/", "example.com", True),
            ("https://example.com/docs/intro", "example.com/docs", True),
            ("https://example.com/blog", "example.com/docs", False),
            ("https://a.example.com", "*.example.com", True),
            ("https://mail.google.de", "mail.google.*", True),
            ("https://example.com", "https://example.com/", True),
        ],
    )
    def test_match(self, url, template, expected):
        assert is_url_matched(url, template) is expected

    def test_exact_beginning_rejects_subdomain(self):
        assert is_url_matched("https://example.com/x", "^example.com")
        assert not is_url_matched("https://www.example.com", "^example.com")

    def test_exact_ending(self):
        assert is_url_matched("https://example.com/", "example.com$")
        assert is_url_matched("https://example.com/?q=1", "example.com$")
        assert not is_url_matched("https://example.com/path", "example.com$")

    def test_dot_is_literal(self):
        assert not is_url_matched("https://exampleXcom", "example.com")

    def test_regex_is_cached(self):
        assert create_url_regex("cached.example") is create_url_regex("cached.example")


class TestIpv6:
    def test_detection(self):
        assert is_ipv6("http://[::1]:1337/")
        assert not is_ipv6("https://example.com/?q=[1]")
        assert not is_ipv6("example.com")

    def test_same_port_matches(self):
        assert is_url_matched("http://[::1]:1337/path", "[::1]:1337")

    def test_other_port_does_not_match(self):
        assert not is_url_matched("http://[::1]:1338/path", "[::1]:1337")

    def test_never_across_kinds(self):
        assert not is_url_matched("https://example.com", "[::1]:1337")
        assert not is_url_matched("http://[::1]:1337", "example.com")

    def test_compare_without_host(self):
        assert not compare_ipv6("[::1]", "no brackets here")


class TestLists:
    def test_any_matches(self):
        assert is_url_in_list("https://mail.google.com", ["example.com", "google.com"])
        assert matches_any is is_url_in_list

    def test_empty_list(self):
        assert not matches_any("https://example.com", [])

    def test_filter_valid_patterns_logs_skips(self, capsys):
        assert filter_valid_patterns(["example.com", "", "   "]) == ["example.com"]
        err = capsys.readouterr().err
        assert err.count("[warning]") == 2

    def test_filter_valid_patterns_drops_unclosed_bracket(self, capsys):
        patterns = ["[::1]:8080", "[fe80::1", "example.com"]
        assert filter_valid_patterns(patterns, source="rules.txt") == ["[::1]:8080", "example.com"]
        err = capsys.readouterr().err
        assert err.count("[warning]") == 1
        assert "rules.txt" in err


class TestHostOrProtocol:
    def test_web_url(self):
        assert get_url_host_or_protocol("https://example.com:8080/x") == "example.com:8080"

    def test_non_web_url(self):
        assert get_url_host_or_protocol("about:blank") == "about:"
        assert get_url_host_or_protocol("file:///home/user/a.pdf") == "file:"
