"""Shared pytest fixtures."""

import pytest

from shadelab.core.types import FilterConfig, ThemeMode
from shadelab.logic.modify.cache import ColorCache


@pytest.fixture
def dark_config():
    return FilterConfig()


@pytest.fixture
def light_config():
    return FilterConfig(mode=ThemeMode.LIGHT)


@pytest.fixture
def cache():
    return ColorCache()


@pytest.fixture
def google_rules():
    """Inversion-fix table with a common rule and two nested sites."""
    return [
        {"url": ["*"], "invert": ["img.common"], "css": ".common {}"},
        {"url": ["google.com"], "invert": ["img.google"]},
        {"url": ["mail.google.com"], "invert": ["img.mail"], "css": ".mail {}"},
    ]


@pytest.fixture
def rule_file(tmp_path):
    """Write rule-table text to a temporary file and return its path."""
    def _write(text, name="rules.config"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write

