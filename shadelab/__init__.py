#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/__init__.py

__version__ = "0.1.0"

from shadelab.core.errors import ColorParseError, FilterConfigError, MalformedRuleTableError
from shadelab.core.types import HSLA, RGBA, FilterConfig, Role, ThemeMode
from shadelab.shared.parser import parse_color
from shadelab.logic.modify.cache import ColorCache
from shadelab.logic.modify.engine import theme_color
from shadelab.logic.modify.filters import get_css_filter_value, get_svg_filter_matrix_value
from shadelab.logic.rules.dsl import format_rule_table, parse_rule_table
from shadelab.logic.rules.resolver import resolve_rule
from shadelab.logic.rules.tables import DYNAMIC_THEME_FIXES, INVERSION_FIXES, STATIC_THEMES, TABLE_SPECS
from shadelab.logic.rules.url import matches_any

__all__ = [
    "ColorCache",
    "ColorParseError",
    "DYNAMIC_THEME_FIXES",
    "FilterConfig",
    "FilterConfigError",
    "HSLA",
    "INVERSION_FIXES",
    "MalformedRuleTableError",
    "RGBA",
    "Role",
    "STATIC_THEMES",
    "TABLE_SPECS",
    "ThemeMode",
    "format_rule_table",
    "get_css_filter_value",
    "get_svg_filter_matrix_value",
    "matches_any",
    "parse_color",
    "parse_rule_table",
    "resolve_rule",
    "theme_color",
]
