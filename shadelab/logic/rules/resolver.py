#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/rules/resolver.py

from typing import List, Optional

from shadelab.core import config as c
from shadelab.core.errors import MalformedRuleTableError
from .tables import (
    DYNAMIC_THEME_FIXES,
    INVERSION_FIXES,
    STATIC_THEMES,
    FieldKind,
    RuleTableSpec,
)
from .url import is_url_in_list

PDF_EMBED_SELECTOR = 'embed[type="application/pdf"]'


def _has_common_rule(rules: List[dict]) -> bool:
    return bool(rules) and list(rules[0].get("url", [])) == [c.UNIVERSAL_PATTERN]


def _with_defaults(table_spec: RuleTableSpec, rule: dict) -> dict:
    result = table_spec.empty_rule(rule.get("url"))
    for f in table_spec.fields.values():
        if f.name in rule and rule[f.name] is not None:
            value = rule[f.name]
            result[f.name] = list(value) if f.kind == FieldKind.LIST else value
    return result


def _merge(table_spec: RuleTableSpec, common: dict, match: dict) -> dict:
    result = {"url": list(match["url"])}
    for f in table_spec.fields.values():
        if f.kind == FieldKind.LIST:
            result[f.name] = list(common[f.name]) + list(match[f.name])
        elif f.kind == FieldKind.TEXT:
            result[f.name] = "\n".join(t for t in (common[f.name], match[f.name]) if t)
        else:
            result[f.name] = bool(common[f.name] or match[f.name])
    return result


def resolve_rule(
    table_spec: RuleTableSpec,
    rules: List[dict],
    url: str,
    frame_url: Optional[str] = None,
    strict: bool = False,
) -> Optional[dict]:
    """
    Pick the most specific rule for a page and merge it into the common rule.

    Specificity is the length of a rule's first url pattern; ties go to the
    rule listed first. Returns None for a table without a leading '*' rule,
    or raises MalformedRuleTableError when strict is set.
    """
    if not _has_common_rule(rules):
        if strict:
            raise MalformedRuleTableError(
                f"{table_spec.name} table must start with a '{c.UNIVERSAL_PATTERN}' rule"
            )
        return None

    common = _with_defaults(table_spec, rules[0])
    target = frame_url if frame_url is not None else url

    scored = []
    for rule in rules[1:]:
        patterns = rule.get("url") or []
        if patterns and is_url_in_list(target, patterns):
            scored.append((len(patterns[0]), rule))
    if not scored:
        return common

    # sorted() is stable, so equal scores keep table order
    scored = sorted(scored, key=lambda item: item[0], reverse=True)
    match = _with_defaults(table_spec, scored[0][1])

    no_common = table_spec.fields.get(getattr(table_spec.commands, "NO_COMMON", None))
    if no_common is not None and match[no_common.name]:
        return match
    return _merge(table_spec, common, match)


def get_inversion_fixes_for(url: str, rules: List[dict], strict: bool = False) -> Optional[dict]:
    return resolve_rule(INVERSION_FIXES, rules, url, strict=strict)


def get_dynamic_theme_fixes_for(
    url: str,
    frame_url: Optional[str],
    rules: List[dict],
    enabled_for_pdf: bool = False,
    strict: bool = False,
) -> Optional[dict]:
    """Dynamic-theme fixes for a page or frame; optionally invert embedded PDFs."""
    if enabled_for_pdf and _has_common_rule(rules):
        common = dict(rules[0])
        common["invert"] = list(common.get("invert") or []) + [PDF_EMBED_SELECTOR]
        rules = [common] + list(rules[1:])
    return resolve_rule(DYNAMIC_THEME_FIXES, rules, url, frame_url, strict=strict)


def get_static_theme_for(url: str, rules: List[dict], strict: bool = False) -> Optional[dict]:
    return resolve_rule(STATIC_THEMES, rules, url, strict=strict)
