#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/rules/dsl.py

import re
from typing import List

from shadelab.core import config as c
from .tables import FieldKind, RuleTableSpec

BLOCK_SEPARATOR = re.compile(r"^\s*={2,}\s*$", re.MULTILINE)
COMMAND_LINE = re.compile(r"^\s*[A-Z]+(\s[A-Z]+)*\s*$")


def _parse_value(kind: FieldKind, lines: List[str]):
    if kind == FieldKind.FLAG:
        return True
    if kind == FieldKind.TEXT:
        return "\n".join(lines).strip()
    return [line.strip() for line in lines if line.strip()]


def _parse_block(block: str, table_spec: RuleTableSpec):
    lines = block.split("\n")
    command_indices = [i for i, line in enumerate(lines) if COMMAND_LINE.match(line)]
    if not command_indices:
        return None

    urls = [line.strip() for line in lines[: command_indices[0]] if line.strip()]
    rule = {"url": urls}

    bounds = command_indices + [len(lines)]
    for start, end in zip(bounds, bounds[1:]):
        command = table_spec.command_for(lines[start].strip())
        if command is None:
            # Unknown command; its value is dropped with it
            continue
        field = table_spec.field_for(command)
        rule[field.name] = _parse_value(field.kind, lines[start + 1 : end])
    return rule


def parse_rule_table(text: str, table_spec: RuleTableSpec) -> List[dict]:
    """
    Parse rule-table text into a list of rule dicts.

    Blocks are separated by lines of two or more '='. Inside a block, the
    lines before the first command are url patterns; each UPPERCASE line
    starts a command whose value runs to the next command.
    """
    text = text.replace("\r", "")
    rules = []
    for block in BLOCK_SEPARATOR.split(text):
        rule = _parse_block(block, table_spec)
        if rule is not None:
            rules.append(rule)
    return rules


def _sort_key(rule: dict):
    first = rule["url"][0] if rule.get("url") else ""
    return (first != c.UNIVERSAL_PATTERN, first.casefold(), first)


def format_rule(rule: dict, table_spec: RuleTableSpec) -> List[str]:
    lines = list(rule.get("url") or [])
    for command, field in table_spec.fields.items():
        value = rule.get(field.name)
        if not value:
            continue
        lines.extend(["", command.value])
        if field.kind == FieldKind.FLAG:
            continue
        lines.append("")
        if field.kind == FieldKind.TEXT:
            lines.append(value.strip())
        else:
            lines.extend(value)
    return lines


def format_rule_table(rules: List[dict], table_spec: RuleTableSpec) -> str:
    """Render rules as text, common rule first and the rest by url."""
    lines = []
    for i, rule in enumerate(sorted(rules, key=_sort_key)):
        if i > 0:
            lines.extend(["", "=" * c.SEPARATOR_WIDTH, ""])
        lines.extend(format_rule(rule, table_spec))
    lines.append("")
    return "\n".join(lines)
