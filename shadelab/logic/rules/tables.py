#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/rules/tables.py

from enum import Enum
from typing import Dict, NamedTuple, Optional, Type


class FieldKind(Enum):
    LIST = "list"
    TEXT = "text"
    FLAG = "flag"


class RuleField(NamedTuple):
    name: str
    kind: FieldKind


class RuleTableSpec(NamedTuple):
    """
    Describes one rule table: its commands (in declared order), the record
    field each command fills and how values merge with the common rule.
    """

    name: str
    commands: Type[Enum]
    fields: Dict[Enum, RuleField]

    def command_for(self, text: str) -> Optional[Enum]:
        try:
            return self.commands(text)
        except ValueError:
            return None

    def field_for(self, command: Enum) -> RuleField:
        return self.fields[command]

    def empty_rule(self, urls=None) -> dict:
        rule = {"url": list(urls or [])}
        for f in self.fields.values():
            if f.kind == FieldKind.LIST:
                rule[f.name] = []
            elif f.kind == FieldKind.TEXT:
                rule[f.name] = ""
            else:
                rule[f.name] = False
        return rule


def _build_spec(name: str, commands: Type[Enum], kinds: Dict[Enum, FieldKind]) -> RuleTableSpec:
    fields = {cmd: RuleField(cmd.name.lower(), kinds.get(cmd, FieldKind.LIST)) for cmd in commands}
    return RuleTableSpec(name, commands, fields)


# ==========================================
# Inversion fixes
# ==========================================

class InversionFixCommand(Enum):
    INVERT = "INVERT"
    NO_INVERT = "NO INVERT"
    REMOVE_BG = "REMOVE BG"
    CSS = "CSS"


INVERSION_FIXES = _build_spec(
    "inversion",
    InversionFixCommand,
    {InversionFixCommand.CSS: FieldKind.TEXT},
)


# ==========================================
# Dynamic theme fixes
# ==========================================

class DynamicThemeFixCommand(Enum):
    INVERT = "INVERT"
    CSS = "CSS"
    IGNORE_INLINE_STYLE = "IGNORE INLINE STYLE"
    IGNORE_IMAGE_ANALYSIS = "IGNORE IMAGE ANALYSIS"


DYNAMIC_THEME_FIXES = _build_spec(
    "dynamic",
    DynamicThemeFixCommand,
    {DynamicThemeFixCommand.CSS: FieldKind.TEXT},
)


# ==========================================
# Static themes
# ==========================================

class StaticThemeCommand(Enum):
    NO_COMMON = "NO COMMON"

    NEUTRAL_BG = "NEUTRAL BG"
    NEUTRAL_BG_ACTIVE = "NEUTRAL BG ACTIVE"
    NEUTRAL_TEXT = "NEUTRAL TEXT"
    NEUTRAL_TEXT_ACTIVE = "NEUTRAL TEXT ACTIVE"
    NEUTRAL_BORDER = "NEUTRAL BORDER"

    RED_BG = "RED BG"
    RED_BG_ACTIVE = "RED BG ACTIVE"
    RED_TEXT = "RED TEXT"
    RED_TEXT_ACTIVE = "RED TEXT ACTIVE"
    RED_BORDER = "RED BORDER"

    GREEN_BG = "GREEN BG"
    GREEN_BG_ACTIVE = "GREEN BG ACTIVE"
    GREEN_TEXT = "GREEN TEXT"
    GREEN_TEXT_ACTIVE = "GREEN TEXT ACTIVE"
    GREEN_BORDER = "GREEN BORDER"

    BLUE_BG = "BLUE BG"
    BLUE_BG_ACTIVE = "BLUE BG ACTIVE"
    BLUE_TEXT = "BLUE TEXT"
    BLUE_TEXT_ACTIVE = "BLUE TEXT ACTIVE"
    BLUE_BORDER = "BLUE BORDER"

    FADE_BG = "FADE BG"
    FADE_TEXT = "FADE TEXT"
    TRANSPARENT_BG = "TRANSPARENT BG"

    NO_IMAGE = "NO IMAGE"
    INVERT = "INVERT"


STATIC_THEMES = _build_spec(
    "static",
    StaticThemeCommand,
    {StaticThemeCommand.NO_COMMON: FieldKind.FLAG},
)


TABLE_SPECS = {
    INVERSION_FIXES.name: INVERSION_FIXES,
    DYNAMIC_THEME_FIXES.name: DYNAMIC_THEME_FIXES,
    STATIC_THEMES.name: STATIC_THEMES,
}
