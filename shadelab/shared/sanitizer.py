#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/shared/sanitizer.py

import argparse
import re

from shadelab.core import config as c
from shadelab.core.errors import ColorParseError
from .parser import parse_color


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _extract_signed_int(value: str) -> int:
    """
    Extracts an integer from a string while preserving its sign.
    Ignores a trailing '%' and any other non-digit characters.
    """
    if value is None:
        return None

    s = str(value)
    is_negative = s.strip().startswith("-")

    digits_only = "".join(re.findall(r"[0-9]", s))
    if not digits_only:
        return None

    val = int(digits_only)
    return -val if is_negative else val


def _extract_alpha_only(value: str) -> str:
    """Lowercased letters of a string; used for mode, role and table names."""
    if value is None:
        return ""
    s = str(value).replace(" ", "").lower()
    return "".join(re.findall(r"[a-z]", s))


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_color(v: str) -> str:
    """Validator for color literals; keeps the text, rejects what cannot parse."""
    try:
        parse_color(v)
    except ColorParseError:
        raise argparse.ArgumentTypeError(f"invalid color value: '{_sanitize_for_log(v)}'")
    return v.strip()


def handle_alias(aliases: dict, what: str):
    """
    Factory function returning a validator that maps a name through an
    alias table, e.g. 'bg' -> 'background'.
    """
    def validator(v: str):
        cleaned = _extract_alpha_only(v)
        if cleaned not in aliases:
            choices = ", ".join(sorted(aliases))
            raise argparse.ArgumentTypeError(
                f"invalid {what}: '{_sanitize_for_log(v)}' (choose from {choices})"
            )
        return aliases[cleaned]
    return validator


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        val = _extract_signed_int(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


def handle_url(v: str) -> str:
    cleaned = str(v).strip() if v is not None else ""
    if not cleaned:
        raise argparse.ArgumentTypeError("url must not be empty")
    return cleaned


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "color": handle_color,
    "url": handle_url,
    "pattern": handle_url,

    "mode": handle_alias(c.MODE_ALIASES, "mode"),
    "role": handle_alias(c.ROLE_ALIASES, "role"),
    "table": handle_alias(c.TABLE_ALIASES, "table"),

    "percent_positive": handle_int_range(1, c.MAX_FILTER_PERCENT),
    "percent_0_100": handle_int_range(0, 100),
}
