#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/shared/parser.py

import math
import re
from typing import Dict, List, Sequence

from shadelab.core import config as c
from shadelab.core.conversions import hsl_to_rgb
from shadelab.core.errors import ColorParseError
from shadelab.core.names import NAMED_COLORS, SYSTEM_COLORS
from shadelab.core.types import HSLA, RGBA
from .clamping import _clamp01, clamp, round_half_up

RGB_MATCH = re.compile(r"^rgba?\([^()]+\)$")
HSL_MATCH = re.compile(r"^hsla?\([^()]+\)$")
HEX_MATCH = re.compile(r"^#[0-9a-f]+$", re.IGNORECASE)

# Function name, parentheses, slash, comma and whitespace all separate numbers
RGB_SPLITTER = re.compile(r"rgba?|\(|\)|/|,|\s", re.IGNORECASE)
HSL_SPLITTER = re.compile(r"hsla?|\(|\)|/|,|\s", re.IGNORECASE)

RGB_RANGE = (255, 255, 255, 1)
HSL_RANGE = (360, 1, 1, 1)

# Unit suffix -> value of one full range in that unit
RGB_UNITS = {"%": 100.0}
HSL_UNITS = {"%": 100.0, "deg": 360.0, "rad": 2 * math.pi, "turn": 1.0}


def _safe_float(token: str, source: str) -> float:
    """Convert a token to a finite float, failing with the whole color text."""
    try:
        v = float(token)
    except ValueError:
        raise ColorParseError(source) from None
    if not math.isfinite(v):
        raise ColorParseError(source)
    return v


def _get_numbers_from_string(
    s: str,
    splitter: "re.Pattern",
    ranges: Sequence[float],
    units: Dict[str, float],
) -> List[float]:
    """
    Splits a functional notation into its numbers and scales each one that
    carries a unit into the range of its channel. Numbers whose channel range
    is wider than 1 are rounded to integers.
    """
    raw = [t for t in splitter.split(s) if t]
    if not 3 <= len(raw) <= len(ranges):
        raise ColorParseError(s)

    numbers = []
    for i, token in enumerate(raw):
        token = token.strip()
        unit = next((u for u in units if token.endswith(u)), None)
        if unit:
            n = _safe_float(token[: -len(unit)], s) / units[unit] * ranges[i]
        else:
            n = _safe_float(token, s)
        numbers.append(round_half_up(n) if ranges[i] > 1 else n)
    return numbers


def parse_rgb(s: str) -> RGBA:
    nums = _get_numbers_from_string(s, RGB_SPLITTER, RGB_RANGE, RGB_UNITS)
    r, g, b = (int(clamp(v, 0, c.RGB_MAX)) for v in nums[:3])
    a = _clamp01(nums[3]) if len(nums) > 3 else 1.0
    return RGBA(r, g, b, a)


def parse_hsl(s: str) -> RGBA:
    nums = _get_numbers_from_string(s, HSL_SPLITTER, HSL_RANGE, HSL_UNITS)
    h = nums[0] % c.HUE_MAX
    a = _clamp01(nums[3]) if len(nums) > 3 else 1.0
    return hsl_to_rgb(HSLA(h, _clamp01(nums[1]), _clamp01(nums[2]), a))


def parse_hex(s: str) -> RGBA:
    """Parses #rgb, #rgba, #rrggbb and #rrggbbaa."""
    h = s[1:]
    L = len(h)
    if L in (3, 4):
        r, g, b = (int(h[i] * 2, 16) for i in range(3))
        a = 1.0 if L == 3 else int(h[3] * 2, 16) / c.RGB_MAX
        return RGBA(r, g, b, a)
    if L in (6, 8):
        r, g, b = (int(h[i : i + 2], 16) for i in (0, 2, 4))
        a = 1.0 if L == 6 else int(h[6:8], 16) / c.RGB_MAX
        return RGBA(r, g, b, a)
    raise ColorParseError(s)


def _int_to_rgb(n: int) -> RGBA:
    return RGBA((n >> 16) & 255, (n >> 8) & 255, n & 255, 1.0)


# Functional and hex notations, tried in this order
STRING_PARSERS = (
    (RGB_MATCH, parse_rgb),
    (HSL_MATCH, parse_hsl),
    (HEX_MATCH, parse_hex),
)


def parse_color(text: str) -> RGBA:
    """
    Parses any supported color literal into RGBA.

    Dispatch order: rgb()/rgba(), hsl()/hsla(), hex, named colors,
    system colors, 'transparent'. Raises ColorParseError otherwise.
    """
    if text is None:
        raise ColorParseError("")
    color = text.strip().lower()

    for matcher, parser in STRING_PARSERS:
        if matcher.match(color):
            try:
                return parser(color)
            except ColorParseError:
                raise ColorParseError(text) from None
    if color in NAMED_COLORS:
        return _int_to_rgb(NAMED_COLORS[color])
    if color in SYSTEM_COLORS:
        return _int_to_rgb(SYSTEM_COLORS[color])
    if color == "transparent":
        return RGBA(0, 0, 0, 0.0)

    raise ColorParseError(text)


