#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/core/conversions.py

import functools

from . import config as c
from .types import HSLA, RGBA
from shadelab.shared.clamping import round_half_up


def rgb_to_hsl(rgb: RGBA) -> HSLA:
    """Convert RGBA to HSLA."""
    r_f, g_f, b_f = rgb.r / c.RGB_MAX, rgb.g / c.RGB_MAX, rgb.b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    if delta == 0:
        return HSLA(0.0, 0.0, L, rgb.a)

    if cmax == r_f:
        h = c.HUE_SECTOR * (((g_f - b_f) / delta) % c.HSL_HUE_MOD)
    elif cmax == g_f:
        h = c.HUE_SECTOR * ((b_f - r_f) / delta + c.DIV_2)
    else:
        h = c.HUE_SECTOR * ((r_f - g_f) / delta + 4.0)
    h = (h + c.HUE_MAX) % c.HUE_MAX

    denom = c.UNIT - abs(c.DIV_2 * L - c.UNIT)
    s = 0.0 if abs(denom) < c.EPS else delta / denom
    return HSLA(h, s, L, rgb.a)


def hsl_to_rgb(hsl: HSLA) -> RGBA:
    """Convert HSLA to RGBA, rounding channels to integers."""
    h = hsl.h % c.HUE_MAX
    s, L = hsl.s, hsl.l
    if s == 0:
        v = round_half_up(L * c.RGB_MAX)
        return RGBA(v, v, v, hsl.a)

    chroma = (c.UNIT - abs(c.DIV_2 * L - c.UNIT)) * s
    x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % c.DIV_2) - c.UNIT))
    m = L - chroma / c.DIV_2
    if h < 60:
        r_p, g_p, b_p = chroma, x, 0.0
    elif h < 120:
        r_p, g_p, b_p = x, chroma, 0.0
    elif h < 180:
        r_p, g_p, b_p = 0.0, chroma, x
    elif h < 240:
        r_p, g_p, b_p = 0.0, x, chroma
    elif h < 300:
        r_p, g_p, b_p = x, 0.0, chroma
    else:
        r_p, g_p, b_p = chroma, 0.0, x
    return RGBA(
        round_half_up((r_p + m) * c.RGB_MAX),
        round_half_up((g_p + m) * c.RGB_MAX),
        round_half_up((b_p + m) * c.RGB_MAX),
        hsl.a,
    )


def to_fixed(n: float, digits: int = 0) -> str:
    """Fixed-point text with trailing zeros (and a bare dot) removed."""
    factor = 10 ** digits
    fixed = f"{round_half_up(n * factor) / factor:.{digits}f}"
    if digits == 0:
        return fixed
    if "." in fixed:
        fixed = fixed.rstrip("0").rstrip(".")
    return fixed


def rgb_to_hex_string(rgb: RGBA) -> str:
    """Format as #rrggbb, or #rrggbbaa when translucent."""
    channels = [rgb.r, rgb.g, rgb.b]
    if rgb.a is not None and rgb.a < 1:
        channels.append(round_half_up(rgb.a * c.RGB_MAX))
    return "#" + "".join(f"{int(v):02x}" for v in channels)


def rgb_to_string(rgb: RGBA) -> str:
    """Format as rgb(r, g, b), or rgba(r, g, b, a) when translucent."""
    r, g, b = (to_fixed(v) for v in (rgb.r, rgb.g, rgb.b))
    if rgb.a is not None and rgb.a < 1:
        return f"rgba({r}, {g}, {b}, {to_fixed(rgb.a, c.ALPHA_DIGITS)})"
    return f"rgb({r}, {g}, {b})"


def hsl_to_string(hsl: HSLA) -> str:
    h = to_fixed(hsl.h)
    s = to_fixed(hsl.s * c.PERCENT_TO_FACTOR)
    L = to_fixed(hsl.l * c.PERCENT_TO_FACTOR)
    if hsl.a is not None and hsl.a < 1:
        return f"hsla({h}, {s}%, {L}%, {to_fixed(hsl.a, c.ALPHA_DIGITS)})"
    return f"hsl({h}, {s}%, {L}%)"


# Apply LRU caching to all functions in this module
for _name, _obj in list(globals().items()):
    if callable(_obj) and getattr(_obj, "__module__", None) == __name__:
        globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(_obj)
