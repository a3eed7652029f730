#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/modify/engine.py

from typing import Callable, Optional

from shadelab.core import config as c
from shadelab.core.conversions import hsl_to_rgb, rgb_to_hex_string, rgb_to_hsl, rgb_to_string
from shadelab.core.matrix import apply_color_matrix, create_filter_matrix
from shadelab.core.types import FilterConfig, HSLA, RGBA, Role, ThemeMode
from shadelab.shared.clamping import scale
from shadelab.shared.parser import parse_color
from .cache import ColorCache, cache_key


def _in_range(h: float, bounds) -> bool:
    return bounds[0] < h < bounds[1]


def _scale_hue(h: float, band) -> float:
    return scale(h, *band)


# ==========================================
# Per-role HSL routines
# ==========================================

def modify_bg_hsl(hsl: HSLA, pole: HSLA) -> HSLA:
    """Darken a background, keeping hue except for neutrals and yellows."""
    h, s, l, a = hsl
    is_dark = l < c.LIGHTNESS_SPLIT
    is_blue = _in_range(h, c.BG_BLUE_HUE_RANGE)
    is_neutral = s < c.BG_NEUTRAL_SATURATION or (l > c.BG_BLUE_MIN_LIGHTNESS and is_blue)

    if is_dark:
        lx = scale(l, 0, c.LIGHTNESS_SPLIT, 0, c.MAX_BG_LIGHTNESS)
        if is_neutral:
            return HSLA(pole.h, pole.s, lx, a)
        return HSLA(h, s, lx, a)

    lx = scale(l, c.LIGHTNESS_SPLIT, 1, c.MAX_BG_LIGHTNESS, pole.l)
    if is_neutral:
        return HSLA(pole.h, pole.s, lx, a)

    hx = h
    if _in_range(h, c.BG_YELLOW_HUE_RANGE):
        # Yellow-green band
        if h > c.BG_YELLOW_SPLIT_HUE:
            hx = _scale_hue(h, c.BG_GREEN_HUE_MAP)
        else:
            hx = _scale_hue(h, c.BG_YELLOW_HUE_MAP)
    return HSLA(hx, s, lx, a)


def modify_fg_hsl(hsl: HSLA, pole: HSLA) -> HSLA:
    """Lighten text, keeping hue except for neutrals and deep blues."""
    h, s, l, a = hsl
    is_light = l > c.LIGHTNESS_SPLIT
    is_neutral = l < c.FG_NEUTRAL_LIGHTNESS or s < c.FG_NEUTRAL_SATURATION
    is_blue = not is_neutral and _in_range(h, c.FG_BLUE_HUE_RANGE)

    if is_light:
        lx = scale(l, c.LIGHTNESS_SPLIT, 1, c.MIN_FG_LIGHTNESS, pole.l)
        if is_neutral:
            return HSLA(pole.h, pole.s, lx, a)
        hx = _scale_hue(h, c.FG_BLUE_HUE_MAP) if is_blue else h
        return HSLA(hx, s, lx, a)

    if is_neutral:
        lx = scale(l, 0, c.LIGHTNESS_SPLIT, pole.l, c.MIN_FG_LIGHTNESS)
        return HSLA(pole.h, pole.s, lx, a)

    if is_blue:
        hx = _scale_hue(h, c.FG_BLUE_HUE_MAP)
        lx = scale(l, 0, c.LIGHTNESS_SPLIT, pole.l, min(1, c.MIN_FG_LIGHTNESS + c.FG_BLUE_LIGHTNESS_BOOST))
        return HSLA(hx, s, lx, a)

    lx = scale(l, 0, c.LIGHTNESS_SPLIT, pole.l, c.MIN_FG_LIGHTNESS)
    return HSLA(h, s, lx, a)


def modify_border_hsl(hsl: HSLA, pole_fg: HSLA, pole_bg: HSLA) -> HSLA:
    h, s, l, a = hsl
    is_dark = l < c.LIGHTNESS_SPLIT
    is_neutral = l < c.FG_NEUTRAL_LIGHTNESS or s < c.FG_NEUTRAL_SATURATION

    hx, sx = h, s
    if is_neutral:
        pole = pole_fg if is_dark else pole_bg
        hx, sx = pole.h, pole.s
    lx = scale(l, *c.BORDER_LIGHTNESS_MAP)
    return HSLA(hx, sx, lx, a)


def modify_light_scheme_hsl(hsl: HSLA, pole_fg: HSLA, pole_bg: HSLA) -> HSLA:
    """
    Light-mode remap: lightness is stretched between the text pole (l=0)
    and the background pole (l=1). Neutrals adopt the hue and saturation of
    the nearer pole.
    """
    h, s, l, a = hsl
    is_dark = l < c.LIGHTNESS_SPLIT
    if is_dark:
        is_neutral = l < c.LIGHT_DARK_NEUTRAL_LIGHTNESS or s < c.LIGHT_DARK_NEUTRAL_SATURATION
    else:
        is_blue = _in_range(h, c.LIGHT_BLUE_HUE_RANGE)
        is_neutral = s < c.LIGHT_LIGHT_NEUTRAL_SATURATION or (l > c.LIGHT_BLUE_MIN_LIGHTNESS and is_blue)

    hx, sx = h, s
    if is_neutral:
        pole = pole_fg if is_dark else pole_bg
        hx, sx = pole.h, pole.s
    lx = scale(l, 0, 1, pole_fg.l, pole_bg.l)
    return HSLA(hx, sx, lx, a)


def _noop_hsl(hsl: HSLA) -> HSLA:
    return hsl


# ==========================================
# Shared finishing pipeline
# ==========================================

def _modify_color_with_cache(
    rgb: RGBA,
    config: FilterConfig,
    modify_hsl: Callable,
    pole_color: Optional[str] = None,
    another_pole_color: Optional[str] = None,
    cache: Optional[ColorCache] = None,
) -> str:
    if cache is None:
        cache = ColorCache()
    table = cache.table_for(modify_hsl)
    key = cache_key(rgb, config)
    if key in table:
        return table[key]

    poles = [cache.parse_to_hsl(p) for p in (pole_color, another_pole_color) if p]
    modified = modify_hsl(rgb_to_hsl(rgb), *poles)
    r, g, b = apply_color_matrix(create_filter_matrix(config), hsl_to_rgb(modified))
    if modified.a == 1:
        color = rgb_to_hex_string(RGBA(r, g, b))
    else:
        color = rgb_to_string(RGBA(r, g, b, modified.a))

    table[key] = color
    return color


def _as_light(config: FilterConfig) -> FilterConfig:
    # Inversion is already done by the HSL routine
    return config._replace(mode=ThemeMode.LIGHT)


def modify_light_scheme_color(rgb: RGBA, config: FilterConfig, cache: Optional[ColorCache] = None) -> str:
    return _modify_color_with_cache(
        rgb,
        _as_light(config),
        modify_light_scheme_hsl,
        config.light_scheme_text_color,
        config.light_scheme_background_color,
        cache,
    )


def modify_background_color(rgb: RGBA, config: FilterConfig, cache: Optional[ColorCache] = None) -> str:
    if config.mode == ThemeMode.LIGHT:
        return modify_light_scheme_color(rgb, config, cache)
    return _modify_color_with_cache(
        rgb, _as_light(config), modify_bg_hsl, config.dark_scheme_background_color, cache=cache
    )


def modify_foreground_color(rgb: RGBA, config: FilterConfig, cache: Optional[ColorCache] = None) -> str:
    if config.mode == ThemeMode.LIGHT:
        return modify_light_scheme_color(rgb, config, cache)
    return _modify_color_with_cache(
        rgb, _as_light(config), modify_fg_hsl, config.dark_scheme_text_color, cache=cache
    )


def modify_border_color(rgb: RGBA, config: FilterConfig, cache: Optional[ColorCache] = None) -> str:
    if config.mode == ThemeMode.LIGHT:
        return modify_light_scheme_color(rgb, config, cache)
    return _modify_color_with_cache(
        rgb,
        _as_light(config),
        modify_border_hsl,
        config.dark_scheme_text_color,
        config.dark_scheme_background_color,
        cache,
    )


def modify_shadow_color(rgb: RGBA, config: FilterConfig, cache: Optional[ColorCache] = None) -> str:
    return modify_background_color(rgb, config, cache)


def modify_gradient_color(rgb: RGBA, config: FilterConfig, cache: Optional[ColorCache] = None) -> str:
    return modify_background_color(rgb, config, cache)


def modify_color(rgb: RGBA, config: FilterConfig, cache: Optional[ColorCache] = None) -> str:
    """Apply only the filter matrix of the config, hue inversion included."""
    return _modify_color_with_cache(rgb, config, _noop_hsl, cache=cache)


ROLE_MODIFIERS = {
    Role.BACKGROUND: modify_background_color,
    Role.FOREGROUND: modify_foreground_color,
    Role.BORDER: modify_border_color,
    Role.LIGHT_SCHEME: modify_light_scheme_color,
}

# CLI role names that are not Role members
EXTRA_MODIFIERS = {
    "shadow": modify_shadow_color,
    "gradient": modify_gradient_color,
    "none": modify_color,
}


def theme_color(role: Role, color_text: str, config: FilterConfig, cache: Optional[ColorCache] = None) -> str:
    """
    Parse color_text and remap it for the given role.

    Raises ColorParseError when the text is not a color.
    """
    rgb = parse_color(color_text)
    return ROLE_MODIFIERS[Role(role)](rgb, config, cache)
