#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/modify/cache.py

from typing import Callable, Dict

from shadelab.core.conversions import rgb_to_hsl
from shadelab.core.types import FilterConfig, HSLA, RGBA
from shadelab.shared.parser import parse_color

# Fields of a FilterConfig that change the output color
KEY_FIELDS = (
    "mode",
    "brightness",
    "contrast",
    "grayscale",
    "sepia",
    "dark_scheme_background_color",
    "dark_scheme_text_color",
    "light_scheme_background_color",
    "light_scheme_text_color",
)


def cache_key(rgb: RGBA, config: FilterConfig) -> str:
    parts = [rgb.r, rgb.g, rgb.b, rgb.a]
    parts.extend(
        int(getattr(config, f)) if f == "mode" else getattr(config, f)
        for f in KEY_FIELDS
    )
    return ";".join(str(p) for p in parts)


class ColorCache:
    """
    Owns the memoized state of the remapper.

    parse_cache maps pole color strings to HSLA. modification_cache holds one
    table per HSL routine, keyed by cache_key(). Nothing expires; call
    clear() when a fresh start is needed.
    """

    def __init__(self) -> None:
        self.parse_cache: Dict[str, HSLA] = {}
        self.modification_cache: Dict[Callable, Dict[str, str]] = {}

    def parse_to_hsl(self, color: str) -> HSLA:
        hsl = self.parse_cache.get(color)
        if hsl is None:
            hsl = rgb_to_hsl(parse_color(color))
            self.parse_cache[color] = hsl
        return hsl

    def table_for(self, modify_hsl: Callable) -> Dict[str, str]:
        return self.modification_cache.setdefault(modify_hsl, {})

    def clear(self) -> None:
        self.parse_cache.clear()
        self.modification_cache.clear()

    def stats(self) -> Dict[str, int]:
        return {
            "parsed": len(self.parse_cache),
            "routines": len(self.modification_cache),
            "modified": sum(len(t) for t in self.modification_cache.values()),
        }
