#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/core/types.py

from enum import Enum, IntEnum
from typing import NamedTuple

from . import config as c
from .errors import FilterConfigError


class RGBA(NamedTuple):
    r: int
    g: int
    b: int
    a: float = 1.0


class HSLA(NamedTuple):
    h: float
    s: float
    l: float
    a: float = 1.0


class ThemeMode(IntEnum):
    LIGHT = 0
    DARK = 1


class Role(Enum):
    """What a color is used for on the page; selects the remapping routine."""

    BACKGROUND = "background"
    FOREGROUND = "foreground"
    BORDER = "border"
    LIGHT_SCHEME = "light_scheme"


class FilterConfig(NamedTuple):
    """Theme settings that affect color output.

    The four pole colors are the anchors used when remapping: the dark-scheme
    pair is used in DARK mode, the light-scheme pair in LIGHT mode.
    """

    mode: ThemeMode = ThemeMode.DARK
    brightness: int = c.DEFAULT_BRIGHTNESS
    contrast: int = c.DEFAULT_CONTRAST
    grayscale: int = c.DEFAULT_GRAYSCALE
    sepia: int = c.DEFAULT_SEPIA
    dark_scheme_background_color: str = c.DARK_SCHEME_BACKGROUND_COLOR
    dark_scheme_text_color: str = c.DARK_SCHEME_TEXT_COLOR
    light_scheme_background_color: str = c.LIGHT_SCHEME_BACKGROUND_COLOR
    light_scheme_text_color: str = c.LIGHT_SCHEME_TEXT_COLOR


def validate_filter_config(config: FilterConfig) -> FilterConfig:
    if config.brightness <= 0:
        raise FilterConfigError(f"brightness must be > 0, got {config.brightness}")
    if config.contrast <= 0:
        raise FilterConfigError(f"contrast must be > 0, got {config.contrast}")
    if not 0 <= config.grayscale <= c.PERCENT_TO_FACTOR:
        raise FilterConfigError(f"grayscale must be in [0, 100], got {config.grayscale}")
    if not 0 <= config.sepia <= c.PERCENT_TO_FACTOR:
        raise FilterConfigError(f"sepia must be in [0, 100], got {config.sepia}")
    return config
