#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for conversion and url-regex caches
LRU_CACHE_SIZE = 1024

EPS = 1e-12                        # Floating-point precision and division-by-zero safety

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
HUE_SECTOR = 60.0                  # Degrees per HSL sector
HSL_HUE_MOD = 6.0                  # Hue sector divisor for HSL
PERCENT_TO_FACTOR = 100.0          # Divisor to convert percentage values to decimal factors
ALPHA_DIGITS = 2                   # Decimals kept when printing alpha
SVG_DIGITS = 3                     # Decimals per feColorMatrix value

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# Filter Coefficients (Source: W3C Filter Effects, feColorMatrix)
SEPIA_RR = 0.393                   # Red contribution to the output Red channel
SEPIA_RG = 0.769                   # Green contribution to the output Red channel
SEPIA_RB = 0.189                   # Blue contribution to the output Red channel
SEPIA_GR = 0.349                   # Red contribution to the output Green channel
SEPIA_GG = 0.686                   # Green contribution to the output Green channel
SEPIA_GB = 0.168                   # Blue contribution to the output Green channel
SEPIA_BR = 0.272                   # Red contribution to the output Blue channel
SEPIA_BG = 0.534                   # Green contribution to the output Blue channel
SEPIA_BB = 0.131                   # Blue contribution to the output Blue channel

# Hue inversion keeping lightness ordering (diagonal / off-diagonal weights)
INVERT_HUE_DIAG = 0.333
INVERT_HUE_OFF = -0.667

# ==========================================
# Theme Defaults
# ==========================================

DEFAULT_BRIGHTNESS = 100           # Percent, identity
DEFAULT_CONTRAST = 100             # Percent, identity
DEFAULT_GRAYSCALE = 0              # Percent, identity
DEFAULT_SEPIA = 0                  # Percent, identity

# Pole colors (Source: fallback stylesheet of the dark scheme)
DARK_SCHEME_BACKGROUND_COLOR = "#181a1b"
DARK_SCHEME_TEXT_COLOR = "#e8e6e3"
LIGHT_SCHEME_BACKGROUND_COLOR = "#dcdad7"
LIGHT_SCHEME_TEXT_COLOR = "#181a1b"

# ==========================================
# Perceptual Remapping Thresholds
# ==========================================

LIGHTNESS_SPLIT = 0.5              # Below: dark color, above: light color

# Background role
MAX_BG_LIGHTNESS = 0.4             # Ceiling for remapped dark backgrounds
BG_NEUTRAL_SATURATION = 0.12       # Saturation under which a background is neutral
BG_BLUE_HUE_RANGE = (200.0, 280.0) # Light blues treated as neutral
BG_BLUE_MIN_LIGHTNESS = 0.8        # ... when lighter than this
BG_YELLOW_HUE_RANGE = (60.0, 180.0)
BG_YELLOW_SPLIT_HUE = 120.0
BG_GREEN_HUE_MAP = (120.0, 180.0, 135.0, 180.0)   # in_lo, in_hi, out_lo, out_hi
BG_YELLOW_HUE_MAP = (60.0, 120.0, 60.0, 105.0)

# Foreground role
MIN_FG_LIGHTNESS = 0.55            # Floor for remapped text
FG_NEUTRAL_LIGHTNESS = 0.2         # Lightness under which text is neutral
FG_NEUTRAL_SATURATION = 0.24       # Saturation under which text is neutral
FG_BLUE_HUE_RANGE = (205.0, 245.0)
FG_BLUE_HUE_MAP = (205.0, 245.0, 205.0, 220.0)
FG_BLUE_LIGHTNESS_BOOST = 0.05     # Extra lightness for dark blue text

# Border role
BORDER_LIGHTNESS_MAP = (0.0, 1.0, 0.5, 0.2)

# Light scheme
LIGHT_DARK_NEUTRAL_LIGHTNESS = 0.2
LIGHT_DARK_NEUTRAL_SATURATION = 0.12
LIGHT_LIGHT_NEUTRAL_SATURATION = 0.24
LIGHT_BLUE_HUE_RANGE = (200.0, 280.0)
LIGHT_BLUE_MIN_LIGHTNESS = 0.8

# ==========================================
# Rule Tables
# ==========================================

UNIVERSAL_PATTERN = "*"            # Sole pattern of a table's common rule
SEPARATOR_WIDTH = 32               # Width of the '=' line between rules

# ==========================================
# CLI UI & Data Structures
# ==========================================

ROLE_ALIASES = {
    'bg': 'background',
    'background': 'background',
    'fg': 'foreground',
    'text': 'foreground',
    'foreground': 'foreground',
    'border': 'border',
    'shadow': 'shadow',
    'gradient': 'gradient',
    'none': 'none',
}

MODE_ALIASES = {
    'dark': 1,
    'light': 0,
}

TABLE_ALIASES = {
    'inversion': 'inversion',
    'inversionfixes': 'inversion',
    'dynamic': 'dynamic',
    'dynamicthemefixes': 'dynamic',
    'static': 'static',
    'staticthemes': 'static',
}

MAX_FILTER_PERCENT = 1000          # Upper clamp for brightness/contrast flags

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"

PREVIEW_TITLE_WIDTH = 18           # Column where swatches start
PREVIEW_SWATCH_WIDTH = 16          # Swatch width in cells
