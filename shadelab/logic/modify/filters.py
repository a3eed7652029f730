#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/modify/filters.py

from typing import Optional

from shadelab.core import config as c
from shadelab.core.matrix import Matrix, create_filter_matrix, invert_hue
from shadelab.core.types import FilterConfig, ThemeMode


def get_css_filter_value(config: FilterConfig) -> Optional[str]:
    """CSS `filter:` value for a config, or None when every stage is identity."""
    filters = []
    if config.mode == ThemeMode.DARK:
        filters.append("invert(100%) hue-rotate(180deg)")
    if config.brightness != c.DEFAULT_BRIGHTNESS:
        filters.append(f"brightness({config.brightness}%)")
    if config.contrast != c.DEFAULT_CONTRAST:
        filters.append(f"contrast({config.contrast}%)")
    if config.grayscale != c.DEFAULT_GRAYSCALE:
        filters.append(f"grayscale({config.grayscale}%)")
    if config.sepia != c.DEFAULT_SEPIA:
        filters.append(f"sepia({config.sepia}%)")
    if not filters:
        return None
    return " ".join(filters)


def to_svg_matrix(matrix: Matrix) -> str:
    # feColorMatrix takes the first four rows only
    return "\n".join(
        " ".join(f"{v:.{c.SVG_DIGITS}f}" for v in row) for row in matrix[:4]
    )


def get_svg_filter_matrix_value(config: FilterConfig) -> str:
    return to_svg_matrix(create_filter_matrix(config))


def get_svg_reverse_filter_matrix_value() -> str:
    return to_svg_matrix(invert_hue())
