#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/core/matrix.py

from typing import Sequence, Tuple

from . import config as c
from .types import FilterConfig, ThemeMode
from shadelab.shared.clamping import clamp, round_half_up

Row = Tuple[float, float, float, float, float]
Matrix = Tuple[Row, Row, Row, Row, Row]

_ALPHA_ROW = (0.0, 0.0, 0.0, 1.0, 0.0)
_OFFSET_ROW = (0.0, 0.0, 0.0, 0.0, 1.0)


def identity() -> Matrix:
    return (
        (1.0, 0.0, 0.0, 0.0, 0.0),
        (0.0, 1.0, 0.0, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0, 0.0),
        _ALPHA_ROW,
        _OFFSET_ROW,
    )


def invert_hue() -> Matrix:
    """Invert lightness while keeping hue (invert(100%) hue-rotate(180deg))."""
    d, o = c.INVERT_HUE_DIAG, c.INVERT_HUE_OFF
    return (
        (d, o, o, 0.0, 1.0),
        (o, d, o, 0.0, 1.0),
        (o, o, d, 0.0, 1.0),
        _ALPHA_ROW,
        _OFFSET_ROW,
    )


def brightness(v: float) -> Matrix:
    return (
        (v, 0.0, 0.0, 0.0, 0.0),
        (0.0, v, 0.0, 0.0, 0.0),
        (0.0, 0.0, v, 0.0, 0.0),
        _ALPHA_ROW,
        _OFFSET_ROW,
    )


def contrast(v: float) -> Matrix:
    t = (1 - v) / c.DIV_2
    return (
        (v, 0.0, 0.0, 0.0, t),
        (0.0, v, 0.0, 0.0, t),
        (0.0, 0.0, v, 0.0, t),
        _ALPHA_ROW,
        _OFFSET_ROW,
    )


def sepia(v: float) -> Matrix:
    u = 1 - v
    return (
        (c.SEPIA_RR + 0.607 * u, c.SEPIA_RG - c.SEPIA_RG * u, c.SEPIA_RB - c.SEPIA_RB * u, 0.0, 0.0),
        (c.SEPIA_GR - c.SEPIA_GR * u, c.SEPIA_GG + 0.314 * u, c.SEPIA_GB - c.SEPIA_GB * u, 0.0, 0.0),
        (c.SEPIA_BR - c.SEPIA_BR * u, c.SEPIA_BG - c.SEPIA_BG * u, c.SEPIA_BB + 0.869 * u, 0.0, 0.0),
        _ALPHA_ROW,
        _OFFSET_ROW,
    )


def grayscale(v: float) -> Matrix:
    u = 1 - v
    return (
        (c.LUMA_R + 0.7874 * u, c.LUMA_G - c.LUMA_G * u, c.LUMA_B - c.LUMA_B * u, 0.0, 0.0),
        (c.LUMA_R - c.LUMA_R * u, c.LUMA_G + 0.2848 * u, c.LUMA_B - c.LUMA_B * u, 0.0, 0.0),
        (c.LUMA_R - c.LUMA_R * u, c.LUMA_G - c.LUMA_G * u, c.LUMA_B + 0.9278 * u, 0.0, 0.0),
        _ALPHA_ROW,
        _OFFSET_ROW,
    )


def multiply_matrices(m1: Sequence[Sequence[float]], m2: Sequence[Sequence[float]]) -> Tuple[Tuple[float, ...], ...]:
    """Row-by-column product; m2 may be a 5x5 matrix or a 5x1 column."""
    rows, inner, cols = len(m1), len(m2), len(m2[0])
    return tuple(
        tuple(sum(m1[i][k] * m2[k][j] for k in range(inner)) for j in range(cols))
        for i in range(rows)
    )


def create_filter_matrix(config: FilterConfig) -> Matrix:
    """
    Compose the filter stages of a config in a fixed order:
    sepia, grayscale, contrast, brightness, then hue inversion in DARK mode.
    Stages at their identity value are skipped.
    """
    m = identity()
    if config.sepia != 0:
        m = multiply_matrices(m, sepia(config.sepia / c.PERCENT_TO_FACTOR))
    if config.grayscale != 0:
        m = multiply_matrices(m, grayscale(config.grayscale / c.PERCENT_TO_FACTOR))
    if config.contrast != 100:
        m = multiply_matrices(m, contrast(config.contrast / c.PERCENT_TO_FACTOR))
    if config.brightness != 100:
        m = multiply_matrices(m, brightness(config.brightness / c.PERCENT_TO_FACTOR))
    if config.mode == ThemeMode.DARK:
        m = multiply_matrices(m, invert_hue())
    return m


def apply_color_matrix(matrix: Matrix, rgb: Sequence[int]) -> Tuple[int, int, int]:
    r, g, b = rgb[0], rgb[1], rgb[2]
    column = ((r / c.RGB_MAX,), (g / c.RGB_MAX,), (b / c.RGB_MAX,), (1.0,), (1.0,))
    result = multiply_matrices(matrix, column)
    return tuple(
        int(clamp(round_half_up(result[i][0] * c.RGB_MAX), 0, 255)) for i in range(3)
    )
