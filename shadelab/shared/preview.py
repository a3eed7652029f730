#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/shared/preview.py

import re

from shadelab.core import config as c
from .parser import parse_color

ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def get_visible_len(s: str) -> int:
    return len(ANSI_ESCAPE.sub('', s))


def print_color_block(color: str, title: str = "color", end: str = "\n") -> None:
    """Print a truecolor swatch followed by the color text."""
    r, g, b, _ = parse_color(color)
    padding = " " * max(0, c.PREVIEW_TITLE_WIDTH - get_visible_len(title))
    swatch = f"\033[48;2;{r};{g};{b}m{' ' * c.PREVIEW_SWATCH_WIDTH}{c.RESET}"
    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   {swatch}  {c.BOLD_WHITE}{color}{c.RESET}", end=end)
