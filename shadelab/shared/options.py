#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/shared/options.py

import argparse
import sys

from shadelab.core import config as c
from shadelab.core.errors import FilterConfigError
from shadelab.core.types import FilterConfig, ThemeMode, validate_filter_config
from .logger import log
from .sanitizer import INPUT_HANDLERS


def add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    """Flags shared by every subcommand that builds a FilterConfig."""
    group = parser.add_argument_group("filter settings")
    group.add_argument(
        "-m",
        "--mode",
        type=INPUT_HANDLERS["mode"],
        default=ThemeMode.DARK,
        help="theme mode: dark or light (default: dark)",
    )
    group.add_argument(
        "-b",
        "--brightness",
        type=INPUT_HANDLERS["percent_positive"],
        default=c.DEFAULT_BRIGHTNESS,
        help=f"brightness in percent (default: {c.DEFAULT_BRIGHTNESS})",
    )
    group.add_argument(
        "-ct",
        "--contrast",
        type=INPUT_HANDLERS["percent_positive"],
        default=c.DEFAULT_CONTRAST,
        help=f"contrast in percent (default: {c.DEFAULT_CONTRAST})",
    )
    group.add_argument(
        "-g",
        "--grayscale",
        type=INPUT_HANDLERS["percent_0_100"],
        default=c.DEFAULT_GRAYSCALE,
        help="grayscale in percent, 0-100 (default: 0)",
    )
    group.add_argument(
        "-sp",
        "--sepia",
        type=INPUT_HANDLERS["percent_0_100"],
        default=c.DEFAULT_SEPIA,
        help="sepia in percent, 0-100 (default: 0)",
    )
    group.add_argument(
        "--bg-pole",
        type=INPUT_HANDLERS["color"],
        default=None,
        help="background pole color of the selected mode",
    )
    group.add_argument(
        "--fg-pole",
        type=INPUT_HANDLERS["color"],
        default=None,
        help="text pole color of the selected mode",
    )


def config_from_args(args: argparse.Namespace) -> FilterConfig:
    """Build a validated FilterConfig from parsed flags, exiting on bad values."""
    mode = ThemeMode(args.mode)
    config = FilterConfig(
        mode=mode,
        brightness=args.brightness,
        contrast=args.contrast,
        grayscale=args.grayscale,
        sepia=args.sepia,
    )
    poles = {}
    if mode == ThemeMode.DARK:
        if args.bg_pole:
            poles["dark_scheme_background_color"] = args.bg_pole
        if args.fg_pole:
            poles["dark_scheme_text_color"] = args.fg_pole
    else:
        if args.bg_pole:
            poles["light_scheme_background_color"] = args.bg_pole
        if args.fg_pole:
            poles["light_scheme_text_color"] = args.fg_pole
    config = config._replace(**poles)

    try:
        return validate_filter_config(config)
    except FilterConfigError as e:
        log("error", str(e))
        sys.exit(2)
