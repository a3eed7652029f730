#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/subcommands/theme.py

import argparse
import sys

from shadelab.core import config as c
from shadelab.core.errors import ColorParseError
from shadelab.core.types import Role
from shadelab.logic.modify.cache import ColorCache
from shadelab.logic.modify.engine import EXTRA_MODIFIERS, ROLE_MODIFIERS
from shadelab.shared.formatting import format_filter_config
from shadelab.shared.logger import log, ShadelabArgumentParser
from shadelab.shared.options import add_filter_arguments, config_from_args
from shadelab.shared.parser import parse_color
from shadelab.shared.preview import print_color_block
from shadelab.shared.sanitizer import INPUT_HANDLERS


def _modifier_for(role_name: str):
    if role_name in EXTRA_MODIFIERS:
        return EXTRA_MODIFIERS[role_name]
    return ROLE_MODIFIERS[Role(role_name)]


def handle_theme_command(args: argparse.Namespace) -> None:
    config = config_from_args(args)
    cache = ColorCache()
    try:
        rgb = parse_color(args.color)
    except ColorParseError as e:
        log("error", str(e))
        sys.exit(2)

    result = _modifier_for(args.role)(rgb, config, cache)

    if not args.verbose:
        print(result)
        return

    log("info", format_filter_config(config))
    print_color_block(args.color, title="source")
    print_color_block(result, title=f"themed {args.role}")
    stats = cache.stats()
    print(
        f"{c.MSG_BOLD_COLORS['dim']}cache: {stats['parsed']} parsed, "
        f"{stats['modified']} modified{c.RESET}"
    )


def get_theme_parser() -> argparse.ArgumentParser:
    parser = ShadelabArgumentParser(
        prog="shadelab theme",
        description="shadelab theme: remap a page color for a dark or light theme",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-c",
        "--color",
        required=True,
        type=INPUT_HANDLERS["color"],
        help=(
            "source color, quoted when it has spaces\n"
            "examples:\n"
            '  -c "#ffffff"\n'
            '  -c "rgb(255, 128, 0)"\n'
            '  -c "hsl(210, 50%%, 40%%)"\n'
            '  -c "rebeccapurple"'
        ),
    )
    parser.add_argument(
        "-R",
        "--role",
        type=INPUT_HANDLERS["role"],
        default="background",
        help="what the color is used for: bg, fg, border, shadow, gradient, none\n"
             "(default: bg)",
    )
    add_filter_arguments(parser)
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="show swatches of the source and themed color",
    )
    return parser


def main() -> None:
    parser = get_theme_parser()
    args = parser.parse_args(sys.argv[1:])
    handle_theme_command(args)


if __name__ == "__main__":
    main()
