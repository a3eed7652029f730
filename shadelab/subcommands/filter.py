#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/subcommands/filter.py

import argparse
import sys

from shadelab.logic.modify.filters import (
    get_css_filter_value,
    get_svg_filter_matrix_value,
    get_svg_reverse_filter_matrix_value,
)
from shadelab.shared.logger import log, ShadelabArgumentParser
from shadelab.shared.options import add_filter_arguments, config_from_args


def handle_filter_command(args: argparse.Namespace) -> None:
    config = config_from_args(args)

    if args.reverse:
        print(get_svg_reverse_filter_matrix_value())
    elif args.svg:
        print(get_svg_filter_matrix_value(config))
    else:
        value = get_css_filter_value(config)
        if value is None:
            log("info", "all filter stages are identity; no filter needed")
            return
        print(value)


def get_filter_parser() -> argparse.ArgumentParser:
    parser = ShadelabArgumentParser(
        prog="shadelab filter",
        description="shadelab filter: print the CSS filter or SVG color matrix for a theme",
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
    add_filter_arguments(parser)
    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "--svg",
        action="store_true",
        help="print feColorMatrix values instead of a CSS filter",
    )
    output_group.add_argument(
        "--reverse",
        action="store_true",
        help="print the feColorMatrix values that undo hue inversion",
    )
    return parser


def main() -> None:
    parser = get_filter_parser()
    args = parser.parse_args(sys.argv[1:])
    handle_filter_command(args)


if __name__ == "__main__":
    main()
