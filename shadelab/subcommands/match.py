#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/subcommands/match.py

import argparse
import sys

from shadelab.core import config as c
from shadelab.logic.rules.url import filter_valid_patterns, is_url_matched
from shadelab.shared.logger import ShadelabArgumentParser
from shadelab.shared.sanitizer import INPUT_HANDLERS


def handle_match_command(args: argparse.Namespace) -> int:
    """Print match/no match; returns the exit status (0 when matched)."""
    patterns = filter_valid_patterns(args.pattern)
    matched = [p for p in patterns if is_url_matched(args.url, p)]

    if matched:
        print(f"{c.MSG_BOLD_COLORS['success']}match{c.RESET}")
        if args.verbose:
            for p in matched:
                print(f"  {c.BOLD_WHITE}{p}{c.RESET}")
        return 0

    print(f"{c.MSG_BOLD_COLORS['error']}no match{c.RESET}")
    return 1


def get_match_parser() -> argparse.ArgumentParser:
    parser = ShadelabArgumentParser(
        prog="shadelab match",
        description="shadelab match: test a url against site patterns",
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
        "-u",
        "--url",
        required=True,
        type=INPUT_HANDLERS["url"],
        help="url of the page",
    )
    parser.add_argument(
        "-p",
        "--pattern",
        required=True,
        action="append",
        type=INPUT_HANDLERS["pattern"],
        help=(
            "site pattern, may be repeated\n"
            "examples:\n"
            "  -p example.com\n"
            "  -p '*.example.com/docs'\n"
            "  -p '^example.com$'\n"
            "  -p '[::1]:8080'"
        ),
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="list the patterns that matched",
    )
    return parser


def main() -> None:
    parser = get_match_parser()
    args = parser.parse_args(sys.argv[1:])
    sys.exit(handle_match_command(args))


if __name__ == "__main__":
    main()
