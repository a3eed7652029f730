#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/main.py

import argparse
import sys

from shadelab import __version__
from shadelab.subcommands.command_registry import SUBCOMMANDS
from shadelab.shared.logger import log, ShadelabArgumentParser


def get_root_parser() -> argparse.ArgumentParser:
    """Create argument parser for the bare `shadelab` command."""
    parser = ShadelabArgumentParser(
        prog="shadelab",
        description="shadelab: dark-theme color remapping and per-site rule tables",
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
        "-v",
        "--version",
        action="version",
        version=f"shadelab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help="one of: " + ", ".join(SUBCOMMANDS),
    )
    return parser


def handle_root_command(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            getter = getattr(module, f"get_{name}_parser", None)
            if getter is None:
                log("info", f"help for '{name}' not available")
                continue
            getter().print_help()
        sys.exit(0)

    if args.command:
        log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    parser.print_help()


def main() -> None:
    """Main entry point for shadelab CLI"""
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_root_parser()
    args = parser.parse_args()
    handle_root_command(args, parser)


if __name__ == "__main__":
    main()
