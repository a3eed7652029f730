#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/subcommands/fmt.py

import argparse
import sys

from shadelab.logic.rules.dsl import format_rule_table
from shadelab.logic.rules.tables import TABLE_SPECS
from shadelab.shared.logger import log, ShadelabArgumentParser
from shadelab.shared.sanitizer import INPUT_HANDLERS
from shadelab.shared.tablefile import load_rule_table


def handle_format_command(args: argparse.Namespace) -> None:
    table_spec = TABLE_SPECS[args.table]
    rules = load_rule_table(args.file, table_spec)
    text = format_rule_table(rules, table_spec)

    if not args.in_place:
        print(text, end="")
        return

    try:
        with open(args.file, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        log("error", f"cannot write file: {e.strerror or e}", source=args.file)
        sys.exit(2)
    log("success", f"formatted {len(rules)} rules in {args.file}")


def get_format_parser() -> argparse.ArgumentParser:
    parser = ShadelabArgumentParser(
        prog="shadelab format",
        description="shadelab format: normalize a rule table file",
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
        "-f",
        "--file",
        required=True,
        help="rule table file",
    )
    parser.add_argument(
        "-t",
        "--table",
        required=True,
        type=INPUT_HANDLERS["table"],
        help="table kind: inversion, dynamic, static",
    )
    parser.add_argument(
        "-i",
        "--in-place",
        action="store_true",
        help="rewrite the file instead of printing",
    )
    return parser


def main() -> None:
    parser = get_format_parser()
    args = parser.parse_args(sys.argv[1:])
    handle_format_command(args)


if __name__ == "__main__":
    main()
