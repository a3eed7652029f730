#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/subcommands/resolve.py

import argparse
import sys

from shadelab.core.errors import MalformedRuleTableError
from shadelab.logic.rules.dsl import format_rule_table
from shadelab.logic.rules.resolver import resolve_rule
from shadelab.logic.rules.tables import TABLE_SPECS
from shadelab.logic.rules.url import filter_valid_patterns
from shadelab.shared.formatting import format_rule_json
from shadelab.shared.logger import log, ShadelabArgumentParser
from shadelab.shared.sanitizer import INPUT_HANDLERS
from shadelab.shared.tablefile import load_rule_table


def handle_resolve_command(args: argparse.Namespace) -> None:
    table_spec = TABLE_SPECS[args.table]
    rules = load_rule_table(args.file, table_spec)
    for rule in rules[1:]:
        rule["url"] = filter_valid_patterns(rule["url"], source=args.file)

    try:
        result = resolve_rule(table_spec, rules, args.url, args.frame_url, strict=True)
    except MalformedRuleTableError as e:
        log("error", str(e), source=args.file)
        sys.exit(2)

    if args.json:
        print(format_rule_json(result))
    else:
        print(format_rule_table([result], table_spec), end="")


def get_resolve_parser() -> argparse.ArgumentParser:
    parser = ShadelabArgumentParser(
        prog="shadelab resolve",
        description="shadelab resolve: merge the rules of a table that apply to a url",
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
        "-u",
        "--url",
        required=True,
        type=INPUT_HANDLERS["url"],
        help="url of the page",
    )
    parser.add_argument(
        "--frame-url",
        type=INPUT_HANDLERS["url"],
        default=None,
        help="url of the frame, matched instead of the page url",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the merged rule as json",
    )
    return parser


def main() -> None:
    parser = get_resolve_parser()
    args = parser.parse_args(sys.argv[1:])
    handle_resolve_command(args)


if __name__ == "__main__":
    main()
