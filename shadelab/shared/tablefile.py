#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/shared/tablefile.py

import sys
from typing import List

from shadelab.logic.rules.dsl import parse_rule_table
from shadelab.logic.rules.tables import RuleTableSpec
from .logger import log


def read_text_or_exit(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        log("error", f"cannot read file: {e.strerror or e}", source=path)
        sys.exit(2)


def load_rule_table(path: str, table_spec: RuleTableSpec) -> List[dict]:
    """Read a rule-table file and parse it with the given table spec."""
    return parse_rule_table(read_text_or_exit(path), table_spec)
