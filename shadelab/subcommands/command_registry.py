#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/subcommands/command_registry.py

from . import (
    theme,
    filter,
    match,
    resolve,
    fmt,
)

SUBCOMMANDS = {
    'theme': theme,
    'filter': filter,
    'match': match,
    'resolve': resolve,
    'format': fmt,
}
