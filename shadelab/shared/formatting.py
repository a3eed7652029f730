#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/shared/formatting.py

import json

from shadelab.core.types import FilterConfig, ThemeMode


def format_rule_json(rule: dict, pretty: bool = True) -> str:
    if pretty:
        return json.dumps(rule, indent=4, ensure_ascii=False)
    return json.dumps(rule, ensure_ascii=False)


def format_filter_config(config: FilterConfig) -> str:
    mode = ThemeMode(config.mode).name.lower()
    return (
        f"mode={mode} brightness={config.brightness}% contrast={config.contrast}% "
        f"grayscale={config.grayscale}% sepia={config.sepia}%"
    )
