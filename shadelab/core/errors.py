#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/core/errors.py


class ColorParseError(ValueError):
    """Raised when a color literal matches none of the supported notations."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"unable to parse color '{text}'")


class MalformedRuleTableError(ValueError):
    """Raised in strict mode when a rule table has no leading '*' rule."""


class FilterConfigError(ValueError):
    pass
