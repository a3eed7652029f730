#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/shared/logger.py

import sys
import argparse
from typing import Optional

from shadelab.core import config as c


def log(level: str, message: str, source: Optional[str] = None) -> None:
    """
    Print a tagged, color-coded message. info/success go to stdout,
    everything else to stderr. `source` names the file or pattern the
    message is about and is printed before it.
    """
    level = str(level).lower()
    stream = sys.stdout if level in ["info", "success"] else sys.stderr
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    if source:
        message = f"{c.BOLD_WHITE}{source}{c.RESET}{msg_color}: {message}"
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)


class ShadelabArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """Log the usage error with a pointer to -h, then exit with code 2."""
        log('error', message)
        log('info', f"use '{self.prog} -h' to see all options")
        sys.exit(2)
