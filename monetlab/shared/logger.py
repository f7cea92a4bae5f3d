#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/shared/logger.py

import sys
import argparse

from monetlab.core import config as c

_verbose = False


def set_verbose(enabled: bool) -> None:
    """Toggle emission of 'debug' messages."""
    global _verbose
    _verbose = bool(enabled)


def is_verbose() -> bool:
    return _verbose


def log(level: str, message: str) -> None:
    level = str(level).lower()
    if level == "debug" and not _verbose:
        return
    stream = sys.stdout if level in ["info", "success"] else sys.stderr
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)


class MonetlabArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Overrides the default error method to use our color-coded logger,
        then exits the program with the standard CLI error code 2.
        """
        log('error', message)
        sys.exit(2)
