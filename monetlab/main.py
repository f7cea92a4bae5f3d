#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/main.py

import argparse
import sys

from monetlab import __version__
from monetlab.subcommands.command_registry import SUBCOMMANDS
from monetlab.shared.logger import MonetlabArgumentParser
from monetlab.shared.truecolor import ensure_truecolor


def get_main_parser() -> argparse.ArgumentParser:
    """Create the top-level parser; the real work happens in subcommands."""
    parser = MonetlabArgumentParser(
        prog="monetlab",
        description="monetlab: generate tonal theme palettes and color tokens from a seed color",
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
        version=f"monetlab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=sorted(SUBCOMMANDS),
        help="subcommand to run, see 'monetlab <command> -h'",
    )
    return parser


def main() -> None:
    """Main entry point for monetlab CLI"""
    # Subcommand Routing (Global behavior)
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            ensure_truecolor()
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_main_parser()
    parser.parse_args()
    parser.print_help()


if __name__ == "__main__":
    main()
