#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/subcommands/palette.py

import argparse
import sys

from monetlab.core import config as c
from monetlab.logic.palette.resolver import resolve_palette_input
from monetlab.shared.logger import MonetlabArgumentParser, set_verbose
from monetlab.shared.truecolor import ensure_truecolor
from .generate import add_seed_arguments, add_theme_arguments


def get_palette_parser() -> argparse.ArgumentParser:
    """Create argument parser for palette command."""
    parser = MonetlabArgumentParser(
        prog="monetlab palette",
        description="monetlab palette: show the accent and neutral shade groups with ZCAM values",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    add_seed_arguments(parser)
    add_theme_arguments(parser)
    parser.add_argument(
        "-f",
        "--family",
        default="all",
        choices=["all", *c.FAMILIES],
        help="palette family to show (default: all)",
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="log every gamut transform",
    )
    return parser


def main() -> None:
    """Main entry point for palette command."""
    parser = get_palette_parser()
    args = parser.parse_args(sys.argv[1:])
    set_verbose(args.verbose)
    ensure_truecolor()
    resolve_palette_input(args)


if __name__ == "__main__":
    main()
