#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/subcommands/generate.py

import argparse
import sys

from monetlab.core import config as c
from monetlab.logic.tokens.resolver import resolve_generate_input
from monetlab.shared.logger import MonetlabArgumentParser, set_verbose
from monetlab.shared.sanitizer import INPUT_HANDLERS
from monetlab.shared.truecolor import ensure_truecolor


def add_seed_arguments(parser: argparse.ArgumentParser) -> None:
    """Seed color input shared by the generate and palette commands."""
    seed_group = parser.add_mutually_exclusive_group()
    seed_group.add_argument(
        "-H",
        "--hex",
        type=INPUT_HANDLERS["hex"],
        help="seed color as 6-digit hex code without # sign",
    )
    seed_group.add_argument(
        "-di",
        "--decimal-index",
        dest="decimal_index",
        type=INPUT_HANDLERS["decimal_index"],
        help=f"seed color as decimal index (0 to {c.MAX_DEC})",
    )
    seed_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="use a random seed color",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )


def add_theme_arguments(parser: argparse.ArgumentParser) -> None:
    """Tunables mirroring the stored monet_engine_* settings."""
    theme_group = parser.add_argument_group("theme settings")
    theme_group.add_argument(
        "--settings",
        metavar="FILE",
        help="JSON file with monet_engine_* settings (flags override it)",
    )
    theme_group.add_argument(
        "-a",
        "--accent",
        type=INPUT_HANDLERS["hex"],
        help="explicit accent color, takes precedence over the seed",
    )
    theme_group.add_argument(
        "-cf",
        "--chroma-factor",
        type=INPUT_HANDLERS["chroma_factor"],
        default=None,
        help=f"chroma scale in percent (default: {c.CHROMA_FACTOR_DEFAULT:g})",
    )
    theme_group.add_argument(
        "-wl",
        "--white-luminance",
        type=INPUT_HANDLERS["white_luminance_user"],
        default=None,
        help=f"white luminance slider 0-{c.WHITE_LUMINANCE_USER_MAX}, higher is dimmer "
             f"(default: {c.WHITE_LUMINANCE_USER_DEFAULT})",
    )
    theme_group.add_argument(
        "--linear-lightness",
        action="store_const",
        const=1,
        default=None,
        help="use linear instead of CIELAB lightness steps",
    )
    theme_group.add_argument(
        "--inaccurate-shades",
        dest="accurate_shades",
        action="store_const",
        const=0,
        default=None,
        help="favor chroma over exact lightness when out of gamut",
    )
    theme_group.add_argument(
        "--richer-colors",
        action="store_const",
        const=1,
        default=None,
        help="alias legacy accent tokens to richer shades",
    )
    theme_group.add_argument(
        "--no-tint-surface",
        dest="tint_surface",
        action="store_const",
        const=0,
        default=None,
        help="keep neutral surfaces fully gray",
    )


def get_generate_parser() -> argparse.ArgumentParser:
    """Create argument parser for generate command."""
    parser = MonetlabArgumentParser(
        prog="monetlab generate",
        description="monetlab generate: derive the full set of color tokens from a seed color",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    add_seed_arguments(parser)
    add_theme_arguments(parser)
    parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="print tokens as JSON grouped by family",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="write tokens to a JSON file instead of printing",
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="log every generated color",
    )
    return parser


def main() -> None:
    """Main entry point for generate command."""
    parser = get_generate_parser()
    args = parser.parse_args(sys.argv[1:])
    set_verbose(args.verbose)
    ensure_truecolor()
    resolve_generate_input(args)


if __name__ == "__main__":
    main()
