#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/subcommands/luminance.py

import argparse
import sys

from monetlab.core import config as c
from monetlab.core.luminance import parse_white_luminance_user, white_luminance_to_user
from monetlab.shared.logger import MonetlabArgumentParser
from monetlab.shared.sanitizer import INPUT_HANDLERS


def get_luminance_parser() -> argparse.ArgumentParser:
    """Create argument parser for luminance command."""
    parser = MonetlabArgumentParser(
        prog="monetlab luminance",
        description="monetlab luminance: convert between the white luminance slider and cd/m^2",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-u",
        "--user",
        type=INPUT_HANDLERS["white_luminance_user"],
        help=f"slider value 0-{c.WHITE_LUMINANCE_USER_MAX} to decode",
    )
    group.add_argument(
        "-n",
        "--nits",
        type=INPUT_HANDLERS["white_luminance"],
        help=f"luminance in cd/m^2 ({c.WHITE_LUMINANCE_MIN:g}-{c.WHITE_LUMINANCE_MAX:g}) to encode",
    )
    return parser


def handle_luminance_command(args: argparse.Namespace) -> None:
    def bold(t): return f"{c.BOLD_WHITE}{t}{c.RESET}"
    arrow = f"{c.MSG_BOLD_COLORS['info']}->{c.RESET}"

    if args.nits is not None:
        print(f"{args.nits:.3f} cd/m^2 {arrow} {bold(white_luminance_to_user(args.nits))}")
        return

    user = c.WHITE_LUMINANCE_USER_DEFAULT if args.user is None else args.user
    print(f"{user} {arrow} {bold(f'{parse_white_luminance_user(user):.3f} cd/m^2')}")


def main() -> None:
    """Main entry point for luminance command."""
    parser = get_luminance_parser()
    args = parser.parse_args(sys.argv[1:])
    handle_luminance_command(args)


if __name__ == "__main__":
    main()
