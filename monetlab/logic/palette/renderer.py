#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/logic/palette/renderer.py

from typing import Sequence

from monetlab.core import config as c
from monetlab.core.zcam import ViewingConditions
from monetlab.shared.formatting import format_zcam
from monetlab.shared.preview import print_color_block
from .engine import Palette


def render_palette(palette: Palette, cond: ViewingConditions,
                   families: Sequence[str] = c.FAMILIES) -> None:
    """Print each group's shades with their ZCAM coordinates."""
    for family in families:
        for index, group in enumerate(palette.groups(family)):
            print()
            print(f"{c.MSG_BOLD_COLORS['info']}{family}{index + 1}{c.RESET}")
            for shade, color in group.items():
                label = f"{c.MSG_BOLD_COLORS['dim']}{shade:>5}{c.RESET}"
                print_color_block(color.to_hex(), label, end="")
                print(f"  {format_zcam(*color.to_zcam(cond))}")
    print()
