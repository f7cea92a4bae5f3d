#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/logic/tokens/renderer.py

from typing import Dict

from monetlab.core import config as c
from monetlab.shared.formatting import tokens_to_json
from monetlab.shared.preview import print_color_block


def render_tokens(overlays: Dict[str, Dict[str, int]]) -> None:
    """Print every token as a color block, one section per family."""
    width = max((len(name) for tokens in overlays.values() for name in tokens), default=18) + 2
    for family, tokens in overlays.items():
        print()
        print(f"{c.MSG_BOLD_COLORS['info']}{family}{c.RESET} {c.MSG_BOLD_COLORS['dim']}({len(tokens)} tokens){c.RESET}")
        for name, value in tokens.items():
            print_color_block(f"{value & c.MAX_DEC:06X}", name, width=width)
    print()


def render_tokens_json(overlays: Dict[str, Dict[str, int]], pretty: bool = True) -> None:
    print(tokens_to_json(overlays, pretty=pretty))
