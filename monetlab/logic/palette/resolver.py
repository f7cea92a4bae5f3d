#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/logic/palette/resolver.py

import argparse

from monetlab.core import config as c
from monetlab.logic.theme.resolver import resolve_parameters
from monetlab.logic.tokens.engine import generate_family
from monetlab.logic.tokens.resolver import load_settings, resolve_seed_input
from monetlab.shared.logger import log
from .renderer import render_palette
from .targets import build_targets
from .viewing import build_viewing_conditions


def resolve_palette_input(args: argparse.Namespace) -> None:
    """Generate and print the shade groups of one family."""
    params = resolve_parameters(load_settings(args), resolve_seed_input(args))
    cond = build_viewing_conditions(params.white_luminance)
    targets = build_targets(params.chroma_factor, params.linear_lightness, cond)

    log("info", f"seed #{params.seed_color.to_hex()} at {params.white_luminance:.3f} cd/m^2")
    families = c.FAMILIES if args.family == "all" else (args.family,)
    for family in families:
        palette = generate_family(family, params.seed_color, params, cond, targets)
        render_palette(palette, cond, families=(family,))
