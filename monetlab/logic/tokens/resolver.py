#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/logic/tokens/resolver.py

import argparse
import random
import sys
from typing import Any, Dict, Optional

from monetlab.core import config as c
from monetlab.core.color import Srgb
from monetlab.logic.theme.controller import ThemeController
from monetlab.logic.theme.sources import (
    JsonParameterSource,
    JsonTokenSink,
    MemoryParameterSource,
    MemoryTokenSink,
    StaticSeedSource,
)
from monetlab.shared.logger import log
from .renderer import render_tokens, render_tokens_json


def settings_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """Map CLI flags onto stored setting keys; unset flags are left out."""
    values: Dict[str, Any] = {}
    if getattr(args, "accent", None):
        values[c.PREF_COLOR_ACCENT] = f"#{args.accent}"
    if getattr(args, "chroma_factor", None) is not None:
        values[c.PREF_CHROMA_FACTOR] = args.chroma_factor
    if getattr(args, "white_luminance", None) is not None:
        values[c.PREF_WHITE_LUMINANCE] = args.white_luminance
    if getattr(args, "linear_lightness", None) is not None:
        values[c.PREF_LINEAR_LIGHTNESS] = args.linear_lightness
    if getattr(args, "accurate_shades", None) is not None:
        values[c.PREF_ACCURATE_SHADES] = args.accurate_shades
    if getattr(args, "richer_colors", None) is not None:
        values[c.PREF_RICHER_COLORS] = args.richer_colors
    if getattr(args, "tint_surface", None) is not None:
        values[c.PREF_TINT_SURFACE] = args.tint_surface
    return values


def load_settings(args: argparse.Namespace) -> MemoryParameterSource:
    path = getattr(args, "settings", None)
    if path:
        try:
            source = JsonParameterSource(path)
        except ValueError as e:
            log("error", str(e))
            sys.exit(2)
    else:
        source = MemoryParameterSource()
    source.update(settings_from_args(args))
    return source


def resolve_seed_input(args: argparse.Namespace) -> Optional[Srgb]:
    """Seed from -H / -di / -r; None leaves the choice to the stored settings."""
    if getattr(args, "seed", None) is not None:
        random.seed(args.seed)
    if getattr(args, "random", False):
        return Srgb.from_int(random.randint(0, c.MAX_DEC))
    if getattr(args, "hex", None):
        return Srgb.from_hex(args.hex)
    if getattr(args, "decimal_index", None):
        return Srgb.from_hex(args.decimal_index)
    return None


def resolve_generate_input(args: argparse.Namespace) -> None:
    """Run one theme pass from CLI input and render or write the tokens."""
    settings = load_settings(args)
    seeds = StaticSeedSource(resolve_seed_input(args))
    sink = JsonTokenSink(args.output) if getattr(args, "output", None) else MemoryTokenSink()

    controller = ThemeController(settings, seeds, sink, background=False)
    controller.start()
    params = controller.params

    if getattr(args, "output", None):
        log("success", f"wrote {len(controller.last_tokens)} tokens to {args.output}")
        return

    overlays = controller.last_overlays
    if args.json:
        render_tokens_json(overlays)
    else:
        log("info", f"seed #{params.seed_color.to_hex()}")
        render_tokens(overlays)
