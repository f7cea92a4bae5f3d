#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/core/params.py

from typing import NamedTuple

from . import config as c
from .color import Srgb
from .luminance import parse_white_luminance_user


class ThemeParameters(NamedTuple):
    """Snapshot of every tunable used by one generation pass."""
    seed_color: Srgb = Srgb.from_int(c.DEFAULT_SEED_COLOR)
    chroma_factor: float = c.CHROMA_FACTOR_DEFAULT / c.PERCENT_TO_FACTOR
    accurate_shades: bool = True
    white_luminance: float = parse_white_luminance_user(c.WHITE_LUMINANCE_USER_DEFAULT)
    linear_lightness: bool = False
    richer_colors: bool = False
    tint_surface: bool = True
