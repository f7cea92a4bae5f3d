#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/logic/theme/resolver.py

from typing import Optional

from monetlab.core import config as c
from monetlab.core.color import Srgb
from monetlab.core.luminance import parse_white_luminance_user
from monetlab.core.params import ThemeParameters
from .sources import ParameterSource


def resolve_color_accent(settings: ParameterSource) -> int:
    """Explicit accent wins; otherwise the legacy override if enabled; 0 means none."""
    color_accent = settings.get_int(c.PREF_COLOR_ACCENT, 0)
    # If monet_engine_color_accent == 0, use legacy color override (if enabled)
    if color_accent == 0 and settings.get_int(c.PREF_CUSTOM_COLOR, 0) == 1:
        color_accent = settings.get_int(c.PREF_COLOR_OVERRIDE, 0)
    return color_accent


def resolve_seed(settings: ParameterSource, wallpaper_seed: Optional[Srgb]) -> Srgb:
    color_accent = resolve_color_accent(settings)
    if color_accent != 0:
        return Srgb.from_int(color_accent)
    if wallpaper_seed is not None:
        return wallpaper_seed
    return Srgb.from_int(c.DEFAULT_SEED_COLOR)


def resolve_parameters(settings: ParameterSource, wallpaper_seed: Optional[Srgb] = None) -> ThemeParameters:
    """Read every setting once and build an immutable parameter snapshot."""
    chroma_percent = settings.get_float(c.PREF_CHROMA_FACTOR, c.CHROMA_FACTOR_DEFAULT)
    return ThemeParameters(
        seed_color=resolve_seed(settings, wallpaper_seed),
        chroma_factor=max(chroma_percent, 0.0) / c.PERCENT_TO_FACTOR,
        accurate_shades=settings.get_int(c.PREF_ACCURATE_SHADES, 1) == 1,
        white_luminance=parse_white_luminance_user(
            settings.get_int(c.PREF_WHITE_LUMINANCE, c.WHITE_LUMINANCE_USER_DEFAULT)
        ),
        linear_lightness=settings.get_int(c.PREF_LINEAR_LIGHTNESS, 0) != 0,
        richer_colors=settings.get_int(c.PREF_RICHER_COLORS, 0) != 0,
        tint_surface=settings.get_int(c.PREF_TINT_SURFACE, 1) == 1,
    )
