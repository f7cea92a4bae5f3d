#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/logic/palette/gamut.py

import math
from typing import Optional, Tuple

from monetlab.core import config as c
from monetlab.core.color import Srgb
from monetlab.core.zcam import ViewingConditions, Zcam, zcam_to_rgb_unclamped
from monetlab.shared.clamping import _clamp_range


def _in_gamut(rgb: Tuple[float, float, float]) -> bool:
    return all(c.RGB_CLAMP_TOLERANCE_LOWER <= v <= c.RGB_CLAMP_TOLERANCE_UPPER for v in rgb)


def clip_preserve_lightness(color: Zcam, cond: ViewingConditions) -> Srgb:
    """Map a ZCAM color into sRGB by lowering chroma at fixed lightness and hue."""
    rgb = zcam_to_rgb_unclamped(color, cond)
    if _in_gamut(rgb) or color.chroma < c.EPS:
        return Srgb.from_floats(*rgb)

    low, high = 0.0, color.chroma
    best_rgb = zcam_to_rgb_unclamped(color._replace(chroma=0.0), cond)

    for _ in range(c.GAMUT_MAP_BINARY_SEARCH_ITERATIONS):
        mid_c = (low + high) / c.DIV_2
        trial = zcam_to_rgb_unclamped(color._replace(chroma=mid_c), cond)
        if _in_gamut(trial):
            best_rgb = trial
            low = mid_c
        else:
            high = mid_c

    return Srgb.from_floats(*best_rgb)


def _adaptive_anchor(lightness: float, chroma: float, alpha: float) -> float:
    """Achromatic lightness (normalized) to project toward, pulled to mid-gray."""
    ld = lightness - c.ADAPTIVE_CLIP_MID
    abs_ld = abs(ld)
    e1 = c.ADAPTIVE_CLIP_MID + abs_ld + alpha * chroma
    return c.ADAPTIVE_CLIP_MID * (
        c.UNIT + math.copysign(c.UNIT, ld) * (e1 - math.sqrt(e1 * e1 - c.DIV_2 * abs_ld))
    )


def clip_adaptive_towards_mid(color: Zcam, cond: ViewingConditions,
                              alpha: float = c.ADAPTIVE_CLIP_ALPHA,
                              lightness_range: Optional[Tuple[float, float]] = None) -> Srgb:
    """
    Map a ZCAM color into sRGB along the line toward an adaptive gray anchor.

    Chroma and lightness shrink together, so more of the requested chroma
    survives than with a pure chroma reduction; lightness may drift slightly.
    `lightness_range` (low, high) caps that drift: the anchor is clamped into
    it, so every point of the search line stays inside as well.
    """
    rgb = zcam_to_rgb_unclamped(color, cond)
    if _in_gamut(rgb) or color.chroma < c.EPS:
        return Srgb.from_floats(*rgb)

    light = color.lightness / c.ZCAM_SCALE
    chroma = color.chroma / c.ZCAM_SCALE
    anchor = _adaptive_anchor(light, chroma, alpha)
    if lightness_range is not None:
        low_l, high_l = lightness_range
        anchor = _clamp_range(anchor, low_l / c.ZCAM_SCALE, high_l / c.ZCAM_SCALE)

    def _at(t: float) -> Zcam:
        return Zcam(
            (anchor + t * (light - anchor)) * c.ZCAM_SCALE,
            t * chroma * c.ZCAM_SCALE,
            color.hue,
        )

    low, high = 0.0, c.UNIT
    best_rgb = zcam_to_rgb_unclamped(_at(0.0), cond)

    for _ in range(c.GAMUT_MAP_BINARY_SEARCH_ITERATIONS):
        mid_t = (low + high) / c.DIV_2
        trial = zcam_to_rgb_unclamped(_at(mid_t), cond)
        if _in_gamut(trial):
            best_rgb = trial
            low = mid_t
        else:
            high = mid_t

    return Srgb.from_floats(*best_rgb)
