#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/logic/palette/targets.py

"""
Target lightness/chroma curves for the five palette groups.

Lightness follows a fixed shade ladder, either used directly as ZCAM
lightness (linear mode) or read as CIELAB L* and converted under the
viewing conditions (perceptual mode). Chroma comes from the Pixel default
blue swatch and is split between groups by fixed ratios.
"""

from typing import Dict, NamedTuple, Tuple

from monetlab.core import config as c
from monetlab.core import conversions as conv
from monetlab.core.color import Srgb
from monetlab.core.zcam import ViewingConditions, xyz_to_zcam


class TonalTarget(NamedTuple):
    index: int
    lightness: float
    chroma: float


TargetCurve = Tuple[TonalTarget, ...]


class TargetCurveSet(NamedTuple):
    accent1: TargetCurve
    accent2: TargetCurve
    accent3: TargetCurve
    neutral1: TargetCurve
    neutral2: TargetCurve

    @property
    def accent(self) -> Tuple[TargetCurve, TargetCurve, TargetCurve]:
        return self.accent1, self.accent2, self.accent3

    @property
    def neutral(self) -> Tuple[TargetCurve, TargetCurve]:
        return self.neutral1, self.neutral2


def shade_indices() -> Tuple[int, ...]:
    return tuple(c.LINEAR_LIGHTNESS_MAP.keys())


def cielab_lightness(l_star: float, cond: ViewingConditions) -> float:
    """ZCAM lightness of the achromatic color with CIELAB lightness `l_star`."""
    scale = cond.reference_white[1] / c.XYZ_SCALING
    x, y, z = conv.lab_to_xyz(l_star, 0.0, 0.0)
    return xyz_to_zcam(x * scale, y * scale, z * scale, cond).lightness


def lightness_map(use_linear_lightness: bool, cond: ViewingConditions) -> Dict[int, float]:
    if use_linear_lightness:
        return dict(c.LINEAR_LIGHTNESS_MAP)

    return {
        shade: cielab_lightness(c.CIELAB_LIGHTNESS_OVERRIDES.get(shade, l_star), cond)
        for shade, l_star in c.LINEAR_LIGHTNESS_MAP.items()
    }


def reference_chroma(cond: ViewingConditions) -> float:
    """Average ZCAM chroma of the reference accent swatch."""
    chromas = [Srgb.from_int(v).to_zcam(cond).chroma for v in c.REF_ACCENT1_COLORS]
    return sum(chromas) / len(chromas)


def _curve(chroma: float, lightness: Dict[int, float]) -> TargetCurve:
    return tuple(TonalTarget(shade, light, chroma) for shade, light in lightness.items())


def build_targets(chroma_factor: float, use_linear_lightness: bool,
                  cond: ViewingConditions) -> TargetCurveSet:
    lightness = lightness_map(use_linear_lightness, cond)
    chroma_factor = max(float(chroma_factor), 0.0)

    # Temporarily boost the chroma to get closer to the Pixel default
    a1_chroma = reference_chroma(cond) * c.ACCENT1_REF_CHROMA_FACTOR
    a2_chroma = a1_chroma / c.ACCENT2_CHROMA_DIVISOR
    a3_chroma = a2_chroma * c.ACCENT3_CHROMA_MULT
    n1_chroma = a1_chroma / c.NEUTRAL1_CHROMA_DIVISOR
    n2_chroma = n1_chroma * c.NEUTRAL2_CHROMA_MULT

    return TargetCurveSet(
        accent1=_curve(a1_chroma * chroma_factor, lightness),
        accent2=_curve(a2_chroma * chroma_factor, lightness),
        accent3=_curve(a3_chroma * chroma_factor, lightness),
        neutral1=_curve(n1_chroma * chroma_factor, lightness),
        neutral2=_curve(n2_chroma * chroma_factor, lightness),
    )
