#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/logic/palette/engine.py

from typing import Dict, NamedTuple, Tuple

from monetlab.core import config as c
from monetlab.core.color import Srgb
from monetlab.core.zcam import ViewingConditions, Zcam
from monetlab.shared.logger import log
from .gamut import clip_adaptive_towards_mid, clip_preserve_lightness
from .targets import TargetCurve, TargetCurveSet, TonalTarget

ColorGroup = Dict[int, Srgb]


class Palette(NamedTuple):
    accent: Tuple[ColorGroup, ColorGroup, ColorGroup]
    neutral: Tuple[ColorGroup, ColorGroup]

    def groups(self, family: str) -> Tuple[ColorGroup, ...]:
        if family == c.ACCENT:
            return self.accent
        if family == c.NEUTRAL:
            return self.neutral
        raise ValueError(f"unknown palette family '{family}'")


def transform_color(target: TonalTarget, seed: Zcam, reference: TonalTarget) -> Zcam:
    """Re-hue a target shade around the seed, scaling chroma by the seed's share of the reference."""
    # Allow colorless gray and low-chroma colors by clamping.
    # To preserve chroma ratios, scale chroma by the reference (A-1 / N-1).
    if reference.chroma == 0.0:
        scale_c = 0.0
    else:
        scale_c = min(max(seed.chroma, 0.0), reference.chroma) / reference.chroma

    return Zcam(
        lightness=target.lightness,
        chroma=target.chroma * scale_c,
        hue=seed.hue,
    )


def lightness_window(curve: TargetCurve, position: int) -> Tuple[float, float]:
    """Lightness range a shade may drift into without reaching its neighbours."""
    target = curve[position].lightness
    lighter = curve[position - 1].lightness if position > 0 else target
    darker = curve[position + 1].lightness if position + 1 < len(curve) else target
    return (
        target - c.ADAPTIVE_CLIP_MAX_DRIFT * (target - darker),
        target + c.ADAPTIVE_CLIP_MAX_DRIFT * (lighter - target),
    )


def _transform_group(curve: TargetCurve, seed: Zcam, reference: TargetCurve,
                     cond: ViewingConditions, accurate_shades: bool) -> ColorGroup:
    reference_by_shade = {t.index: t for t in reference}

    group: ColorGroup = {}
    for position, target in enumerate(curve):
        new_lch = transform_color(target, seed, reference_by_shade[target.index])
        if accurate_shades:
            group[target.index] = clip_preserve_lightness(new_lch, cond)
        else:
            group[target.index] = clip_adaptive_towards_mid(
                new_lch, cond, lightness_range=lightness_window(curve, position)
            )
        log("debug", f"Transform: [{target.index}] {tuple(round(v, 3) for v in target[1:])} "
                     f"=> {tuple(round(v, 3) for v in new_lch)} => {group[target.index]}")
    return group


def generate_palette(seed: Srgb, cond: ViewingConditions, targets: TargetCurveSet,
                     chroma_factor: float = 1.0, accurate_shades: bool = True) -> Palette:
    """
    Expand a seed color into three accent and two neutral shade groups.

    `chroma_factor` scales the seed's own chroma before it is compared with the
    reference curves; 0 yields a fully achromatic palette at unchanged lightness.
    """
    seed_lch = seed.to_zcam(cond)
    seed_lch = seed_lch._replace(chroma=seed_lch.chroma * max(float(chroma_factor), 0.0))
    log("debug", f"Seed color: {seed} => {tuple(round(v, 3) for v in seed_lch)}")

    shifted = seed_lch._replace(hue=(seed_lch.hue + c.ACCENT3_HUE_SHIFT_DEGREES) % c.HUE_MAX)

    accent = (
        # Main accent color. Generally, this is close to the seed color.
        _transform_group(targets.accent1, seed_lch, targets.accent1, cond, accurate_shades),
        # Secondary accent color. Darker shades of accent1.
        _transform_group(targets.accent2, seed_lch, targets.accent1, cond, accurate_shades),
        # Tertiary accent color. Seed color shifted to the next secondary color via hue offset.
        _transform_group(targets.accent3, shifted, targets.accent1, cond, accurate_shades),
    )
    neutral = (
        # Main background color. Tinted with the seed color.
        _transform_group(targets.neutral1, seed_lch, targets.neutral1, cond, accurate_shades),
        # Secondary background color. Slightly tinted with the seed color.
        _transform_group(targets.neutral2, seed_lch, targets.neutral1, cond, accurate_shades),
    )
    return Palette(accent, neutral)
