#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/logic/tokens/engine.py

from typing import Dict, Optional, Sequence

from monetlab.core import config as c
from monetlab.core.color import Srgb
from monetlab.core.params import ThemeParameters
from monetlab.core.zcam import ViewingConditions
from monetlab.logic.palette.engine import ColorGroup, Palette, generate_palette
from monetlab.logic.palette.targets import TargetCurveSet, build_targets
from monetlab.logic.palette.viewing import build_viewing_conditions
from monetlab.shared.logger import log

TokenMap = Dict[str, int]


def group_token_name(family: str, ordinal: int, shade: int) -> str:
    """Token for one shade of a group; `ordinal` is 1-based."""
    return f"{family}{ordinal}-{shade}"


def family_chroma_factor(family: str, params: ThemeParameters) -> float:
    """Seed chroma scale for a family; untinted neutrals are fully desaturated."""
    if family == c.ACCENT:
        return params.chroma_factor
    if family == c.NEUTRAL:
        return params.chroma_factor if params.tint_surface else c.CHROMA_FACTOR_NONE
    raise ValueError(f"unknown palette family '{family}'")


def aliases_for(family: str, richer_colors: bool):
    try:
        return c.ALIAS_TABLE[(bool(richer_colors), family)]
    except KeyError:
        raise ValueError(f"unknown palette family '{family}'") from None


def map_tokens(family: str, groups: Sequence[ColorGroup], params: ThemeParameters) -> TokenMap:
    """Name every shade of `groups` and apply the family's alias table."""
    aliases = aliases_for(family, params.richer_colors)
    tokens: TokenMap = {}

    for index, group in enumerate(groups):
        for shade, color in group.items():
            log("debug", f"Color {family}{index + 1} {shade} = {color}")
            tokens[group_token_name(family, index + 1, shade)] = color.to_argb()

    for token, group_index, shade in aliases:
        if group_index >= len(groups):
            continue
        color = groups[group_index].get(shade)
        if color is not None:
            tokens[token] = color.to_argb()

    return tokens


def generate_family(family: str, seed: Srgb, params: ThemeParameters,
                    cond: Optional[ViewingConditions] = None,
                    targets: Optional[TargetCurveSet] = None) -> Palette:
    """Run the palette generator with the family's effective chroma factor."""
    if cond is None:
        cond = build_viewing_conditions(params.white_luminance)
    if targets is None:
        targets = build_targets(params.chroma_factor, params.linear_lightness, cond)

    return generate_palette(
        seed,
        cond,
        targets,
        chroma_factor=family_chroma_factor(family, params),
        accurate_shades=params.accurate_shades,
    )


def generate_overlays(seed: Srgb, params: ThemeParameters) -> Dict[str, TokenMap]:
    """Token maps per family ("accent", "neutral"), each installable on its own."""
    cond = build_viewing_conditions(params.white_luminance)
    targets = build_targets(params.chroma_factor, params.linear_lightness, cond)

    overlays: Dict[str, TokenMap] = {}
    for family in c.FAMILIES:
        palette = generate_family(family, seed, params, cond, targets)
        overlays[family] = map_tokens(family, palette.groups(family), params)
    return overlays


def merge_overlays(overlays: Dict[str, TokenMap]) -> TokenMap:
    tokens: TokenMap = {}
    for overlay in overlays.values():
        tokens.update(overlay)
    return tokens


def generate_tokens(seed: Srgb, params: ThemeParameters) -> TokenMap:
    """Full pipeline: seed + parameters -> every named color token."""
    return merge_overlays(generate_overlays(seed, params))
