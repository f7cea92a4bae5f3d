#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/logic/palette/viewing.py

from monetlab.core import config as c
from monetlab.core import conversions as conv
from monetlab.core.zcam import ViewingConditions


def build_viewing_conditions(white_luminance: float) -> ViewingConditions:
    """Viewing conditions for a display whose white is `white_luminance` cd/m^2."""
    white_luminance = max(float(white_luminance), c.WHITE_LUMINANCE_MIN)
    scale = white_luminance / c.XYZ_SCALING

    # Gray world: background is L* 50 gray
    _, mid_gray_y, _ = conv.lab_to_xyz(c.LAB_MID_GRAY_L, 0.0, 0.0)

    return ViewingConditions(
        surround_factor=c.SURROUND_AVERAGE,
        # sRGB
        adapting_luminance=c.ADAPTING_LUMINANCE_RATIO * white_luminance,
        background_luminance=mid_gray_y * scale,
        reference_white=(c.D65_X * scale, c.D65_Y * scale, c.D65_Z * scale),
    )
