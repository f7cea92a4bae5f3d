#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/core/luminance.py

import math

from . import config as c
from monetlab.shared.clamping import _clamp_range


def parse_white_luminance_user(user_value: int) -> float:
    """Decode the white luminance slider into cd/m^2.

    The slider is linear while the physical range is logarithmic and inverted:
    0 is the brightest white (10000) and WHITE_LUMINANCE_USER_MAX the dimmest (1).
    Out-of-range slider values are clamped.
    """
    user_value = _clamp_range(float(user_value), 0.0, float(c.WHITE_LUMINANCE_USER_MAX))
    user_src = user_value / c.WHITE_LUMINANCE_USER_MAX
    user_inv = c.UNIT - user_src
    luminance = 10.0 ** (user_inv * math.log10(c.WHITE_LUMINANCE_MAX))
    return max(luminance, c.WHITE_LUMINANCE_MIN)


def white_luminance_to_user(luminance: float) -> int:
    """Encode cd/m^2 back into the nearest slider position."""
    luminance = _clamp_range(float(luminance), c.WHITE_LUMINANCE_MIN, c.WHITE_LUMINANCE_MAX)
    user_inv = math.log10(luminance) / math.log10(c.WHITE_LUMINANCE_MAX)
    return int(round((c.UNIT - user_inv) * c.WHITE_LUMINANCE_USER_MAX))

