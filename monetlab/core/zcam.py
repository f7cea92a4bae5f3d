#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/core/zcam.py

"""
ZCAM color appearance model (Safdar et al. 2021), forward and inverse.

Only the pieces needed for palette generation are implemented: absolute
XYZ (D65-adapted, cd/m^2) <-> Izazbz <-> ZCAM lightness/chroma/hue. No
chromatic adaptation is performed; the reference white is always D65.
"""

import functools
import math
from typing import NamedTuple, Tuple

from . import config as c
from . import conversions as conv


class ViewingConditions(NamedTuple):
    """Surround and luminance levels the appearance transform is evaluated under."""
    surround_factor: float
    adapting_luminance: float
    background_luminance: float
    reference_white: Tuple[float, float, float]


class Zcam(NamedTuple):
    lightness: float
    chroma: float
    hue: float


class _Derived(NamedTuple):
    fb: float
    fl: float
    iz_white: float
    qz_white: float


def _invert_3x3(m) -> Tuple[Tuple[float, float, float], ...]:
    """Invert a 3x3 matrix given as row tuples."""
    (a, b, cc), (d, e, f), (g, h, i) = m
    det = a * (e * i - f * h) - b * (d * i - f * g) + cc * (d * h - e * g)
    return (
        ((e * i - f * h) / det, (cc * h - b * i) / det, (b * f - cc * e) / det),
        ((f * g - d * i) / det, (a * i - cc * g) / det, (cc * d - a * f) / det),
        ((d * h - e * g) / det, (b * g - a * h) / det, (a * e - b * d) / det),
    )


M_LMS_XYZ = _invert_3x3(c.M_XYZ_LMS)


def _dot(row, v) -> float:
    return row[0] * v[0] + row[1] * v[1] + row[2] * v[2]


def _pq_encode(x: float) -> float:
    v = (max(x, 0.0) / c.PQ_PEAK) ** c.PQ_N
    return ((c.PQ_C1 + c.PQ_C2 * v) / (c.UNIT + c.PQ_C3 * v)) ** c.PQ_P


def _pq_decode(x: float) -> float:
    vp = max(x, 0.0) ** (c.UNIT / c.PQ_P)
    ratio = (c.PQ_C1 - vp) / (c.PQ_C3 * vp - c.PQ_C2)
    return c.PQ_PEAK * max(ratio, 0.0) ** (c.UNIT / c.PQ_N)


def xyz_to_izazbz(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert absolute XYZ to Izazbz."""
    xp = c.IZ_B * x - (c.IZ_B - c.UNIT) * z
    yp = c.IZ_G * y - (c.IZ_G - c.UNIT) * x
    lms = [_dot(row, (xp, yp, z)) for row in c.M_XYZ_LMS]
    lp, mp, sp = (_pq_encode(v) for v in lms)

    iz = mp - c.IZ_EPSILON
    az = _dot(c.M_LMS_AZ, (lp, mp, sp))
    bz = _dot(c.M_LMS_BZ, (lp, mp, sp))
    return iz, az, bz


def izazbz_to_xyz(iz: float, az: float, bz: float) -> Tuple[float, float, float]:
    """Convert Izazbz back to absolute XYZ."""
    mp = iz + c.IZ_EPSILON
    a1, a2, a3 = c.M_LMS_AZ
    b1, b2, b3 = c.M_LMS_BZ
    ra = az - a2 * mp
    rb = bz - b2 * mp
    det = a1 * b3 - a3 * b1
    lp = (ra * b3 - a3 * rb) / det
    sp = (a1 * rb - b1 * ra) / det

    lms = (_pq_decode(lp), _pq_decode(mp), _pq_decode(sp))
    xp, yp, z = (_dot(row, lms) for row in M_LMS_XYZ)
    x = (xp + (c.IZ_B - c.UNIT) * z) / c.IZ_B
    y = (yp + (c.IZ_G - c.UNIT) * x) / c.IZ_G
    return x, y, z


def _iz_to_qz(iz: float, cond: ViewingConditions, fb: float, fl: float) -> float:
    fs = cond.surround_factor
    return (
        c.ZCAM_QZ_COEFF
        * max(iz, 0.0) ** (c.ZCAM_QZ_EXP * fs / fb ** c.ZCAM_FB_QZ_EXP)
        * fs ** c.ZCAM_FS_EXP
        * fb ** 0.5
        * fl ** c.ZCAM_FL_EXP
    )


@functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)
def _derive(cond: ViewingConditions) -> _Derived:
    white_y = cond.reference_white[1]
    la = cond.adapting_luminance
    fb = math.sqrt(cond.background_luminance / white_y)
    fl = c.ZCAM_FL_COEFF * la ** (1.0 / 3.0) * (c.UNIT - math.exp(-c.ZCAM_FL_DECAY * la))
    iz_white, _, _ = xyz_to_izazbz(*cond.reference_white)
    qz_white = _iz_to_qz(iz_white, cond, fb, fl)
    return _Derived(fb, fl, iz_white, qz_white)


def _eccentricity(hue: float) -> float:
    return c.ZCAM_EZ_OFFSET + math.cos(math.radians(c.ZCAM_EZ_PHASE + hue))


def xyz_to_zcam(x: float, y: float, z: float, cond: ViewingConditions) -> Zcam:
    """Convert absolute XYZ to ZCAM lightness, chroma and hue."""
    d = _derive(cond)
    iz, az, bz = xyz_to_izazbz(x, y, z)

    hue = math.degrees(math.atan2(bz, az)) % c.HUE_MAX
    qz = _iz_to_qz(iz, cond, d.fb, d.fl)
    lightness = c.ZCAM_SCALE * qz / d.qz_white

    mz = (
        c.ZCAM_SCALE
        * (az * az + bz * bz) ** c.ZCAM_MZ_EXP
        * _eccentricity(hue) ** c.ZCAM_EZ_EXP
        * d.fl ** c.ZCAM_FL_EXP
        / (d.fb ** c.ZCAM_FB_MZ_EXP * d.iz_white ** c.ZCAM_IZW_EXP)
    )
    chroma = c.ZCAM_SCALE * mz / d.qz_white
    return Zcam(lightness, chroma, hue)


def zcam_to_xyz(color: Zcam, cond: ViewingConditions) -> Tuple[float, float, float]:
    """Convert ZCAM lightness, chroma and hue back to absolute XYZ."""
    d = _derive(cond)
    fs = cond.surround_factor

    qz = max(color.lightness, 0.0) * d.qz_white / c.ZCAM_SCALE
    qz_denom = c.ZCAM_QZ_COEFF * fs ** c.ZCAM_FS_EXP * d.fb ** 0.5 * d.fl ** c.ZCAM_FL_EXP
    iz = (qz / qz_denom) ** (d.fb ** c.ZCAM_FB_QZ_EXP / (c.ZCAM_QZ_EXP * fs))

    mz = max(color.chroma, 0.0) * d.qz_white / c.ZCAM_SCALE
    hue = color.hue % c.HUE_MAX
    mag = (
        mz * d.fb ** c.ZCAM_FB_MZ_EXP * d.iz_white ** c.ZCAM_IZW_EXP
        / (c.ZCAM_SCALE * _eccentricity(hue) ** c.ZCAM_EZ_EXP * d.fl ** c.ZCAM_FL_EXP)
    )
    radius = mag ** (c.UNIT / (c.DIV_2 * c.ZCAM_MZ_EXP))
    az = radius * math.cos(math.radians(hue))
    bz = radius * math.sin(math.radians(hue))
    return izazbz_to_xyz(iz, az, bz)


def rgb_to_zcam(r: float, g: float, b: float, cond: ViewingConditions) -> Zcam:
    """Convert an sRGB color to ZCAM under the given viewing conditions."""
    scale = cond.reference_white[1] / c.XYZ_SCALING
    x, y, z = conv.rgb_to_xyz(r, g, b)
    return xyz_to_zcam(x * scale, y * scale, z * scale, cond)


def zcam_to_rgb_unclamped(color: Zcam, cond: ViewingConditions) -> Tuple[float, float, float]:
    """Convert ZCAM to gamma-encoded sRGB (0..255) without gamut handling."""
    scale = c.XYZ_SCALING / cond.reference_white[1]
    x, y, z = zcam_to_xyz(color, cond)
    return conv.xyz_to_rgb_unclamped(x * scale, y * scale, z * scale)
