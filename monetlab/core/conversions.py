#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/core/conversions.py

import math
from typing import Tuple

from . import config as c
from monetlab.shared.clamping import _clamp01
from monetlab.shared.sanitizer import normalize_hex


def hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    """Convert hex string to RGB tuple."""
    h = normalize_hex(hex_code)
    if not h:
        return (0, 0, 0)
    try:
        return tuple(int(h[i : i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return (0, 0, 0)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to hex string."""
    r_clamped = max(0, min(int(c.RGB_MAX), int(round(r))))
    g_clamped = max(0, min(int(c.RGB_MAX), int(round(g))))
    b_clamped = max(0, min(int(c.RGB_MAX), int(round(b))))
    return f"{r_clamped:02X}{g_clamped:02X}{b_clamped:02X}"


def int_to_rgb(value: int) -> Tuple[int, int, int]:
    """Split a packed (A)RGB integer into 8-bit channels, ignoring alpha."""
    value = int(value) & c.MAX_DEC
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def rgb_to_argb(r: int, g: int, b: int) -> int:
    """Pack 8-bit channels into an opaque ARGB integer."""
    return c.ALPHA_OPAQUE | (int(r) << 16) | (int(g) << 8) | int(b)


def _srgb_to_linear(color_comp: float) -> float:
    """Linearize sRGB component."""
    c_norm = _clamp01(color_comp / c.RGB_MAX)
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def _linear_to_srgb(l_val: float) -> float:
    """Apply sRGB gamma to linear component."""
    l_val = max(l_val, 0.0)
    if l_val <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * l_val
    return c.SRGB_DIVISOR * (l_val ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def rgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB to CIE XYZ."""
    r_lin = _srgb_to_linear(r)
    g_lin = _srgb_to_linear(g)
    b_lin = _srgb_to_linear(b)
    x = r_lin * c.M_SRGB_XYZ_X[0] + g_lin * c.M_SRGB_XYZ_X[1] + b_lin * c.M_SRGB_XYZ_X[2]
    y = r_lin * c.M_SRGB_XYZ_Y[0] + g_lin * c.M_SRGB_XYZ_Y[1] + b_lin * c.M_SRGB_XYZ_Y[2]
    z = r_lin * c.M_SRGB_XYZ_Z[0] + g_lin * c.M_SRGB_XYZ_Z[1] + b_lin * c.M_SRGB_XYZ_Z[2]
    return x * c.XYZ_SCALING, y * c.XYZ_SCALING, z * c.XYZ_SCALING


def xyz_to_rgb_unclamped(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert CIE XYZ to gamma-encoded RGB without gamut clamping.

    Channels outside [0, 255] signal an out-of-gamut color. Negative linear
    values are kept negative so callers can tell how far outside they are.
    """
    x_n, y_n, z_n = x / c.XYZ_SCALING, y / c.XYZ_SCALING, z / c.XYZ_SCALING
    r_lin = x_n * c.M_XYZ_SRGB_R[0] + y_n * c.M_XYZ_SRGB_R[1] + z_n * c.M_XYZ_SRGB_R[2]
    g_lin = x_n * c.M_XYZ_SRGB_G[0] + y_n * c.M_XYZ_SRGB_G[1] + z_n * c.M_XYZ_SRGB_G[2]
    b_lin = x_n * c.M_XYZ_SRGB_B[0] + y_n * c.M_XYZ_SRGB_B[1] + z_n * c.M_XYZ_SRGB_B[2]
    return tuple(
        math.copysign(_linear_to_srgb(abs(v)), v) * c.RGB_MAX
        for v in (r_lin, g_lin, b_lin)
    )


def _xyz_f_inv(t: float) -> float:
    """Helper function for LAB to XYZ."""
    return t**3 if t > c.LAB_INV_THR else (t - c.LAB_OFFSET) / c.LAB_K


def lab_to_xyz(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert LAB to CIE XYZ."""
    y_r = (L + c.LAB_L_SUB) / c.LAB_L_MULT
    x_r = a / c.LAB_A_MULT + y_r
    z_r = y_r - b / c.LAB_B_MULT
    x = _xyz_f_inv(x_r) * c.D65_X
    y = _xyz_f_inv(y_r) * c.D65_Y
    z = _xyz_f_inv(z_r) * c.D65_Z
    return x, y, z
