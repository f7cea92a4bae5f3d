#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/core/color.py

from typing import NamedTuple

from . import conversions as conv
from .zcam import ViewingConditions, Zcam, rgb_to_zcam


class Srgb(NamedTuple):
    """Immutable 8-bit sRGB color."""
    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, hex_code: str) -> "Srgb":
        return cls(*conv.hex_to_rgb(hex_code))

    @classmethod
    def from_int(cls, value: int) -> "Srgb":
        """Build from a packed RGB or ARGB integer (alpha ignored)."""
        return cls(*conv.int_to_rgb(value))

    @classmethod
    def from_floats(cls, r: float, g: float, b: float) -> "Srgb":
        return cls.from_hex(conv.rgb_to_hex(r, g, b))

    def to_hex(self) -> str:
        return conv.rgb_to_hex(self.r, self.g, self.b)

    def to_argb(self) -> int:
        return conv.rgb_to_argb(self.r, self.g, self.b)

    def to_zcam(self, cond: ViewingConditions) -> Zcam:
        return rgb_to_zcam(self.r, self.g, self.b, cond)

    def __str__(self) -> str:
        return f"#{self.to_hex()}"
