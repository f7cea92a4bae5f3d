"""Tests for gamut reduction."""

from __future__ import annotations

import pytest

from monetlab.core.color import Srgb
from monetlab.core.zcam import ViewingConditions, Zcam
from monetlab.logic.palette.gamut import clip_adaptive_towards_mid, clip_preserve_lightness

VIVID = [
    Zcam(50.0, 200.0, 250.0),
    Zcam(85.0, 120.0, 30.0),
    Zcam(20.0, 90.0, 140.0),
    Zcam(97.0, 60.0, 300.0),
]


class TestPreserveLightness:
    def test_in_gamut_color_unchanged(self, cond: ViewingConditions) -> None:
        seed = Srgb(27, 110, 243)
        assert clip_preserve_lightness(seed.to_zcam(cond), cond) == seed

    @pytest.mark.parametrize("color", VIVID)
    def test_keeps_lightness_and_hue(self, cond: ViewingConditions, color: Zcam) -> None:
        out = clip_preserve_lightness(color, cond).to_zcam(cond)
        assert out.lightness == pytest.approx(color.lightness, abs=1.0)
        assert out.chroma < color.chroma

    def test_deterministic(self, cond: ViewingConditions) -> None:
        color = VIVID[0]
        assert clip_preserve_lightness(color, cond) == clip_preserve_lightness(color, cond)

    def test_more_chroma_never_lowers_result(self, cond: ViewingConditions) -> None:
        """Requests beyond the boundary all land on the same boundary color."""
        a = clip_preserve_lightness(Zcam(50.0, 150.0, 250.0), cond)
        b = clip_preserve_lightness(Zcam(50.0, 300.0, 250.0), cond)
        assert a.to_zcam(cond).chroma == pytest.approx(b.to_zcam(cond).chroma, abs=1.0)

    def test_achromatic_passthrough(self, cond: ViewingConditions) -> None:
        out = clip_preserve_lightness(Zcam(60.0, 0.0, 0.0), cond)
        assert max(out) - min(out) <= 1


class TestAdaptiveTowardsMid:
    def test_in_gamut_color_unchanged(self, cond: ViewingConditions) -> None:
        seed = Srgb(200, 80, 40)
        assert clip_adaptive_towards_mid(seed.to_zcam(cond), cond) == seed

    @pytest.mark.parametrize("color", VIVID)
    def test_returns_reduced_color(self, cond: ViewingConditions, color: Zcam) -> None:
        out = clip_adaptive_towards_mid(color, cond)
        assert isinstance(out, Srgb)
        assert out.to_zcam(cond).chroma < color.chroma

    def test_lightness_moves_towards_mid(self, cond: ViewingConditions) -> None:
        """A very light out-of-gamut color is pulled darker, never lighter."""
        color = Zcam(97.0, 60.0, 300.0)
        out = clip_adaptive_towards_mid(color, cond).to_zcam(cond)
        assert out.lightness <= color.lightness + 0.5

    def test_lightness_range_caps_drift(self, cond: ViewingConditions) -> None:
        color = Zcam(97.0, 60.0, 300.0)
        out = clip_adaptive_towards_mid(color, cond, lightness_range=(96.5, 97.5)).to_zcam(cond)
        assert 96.0 <= out.lightness <= 97.6
