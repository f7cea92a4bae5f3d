"""Tests for viewing conditions and the ZCAM transform."""

from __future__ import annotations

import pytest

from monetlab.core import config as c
from monetlab.core.color import Srgb
from monetlab.core.conversions import lab_to_xyz
from monetlab.core.zcam import ViewingConditions, Zcam, rgb_to_zcam, zcam_to_rgb_unclamped
from monetlab.logic.palette.viewing import build_viewing_conditions


class TestBuildViewingConditions:
    def test_derived_luminances(self) -> None:
        cond = build_viewing_conditions(200.0)
        _, mid_gray_y, _ = lab_to_xyz(50.0, 0.0, 0.0)

        assert cond.surround_factor == c.SURROUND_AVERAGE
        assert cond.adapting_luminance == pytest.approx(80.0)
        assert cond.background_luminance == pytest.approx(mid_gray_y * 2.0)
        assert cond.reference_white == pytest.approx((c.D65_X * 2.0, 200.0, c.D65_Z * 2.0))

    def test_white_luminance_floor(self) -> None:
        cond = build_viewing_conditions(0.01)
        assert cond.reference_white[1] == pytest.approx(c.WHITE_LUMINANCE_MIN)

    def test_hashable_for_caching(self) -> None:
        assert hash(build_viewing_conditions(300.0)) == hash(build_viewing_conditions(300.0))


class TestZcam:
    def test_white_and_black_lightness(self, cond: ViewingConditions) -> None:
        assert Srgb(255, 255, 255).to_zcam(cond).lightness == pytest.approx(100.0, abs=0.05)
        assert Srgb(0, 0, 0).to_zcam(cond).lightness == pytest.approx(0.0, abs=0.05)

    def test_lightness_orders_grays(self, cond: ViewingConditions) -> None:
        grays = [Srgb(v, v, v).to_zcam(cond).lightness for v in range(0, 256, 15)]
        assert all(a < b for a, b in zip(grays, grays[1:]))

    def test_blue_hue_region(self, cond: ViewingConditions) -> None:
        hue = Srgb(0, 0, 255).to_zcam(cond).hue
        assert 180.0 < hue < 320.0

    @pytest.mark.parametrize(
        "rgb", [(27, 110, 243), (255, 0, 0), (12, 200, 90), (128, 128, 128), (250, 240, 10)]
    )
    def test_round_trip(self, cond: ViewingConditions, rgb: tuple) -> None:
        back = zcam_to_rgb_unclamped(rgb_to_zcam(*rgb, cond), cond)
        assert back == pytest.approx(rgb, abs=1e-3)

    def test_out_of_gamut_is_reported_unclamped(self, cond: ViewingConditions) -> None:
        rgb = zcam_to_rgb_unclamped(Zcam(50.0, 200.0, 250.0), cond)
        assert min(rgb) < c.RGB_CLAMP_TOLERANCE_LOWER or max(rgb) > c.RGB_CLAMP_TOLERANCE_UPPER
