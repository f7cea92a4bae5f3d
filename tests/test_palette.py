"""Tests for the palette generator."""

from __future__ import annotations

import pytest

from monetlab.core import config as c
from monetlab.core.color import Srgb
from monetlab.core.luminance import parse_white_luminance_user
from monetlab.core.zcam import ViewingConditions, Zcam
from monetlab.logic.palette.engine import (
    Palette,
    generate_palette,
    lightness_window,
    transform_color,
)
from monetlab.logic.palette.targets import TargetCurveSet, TonalTarget, build_targets
from monetlab.logic.palette.viewing import build_viewing_conditions

SEEDS = [
    Srgb(0, 0, 255),
    Srgb(255, 0, 255),
    Srgb(230, 40, 40),
    Srgb(120, 200, 60),
    Srgb(250, 240, 10),
    Srgb(0, 200, 220),
]


def _all_groups(palette: Palette):
    return list(palette.accent) + list(palette.neutral)


class TestTransformColor:
    def test_takes_seed_hue_and_target_lightness(self) -> None:
        target = TonalTarget(500, 42.0, 30.0)
        reference = TonalTarget(500, 42.0, 30.0)
        out = transform_color(target, Zcam(70.0, 15.0, 123.0), reference)
        assert out == Zcam(42.0, 15.0, 123.0)

    def test_seed_chroma_is_capped_by_reference(self) -> None:
        target = TonalTarget(100, 90.0, 10.0)
        reference = TonalTarget(100, 90.0, 30.0)
        out = transform_color(target, Zcam(50.0, 80.0, 10.0), reference)
        assert out.chroma == pytest.approx(10.0)

    def test_gray_seed(self) -> None:
        target = TonalTarget(100, 90.0, 10.0)
        out = transform_color(target, Zcam(50.0, 0.0, 10.0), target)
        assert out.chroma == 0.0

    def test_zero_reference_chroma(self) -> None:
        target = TonalTarget(100, 90.0, 0.0)
        assert transform_color(target, Zcam(50.0, 5.0, 10.0), target).chroma == 0.0


class TestGeneratePalette:
    def test_structure(self, blue_seed: Srgb, cond: ViewingConditions,
                       targets: TargetCurveSet) -> None:
        palette = generate_palette(blue_seed, cond, targets)
        assert len(palette.accent) == c.ACCENT_GROUP_COUNT
        assert len(palette.neutral) == c.NEUTRAL_GROUP_COUNT
        for group in _all_groups(palette):
            assert tuple(group) == tuple(c.LINEAR_LIGHTNESS_MAP)
            assert all(isinstance(color, Srgb) for color in group.values())

    def test_deterministic(self, blue_seed: Srgb, cond: ViewingConditions,
                           targets: TargetCurveSet) -> None:
        assert generate_palette(blue_seed, cond, targets) == generate_palette(blue_seed, cond, targets)

    def test_endpoints_are_white_and_black(self, blue_seed: Srgb, cond: ViewingConditions,
                                           targets: TargetCurveSet) -> None:
        palette = generate_palette(blue_seed, cond, targets)
        for group in _all_groups(palette):
            assert min(group[0]) >= 253
            assert max(group[1000]) <= 3

    def test_accent_follows_seed_hue(self, blue_seed: Srgb, cond: ViewingConditions,
                                     targets: TargetCurveSet) -> None:
        palette = generate_palette(blue_seed, cond, targets)
        seed_hue = blue_seed.to_zcam(cond).hue
        hue = palette.accent[0][500].to_zcam(cond).hue
        assert abs((hue - seed_hue + 180.0) % 360.0 - 180.0) < 10.0

    def test_accent3_is_hue_shifted(self, blue_seed: Srgb, cond: ViewingConditions,
                                    targets: TargetCurveSet) -> None:
        palette = generate_palette(blue_seed, cond, targets)
        a1 = palette.accent[0][500].to_zcam(cond).hue
        a3 = palette.accent[2][500].to_zcam(cond).hue
        diff = (a3 - a1) % 360.0
        assert 40.0 < diff < 80.0

    def test_neutrals_are_muted(self, blue_seed: Srgb, cond: ViewingConditions,
                                targets: TargetCurveSet) -> None:
        palette = generate_palette(blue_seed, cond, targets)
        accent = palette.accent[0][500].to_zcam(cond).chroma
        neutral = palette.neutral[0][500].to_zcam(cond).chroma
        assert neutral < accent / 4

    def test_zero_chroma_factor_gives_grays(self, blue_seed: Srgb, cond: ViewingConditions) -> None:
        """Same lightness per shade, no chroma anywhere."""
        colorful = generate_palette(blue_seed, cond, build_targets(1.0, False, cond))
        gray = generate_palette(blue_seed, cond, build_targets(0.0, False, cond), chroma_factor=0.0)

        for colorful_group, gray_group in zip(_all_groups(colorful), _all_groups(gray)):
            for shade, color in gray_group.items():
                assert max(color) - min(color) <= 1
                assert color.to_zcam(cond).chroma < 3.0
                assert color.to_zcam(cond).lightness == pytest.approx(
                    colorful_group[shade].to_zcam(cond).lightness, abs=1.0
                )

    def test_inaccurate_shades_stay_in_gamut(self, blue_seed: Srgb, cond: ViewingConditions,
                                             targets: TargetCurveSet) -> None:
        palette = generate_palette(blue_seed, cond, targets, accurate_shades=False)
        for group in _all_groups(palette):
            for color in group.values():
                assert all(0 <= v <= 255 for v in color)

    def test_unknown_family(self, blue_seed: Srgb, cond: ViewingConditions,
                            targets: TargetCurveSet) -> None:
        with pytest.raises(ValueError):
            generate_palette(blue_seed, cond, targets).groups("surface")


class TestShadeOrdering:
    """Every shade is strictly darker than the one before it, in both gamut modes."""

    @pytest.mark.parametrize("accurate", [True, False])
    @pytest.mark.parametrize("linear", [True, False])
    @pytest.mark.parametrize("slider", [0, 425, 1000])
    @pytest.mark.parametrize("seed", SEEDS)
    def test_all_shades_strictly_darker(self, seed: Srgb, slider: int, linear: bool,
                                        accurate: bool) -> None:
        cond = build_viewing_conditions(parse_white_luminance_user(slider))
        targets = build_targets(1.0, linear, cond)
        palette = generate_palette(seed, cond, targets, accurate_shades=accurate)

        for group in _all_groups(palette):
            colors = [group[shade] for shade in c.LINEAR_LIGHTNESS_MAP]
            lightness = [color.to_zcam(cond).lightness for color in colors]
            assert all(a > b for a, b in zip(lightness, lightness[1:]))
            assert len(set(colors)) == len(colors)

    def test_inaccurate_lightest_shade_stays_near_white(self, cond: ViewingConditions,
                                                        targets: TargetCurveSet) -> None:
        palette = generate_palette(Srgb(0, 0, 255), cond, targets, accurate_shades=False)
        for group in _all_groups(palette):
            assert group[0].to_zcam(cond).lightness == pytest.approx(100.0, abs=0.5)


class TestLightnessWindow:
    def test_window_stays_between_neighbours(self, targets: TargetCurveSet) -> None:
        curve = targets.accent1
        for position, target in enumerate(curve):
            low, high = lightness_window(curve, position)
            assert low <= target.lightness <= high
            if position > 0:
                assert high < curve[position - 1].lightness
            if position + 1 < len(curve):
                assert low > curve[position + 1].lightness

    def test_ends_do_not_extend_past_target(self, targets: TargetCurveSet) -> None:
        curve = targets.neutral1
        assert lightness_window(curve, 0)[1] == curve[0].lightness
        assert lightness_window(curve, len(curve) - 1)[0] == curve[-1].lightness
