"""Tests for the theme controller that keeps a token sink in sync."""

from __future__ import annotations

import pytest

from monetlab.core import config as c
from monetlab.core.color import Srgb
from monetlab.logic.theme.controller import ThemeController
from monetlab.logic.theme.resolver import resolve_parameters
from monetlab.logic.theme.sources import MemoryParameterSource, MemoryTokenSink, StaticSeedSource
from monetlab.logic.tokens.engine import generate_tokens


def _expected(settings, seeds):
    params = resolve_parameters(settings, seeds.current_seed())
    return generate_tokens(params.seed_color, params)


@pytest.fixture
def wiring():
    settings = MemoryParameterSource()
    seeds = StaticSeedSource(Srgb(0, 0, 255))
    sink = MemoryTokenSink()
    return settings, seeds, sink


class TestSynchronousController:
    def test_start_publishes_once(self, wiring) -> None:
        settings, seeds, sink = wiring
        controller = ThemeController(settings, seeds, sink, background=False)
        controller.start()

        assert len(sink.history) == 1
        assert sink.current == _expected(settings, seeds)
        assert controller.params.seed_color == Srgb(0, 0, 255)
        assert set(controller.last_overlays) == set(c.FAMILIES)

    def test_tuning_change_regenerates(self, wiring) -> None:
        settings, seeds, sink = wiring
        controller = ThemeController(settings, seeds, sink, background=False)
        controller.start()

        settings.put(c.PREF_CHROMA_FACTOR, 0)
        assert len(sink.history) == 2
        assert sink.current == _expected(settings, seeds)
        assert controller.params.chroma_factor == 0.0

    def test_unrelated_setting_is_ignored(self, wiring) -> None:
        settings, seeds, sink = wiring
        controller = ThemeController(settings, seeds, sink, background=False)
        controller.start()

        settings.put("font_scale", 1.2)
        assert len(sink.history) == 1

    def test_seed_change_regenerates(self, wiring) -> None:
        settings, seeds, sink = wiring
        controller = ThemeController(settings, seeds, sink, background=False)
        controller.start()

        seeds.set_seed(Srgb(200, 30, 30))
        assert len(sink.history) == 2
        assert controller.params.seed_color == Srgb(200, 30, 30)
        assert sink.history[0] != sink.history[1]

    def test_explicit_accent_overrides_wallpaper(self, wiring) -> None:
        settings, seeds, sink = wiring
        controller = ThemeController(settings, seeds, sink, background=False)
        controller.start()

        settings.put(c.PREF_COLOR_ACCENT, "#FF0000")
        assert controller.params.seed_color == Srgb(255, 0, 0)
        seeds.set_seed(Srgb(0, 255, 0))
        assert controller.params.seed_color == Srgb(255, 0, 0)

    def test_configuration_change_republishes(self, wiring) -> None:
        settings, seeds, sink = wiring
        controller = ThemeController(settings, seeds, sink, background=False)
        controller.start()
        controller.on_configuration_changed()

        assert len(sink.history) == 2
        assert sink.history[0] == sink.history[1]


class TestBackgroundController:
    def test_burst_settles_on_latest_state(self, wiring) -> None:
        settings, seeds, sink = wiring
        controller = ThemeController(settings, seeds, sink)
        controller.start()
        try:
            for percent in (10, 40, 70, 90):
                settings.put(c.PREF_CHROMA_FACTOR, percent)
            seeds.set_seed(Srgb(20, 160, 90))
            settings.put(c.PREF_RICHER_COLORS, 1)

            assert controller.wait_idle(timeout=30.0)
            assert sink.current == _expected(settings, seeds)
            assert 1 <= len(sink.history) <= 7
            assert controller.params.richer_colors is True
        finally:
            controller.stop()


class _NestingSeedSource(StaticSeedSource):
    """Starts a second inline pass while the first one is still resolving its seed."""

    def __init__(self, seed: Srgb):
        super().__init__(seed)
        self.controller = None
        self._nested = False

    def current_seed(self):
        if self.controller is not None and not self._nested:
            self._nested = True
            self.set_seed(Srgb(200, 30, 30))
        return super().current_seed()


class TestStalePasses:
    def test_older_pass_is_not_published_after_newer(self) -> None:
        settings = MemoryParameterSource()
        seeds = _NestingSeedSource(Srgb(0, 0, 255))
        sink = MemoryTokenSink()
        controller = ThemeController(settings, seeds, sink, background=False)
        seeds.controller = controller
        controller.start()

        assert len(sink.history) == 1
        assert controller.params.seed_color == Srgb(200, 30, 30)
        assert sink.current == _expected(settings, seeds)
