#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/logic/theme/controller.py

import threading
from typing import Any, Dict, Optional

from monetlab.core import config as c
from monetlab.core.color import Srgb
from monetlab.core.params import ThemeParameters
from monetlab.logic.tokens.engine import TokenMap, generate_overlays, merge_overlays
from monetlab.shared.logger import log
from .resolver import resolve_parameters
from .scheduler import RegenerationScheduler
from .sources import ParameterSource, SeedColorSource, TokenSink


class ThemeController:
    """
    Keeps a TokenSink in sync with the settings and the wallpaper seed.

    Every change replays the whole pipeline from a fresh ThemeParameters
    snapshot; with `background=True` passes run on a coalescing worker thread.
    """

    def __init__(self, settings: ParameterSource, seeds: SeedColorSource, sink: TokenSink,
                 background: bool = True):
        self.settings = settings
        self.seeds = seeds
        self.sink = sink
        self.params: Optional[ThemeParameters] = None
        self.last_tokens: Optional[TokenMap] = None
        self.last_overlays: Optional[Dict[str, TokenMap]] = None
        self._lock = threading.Lock()
        self._requested = 0
        self._published = 0
        self._scheduler = RegenerationScheduler(self.regenerate) if background else None

    def start(self) -> None:
        self.settings.subscribe(self.on_tuning_changed)
        self.seeds.subscribe(self.on_seed_changed)
        if self._scheduler is not None:
            self._scheduler.start()
        self.reevaluate()

    def stop(self) -> None:
        if self._scheduler is not None:
            self._scheduler.stop()

    def wait_idle(self, timeout: Optional[float] = None) -> bool:
        if self._scheduler is None:
            return True
        return self._scheduler.wait_idle(timeout)

    def on_tuning_changed(self, key: Optional[str], value: Any = None) -> None:
        if key and c.PREF_PREFIX in key:
            log("debug", f"setting changed: {key} = {value}")
            self.reevaluate()

    def on_seed_changed(self, seed: Srgb) -> None:
        log("debug", f"seed color changed: {seed}")
        self.reevaluate()

    def on_configuration_changed(self) -> None:
        self.reevaluate()

    def reevaluate(self) -> None:
        with self._lock:
            self._requested += 1
        if self._scheduler is not None:
            self._scheduler.request()
        else:
            self.regenerate()

    def regenerate(self) -> TokenMap:
        """One full pass: snapshot parameters, generate, publish unless stale."""
        with self._lock:
            generation = self._requested
        params = resolve_parameters(self.settings, self.seeds.current_seed())
        overlays = generate_overlays(params.seed_color, params)
        tokens = merge_overlays(overlays)

        with self._lock:
            # Inline reevaluate() calls can overlap a pass that is still computing;
            # a newer pass that already published wins.
            if generation < self._published:
                log("debug", f"dropping stale theme pass {generation}")
                return tokens
            self._published = generation
            previous = self.last_tokens
            self.params = params
            self.last_tokens = tokens
            self.last_overlays = overlays

        self.sink.publish(tokens)
        log("debug", f"published {len(tokens)} tokens ({_count_changed(previous, tokens)} changed) "
                     f"from seed {params.seed_color}")
        return tokens


def _count_changed(previous: Optional[Dict[str, int]], current: Dict[str, int]) -> int:
    if previous is None:
        return len(current)
    keys = set(previous) | set(current)
    return sum(1 for k in keys if previous.get(k) != current.get(k))
