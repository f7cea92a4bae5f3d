#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/logic/theme/sources.py

"""
Boundary interfaces of the theme controller and their stock implementations.

A ParameterSource holds the stored settings and reports changes by key, a
SeedColorSource supplies the wallpaper seed, and a TokenSink receives each
finished token map as a full replacement.
"""

import collections
import json
import os
import tempfile
import threading
from typing import Any, Callable, Deque, Dict, List, Optional, Protocol

from monetlab.core import config as c
from monetlab.core.color import Srgb
from monetlab.shared.formatting import format_argb
from monetlab.shared.sanitizer import coerce_float, coerce_int

SettingListener = Callable[[str, Any], None]
SeedListener = Callable[[Srgb], None]


class ParameterSource(Protocol):
    def get_int(self, key: str, default: int) -> int: ...

    def get_float(self, key: str, default: float) -> float: ...

    def subscribe(self, listener: SettingListener) -> None: ...


class SeedColorSource(Protocol):
    def current_seed(self) -> Optional[Srgb]: ...

    def subscribe(self, listener: SeedListener) -> None: ...


class TokenSink(Protocol):
    def publish(self, tokens: Dict[str, int]) -> None: ...


class MemoryParameterSource:
    """Dict-backed settings store that notifies listeners on every write."""

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = dict(values or {})
        self._listeners: List[SettingListener] = []
        self._lock = threading.Lock()

    def get_int(self, key: str, default: int) -> int:
        with self._lock:
            return coerce_int(self._values.get(key), default)

    def get_float(self, key: str, default: float) -> float:
        with self._lock:
            return coerce_float(self._values.get(key), default)

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return dict(self._values)

    def subscribe(self, listener: SettingListener) -> None:
        self._listeners.append(listener)

    def put(self, key: str, value: Any) -> None:
        with self._lock:
            self._values[key] = value
        for listener in list(self._listeners):
            listener(key, value)

    def update(self, values: Dict[str, Any]) -> None:
        for key, value in values.items():
            self.put(key, value)


class JsonParameterSource(MemoryParameterSource):
    """Settings loaded from a flat JSON object; `reload()` notifies changed keys."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(self._read())

    def _read(self) -> Dict[str, Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except OSError as e:
            raise ValueError(f"cannot read settings file '{self.path}': {e.strerror}") from e
        except json.JSONDecodeError as e:
            raise ValueError(f"malformed settings file '{self.path}': {e.msg} (line {e.lineno})") from e
        if not isinstance(data, dict):
            raise ValueError(f"settings file '{self.path}' must contain a JSON object")
        return data

    def reload(self) -> List[str]:
        fresh = self._read()
        current = self.snapshot()
        changed = [k for k in sorted(set(fresh) | set(current)) if fresh.get(k) != current.get(k)]
        for key in changed:
            self.put(key, fresh.get(key))
        return changed


class StaticSeedSource:
    """Seed holder standing in for a wallpaper color extractor."""

    def __init__(self, seed: Optional[Srgb] = None):
        self._seed = seed
        self._listeners: List[SeedListener] = []

    def current_seed(self) -> Optional[Srgb]:
        return self._seed

    def subscribe(self, listener: SeedListener) -> None:
        self._listeners.append(listener)

    def set_seed(self, seed: Srgb) -> None:
        self._seed = seed
        for listener in list(self._listeners):
            listener(seed)


class MemoryTokenSink:
    """Keeps the most recent published token maps; the last one is the installed theme."""

    def __init__(self, max_history: int = c.TOKEN_SINK_HISTORY):
        self.history: Deque[Dict[str, int]] = collections.deque(maxlen=max_history)
        self._lock = threading.Lock()

    def publish(self, tokens: Dict[str, int]) -> None:
        with self._lock:
            self.history.append(dict(tokens))

    @property
    def current(self) -> Optional[Dict[str, int]]:
        with self._lock:
            return self.history[-1] if self.history else None


class JsonTokenSink:
    """Writes each token map to a JSON file, replacing it atomically."""

    def __init__(self, path: str, pretty: bool = True):
        self.path = path
        self.pretty = pretty

    def publish(self, tokens: Dict[str, int]) -> None:
        doc = {name: format_argb(value) for name, value in tokens.items()}
        directory = os.path.dirname(os.path.abspath(self.path))
        fd, tmp_path = tempfile.mkstemp(prefix=".monetlab-", suffix=".json", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(doc, fh, indent=2 if self.pretty else None)
                fh.write("\n")
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
