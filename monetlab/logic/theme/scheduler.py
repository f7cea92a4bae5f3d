#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/logic/theme/scheduler.py

import threading
from typing import Callable, Optional

from monetlab.shared.logger import log


class RegenerationScheduler:
    """
    Runs a job on one background thread, coalescing requests.

    Any number of requests that arrive while the job is running collapse into
    a single follow-up run, which starts once the current run finishes.
    """

    def __init__(self, job: Callable[[], None], name: str = "monetlab-regen"):
        self._job = job
        self._name = name
        self._lock = threading.Lock()
        self._wake_evt = threading.Event()
        self._idle_evt = threading.Event()
        self._stop_evt = threading.Event()
        self._idle_evt.set()
        self._pending = False
        self._running = False
        self._thr: Optional[threading.Thread] = None
        self.runs = 0

    @property
    def running(self) -> bool:
        return self._thr is not None and self._thr.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop_evt.clear()
        self._thr = threading.Thread(target=self._loop, name=self._name, daemon=True)
        self._thr.start()

    def stop(self, timeout: float = 2.0) -> None:
        self._stop_evt.set()
        self._wake_evt.set()
        if self._thr and self._thr.is_alive():
            self._thr.join(timeout=timeout)
        self._thr = None

    def request(self) -> None:
        with self._lock:
            self._pending = True
            self._idle_evt.clear()
            self._wake_evt.set()

    def wait_idle(self, timeout: Optional[float] = None) -> bool:
        """Block until no run is in flight or pending."""
        return self._idle_evt.wait(timeout)

    def _loop(self) -> None:
        while not self._stop_evt.is_set():
            self._wake_evt.wait()
            if self._stop_evt.is_set():
                break
            with self._lock:
                self._wake_evt.clear()
                if not self._pending:
                    continue
                self._pending = False
                self._running = True
            try:
                self._job()
            except Exception as e:
                log("error", f"theme regeneration failed: {e}")
            finally:
                with self._lock:
                    self.runs += 1
                    self._running = False
                    if not self._pending:
                        self._idle_evt.set()
