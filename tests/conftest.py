"""Shared fixtures for the assistant_config tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Dict, Tuple

import pytest


class FakeScheduler:
    """Manual clock for debounce tests; timers fire only in :meth:`advance`."""

    def __init__(self) -> None:
        self.now = 0.0
        self._timers: Dict[int, Tuple[float, Callable[[], None]]] = {}
        self._next_id = 0

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> int:
        self._next_id += 1
        self._timers[self._next_id] = (self.now + delay_s, callback)
        return self._next_id

    def cancel(self, handle: int) -> None:
        self._timers.pop(handle, None)

    @property
    def pending(self) -> int:
        return len(self._timers)

    def advance(self, seconds: float) -> None:
        self.now += seconds
        while True:
            due = sorted((t, h) for h, (t, _cb) in self._timers.items() if t <= self.now)
            if not due:
                return
            _, handle = due[0]
            _, callback = self._timers.pop(handle)
            callback()


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def isolated_logging(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the editor's log folder at tmp_path and restore sys.excepthook."""
    from assistant_config import log_utils

    home = tmp_path / "home"
    monkeypatch.setattr(log_utils, "app_home", lambda: home)
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    return home
