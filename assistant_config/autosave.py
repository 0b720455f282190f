"""Debounced autosave.

A :class:`Debouncer` runs its action once a stream of :meth:`Debouncer.trigger`
calls has been quiet for ``delay_s`` seconds. Timers come from a
:class:`Scheduler`; the GUI uses :class:`assistant_config.gui.scheduler.TkScheduler`
so that callbacks run on the Tk event loop, the same thread that mutates the
settings.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Protocol

logger = logging.getLogger(__name__)

DEFAULT_AUTOSAVE_DELAY_S = 1.0


class Scheduler(Protocol):
    def call_later(self, delay_s: float, callback: Callable[[], None]) -> Any:
        ...

    def cancel(self, handle: Any) -> None:
        ...


class Debouncer:
    def __init__(
        self,
        action: Callable[[], Any],
        scheduler: Scheduler,
        *,
        delay_s: float = DEFAULT_AUTOSAVE_DELAY_S,
        name: str = "autosave",
    ) -> None:
        if delay_s < 0:
            raise ValueError(f"delay_s must be >= 0, got {delay_s}")
        self.action = action
        self.scheduler = scheduler
        self.delay_s = float(delay_s)
        self.name = name
        self._handle: Optional[Any] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def trigger(self) -> None:
        """Start the timer, or restart it if one is already pending."""
        self.cancel()
        self._handle = self.scheduler.call_later(self.delay_s, self._fire)

    def cancel(self) -> None:
        if self._handle is None:
            return
        handle, self._handle = self._handle, None
        self.scheduler.cancel(handle)

    def flush(self) -> bool:
        """Run a pending action now. Returns False if nothing was pending."""
        if self._handle is None:
            return False
        self.cancel()
        logger.debug("Flushing pending %s", self.name)
        self.action()
        return True

    def _fire(self) -> None:
        self._handle = None
        self.action()
