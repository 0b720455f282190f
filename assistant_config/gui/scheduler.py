"""Debounce timers on the Tk event loop."""

from __future__ import annotations

import logging
import tkinter as tk
from typing import Callable

logger = logging.getLogger(__name__)


class TkScheduler:
    """Schedule callbacks with ``widget.after`` / ``widget.after_cancel``."""

    def __init__(self, widget: tk.Misc) -> None:
        self.widget = widget

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> str:
        return self.widget.after(max(0, int(round(delay_s * 1000))), callback)

    def cancel(self, handle: str) -> None:
        try:
            self.widget.after_cancel(handle)
        except tk.TclError as e:
            # Window already destroyed: the timer died with it.
            logger.debug("after_cancel(%s) ignored: %s", handle, e)
