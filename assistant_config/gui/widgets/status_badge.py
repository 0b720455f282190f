"""Save-state indicator shown next to each tab's Save button."""

from __future__ import annotations

import time
import tkinter as tk
from tkinter import ttk

# state -> (dot color, caption)
SAVE_STATES = {
    "loaded": ("#616161", "Loaded from disk"),
    "pending": ("#ef6c00", "Unsaved changes"),
    "saved": ("#2e7d32", "Saved"),
    "error": ("#c62828", "Save failed"),
}


class StatusBadge(ttk.Frame):
    """Colored dot plus caption; ``saved`` also shows the time of the write."""

    def __init__(self, master: tk.Misc, state: str = "loaded"):
        super().__init__(master)
        self.dot = tk.Canvas(self, width=12, height=12, highlightthickness=0)
        self._oval = self.dot.create_oval(2, 2, 11, 11, outline="")
        self.dot.grid(row=0, column=0, padx=(0, 6))
        self.caption = ttk.Label(self)
        self.caption.grid(row=0, column=1, sticky="w")
        self.save_state = state
        self.show(state)

    def show(self, state: str) -> None:
        color, caption = SAVE_STATES.get(state, SAVE_STATES["loaded"])
        if state == "saved":
            caption = f"{caption} at {time.strftime('%H:%M:%S')}"
        self.save_state = state
        self.dot.itemconfigure(self._oval, fill=color)
        self.caption.configure(text=caption)
