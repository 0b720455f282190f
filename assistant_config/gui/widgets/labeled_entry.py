"""Label + entry row used by the settings forms."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk


class LabeledEntry(ttk.Frame):
    def __init__(
        self,
        master: tk.Misc,
        label: str,
        *,
        textvariable: tk.StringVar | None = None,
        width: int = 48,
        label_width: int = 22,
        secret: bool = False,
    ):
        super().__init__(master)
        self.columnconfigure(1, weight=1)
        self.variable = textvariable or tk.StringVar(master=master)
        self.label = ttk.Label(self, text=label, width=label_width, anchor="e")
        self.label.grid(row=0, column=0, sticky="e")
        self.entry = ttk.Entry(self, textvariable=self.variable, width=width, show="*" if secret else "")
        self.entry.grid(row=0, column=1, sticky="ew", padx=(8, 0))

        self._secret = secret
        if secret:
            self._reveal = tk.BooleanVar(master=master, value=False)
            ttk.Checkbutton(self, text="Show", variable=self._reveal, command=self._toggle_reveal).grid(
                row=0, column=2, padx=(6, 0)
            )

    def _toggle_reveal(self) -> None:
        self.entry.configure(show="" if self._reveal.get() else "*")

    def get(self) -> str:
        return self.variable.get()
