"""Launch tab: optional initial prompt + launch button."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

_LAUNCH_NOTE = (
    "This will launch the AI Assistant in the background. It keeps running "
    "after this configuration window is closed."
)


def build_panel(parent, app) -> ttk.Frame:
    frame = ttk.Frame(parent)
    frame.columnconfigure(0, weight=1)

    ttk.Label(frame, text="Launch AI Assistant", font=("TkDefaultFont", 16, "bold")).grid(
        row=0, column=0, sticky="w", padx=12, pady=(12, 10)
    )
    ttk.Label(frame, text="Initial Prompt (Optional):").grid(row=1, column=0, sticky="w", padx=12)

    prompt = tk.Text(frame, height=8, wrap="word", undo=True)
    prompt.grid(row=2, column=0, sticky="ew", padx=12, pady=(4, 8))
    app.prompt_text = prompt

    ttk.Label(frame, text=_LAUNCH_NOTE, foreground="#616161", wraplength=520, justify="center").grid(
        row=3, column=0, padx=12, pady=8
    )

    def _launch() -> None:
        app.launch(prompt.get("1.0", "end-1c"))

    ttk.Button(frame, text="▶ Launch Assistant", command=_launch).grid(row=4, column=0, pady=(8, 12))
    return frame
