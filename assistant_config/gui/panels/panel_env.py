"""Environment tab: the eight ``.env`` values."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from ...settings import ENV_KEYS
from ...settings.env_file import SECRET_KEYS
from ..widgets import LabeledEntry, StatusBadge

ENV_LABELS = {
    "OPENAI_API_KEY": "OpenAI API Key:",
    "PERSONALIZATION_FILE": "Personalization File:",
    "SCRATCH_PAD_DIR": "Scratch Pad Directory:",
    "ACTIVE_MEMORY_FILE": "Active Memory File:",
    "FIRECRAWL_API_KEY": "Firecrawl API Key:",
    "POSTGRES_URL": "Postgres URL:",
    "SQLITE_URL": "SQLite URL:",
    "DUCKDB_URL": "DuckDB URL:",
}


def build_panel(parent, app) -> ttk.Frame:
    store = app.store
    frame = ttk.Frame(parent)
    frame.columnconfigure(0, weight=1)

    ttk.Label(frame, text="Environment Variables", font=("TkDefaultFont", 16, "bold")).grid(
        row=0, column=0, sticky="w", padx=12, pady=(12, 10)
    )

    env_vars = {}
    for row, (key, attr) in enumerate(ENV_KEYS, start=1):
        var = tk.StringVar(master=frame, value=store.get_env(key))
        setattr(app, f"var_env_{attr}", var)
        env_vars[key] = var
        LabeledEntry(frame, ENV_LABELS.get(key, key), textvariable=var, secret=key in SECRET_KEYS).grid(
            row=row, column=0, sticky="ew", padx=12, pady=3
        )
        var.trace_add("write", lambda *_a, k=key, v=var: store.set_env(k, v.get()))

    actions = ttk.Frame(frame)
    actions.grid(row=len(ENV_KEYS) + 1, column=0, sticky="ew", padx=12, pady=(16, 12))
    actions.columnconfigure(1, weight=1)

    app.env_status = StatusBadge(actions)
    app.env_status.grid(row=0, column=0, sticky="w")
    ttk.Label(actions, text=str(store.env_path), foreground="#616161").grid(row=0, column=1, sticky="w", padx=(8, 0))
    ttk.Button(actions, text="Save", command=app.save_env).grid(row=0, column=2, sticky="e")

    def _refresh() -> None:
        for key, var in env_vars.items():
            value = store.get_env(key)
            if var.get() != value:
                var.set(value)

    store.events.on_reset(_refresh)
    return frame
