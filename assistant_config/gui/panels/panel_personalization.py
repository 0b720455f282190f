"""Personalization tab: browser URLs, names, SQL dialect and system message suffix."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from ...settings.personalization import SQL_DIALECTS
from ..widgets import LabeledEntry, StatusBadge, UrlListEditor

_DIALECT_LABELS = {"duckdb": "DuckDB", "sqlite": "SQLite", "postgres": "PostgreSQL"}

_TEXT_FIELDS = (
    ("browser_command", "Browser Command:"),
    ("ai_assistant_name", "AI Assistant Name:"),
    ("human_name", "Human Name:"),
)


def _bind_text(widget: tk.Text, on_change) -> None:
    """Call ``on_change(text)`` whenever the user edits *widget*."""

    def _modified(_event=None) -> None:
        if not widget.edit_modified():
            return
        on_change(widget.get("1.0", "end-1c"))
        widget.edit_modified(False)

    widget.bind("<<Modified>>", _modified)


def _set_text(widget: tk.Text, value: str) -> None:
    if widget.get("1.0", "end-1c") == value:
        return
    widget.delete("1.0", tk.END)
    widget.insert("1.0", value)
    widget.edit_modified(False)


def build_panel(parent, app) -> ttk.Frame:
    store = app.store
    frame = ttk.Frame(parent)
    frame.columnconfigure(0, weight=1)

    ttk.Label(frame, text="Personalization Settings", font=("TkDefaultFont", 16, "bold")).grid(
        row=0, column=0, sticky="w", padx=12, pady=(12, 10)
    )

    # Browser URLs
    urls_box = ttk.LabelFrame(frame, text="Browser URLs")
    urls_box.grid(row=1, column=0, sticky="ew", padx=12, pady=(0, 8))
    urls_box.columnconfigure(0, weight=1)
    url_editor = UrlListEditor(
        urls_box,
        on_add=store.add_browser_url,
        on_update=store.set_browser_url,
        on_remove=store.remove_browser_url,
    )
    url_editor.grid(row=0, column=0, sticky="ew", padx=8, pady=8)
    url_editor.set_items(store.browser_urls)
    app.url_editor = url_editor

    # Scalar fields
    text_vars = {}
    row = 2
    for name, label in _TEXT_FIELDS:
        var = tk.StringVar(master=frame, value=store.get_personalization(name))
        setattr(app, f"var_{name}", var)
        text_vars[name] = var
        LabeledEntry(frame, label, textvariable=var).grid(row=row, column=0, sticky="ew", padx=12, pady=3)
        var.trace_add("write", lambda *_a, n=name, v=var: store.set_personalization(n, v.get()))
        row += 1

    dialect_row = ttk.Frame(frame)
    dialect_row.grid(row=row, column=0, sticky="ew", padx=12, pady=(6, 3))
    ttk.Label(dialect_row, text="SQL Dialect:", width=22, anchor="e").pack(side=tk.LEFT)
    app.var_sql_dialect = tk.StringVar(master=frame, value=store.get_personalization("sql_dialect"))
    for dialect in SQL_DIALECTS:
        ttk.Radiobutton(
            dialect_row,
            text=_DIALECT_LABELS[dialect],
            value=dialect,
            variable=app.var_sql_dialect,
        ).pack(side=tk.LEFT, padx=(8, 0))
    app.var_sql_dialect.trace_add(
        "write", lambda *_a: store.set_personalization("sql_dialect", app.var_sql_dialect.get())
    )
    text_vars["sql_dialect"] = app.var_sql_dialect
    row += 1

    suffix_box = ttk.LabelFrame(frame, text="System Message Suffix")
    suffix_box.grid(row=row, column=0, sticky="ew", padx=12, pady=(8, 0))
    suffix_box.columnconfigure(0, weight=1)
    suffix_text = tk.Text(suffix_box, height=5, wrap="word", undo=True)
    suffix_text.grid(row=0, column=0, sticky="ew", padx=8, pady=8)
    _set_text(suffix_text, store.get_personalization("system_message_suffix"))
    _bind_text(suffix_text, lambda txt: store.set_personalization("system_message_suffix", txt))
    app.suffix_text = suffix_text
    row += 1

    actions = ttk.Frame(frame)
    actions.grid(row=row, column=0, sticky="ew", padx=12, pady=(16, 12))
    actions.columnconfigure(1, weight=1)
    app.personalization_status = StatusBadge(actions)
    app.personalization_status.grid(row=0, column=0, sticky="w")
    ttk.Label(actions, text=str(store.personalization_path), foreground="#616161").grid(
        row=0, column=1, sticky="w", padx=(8, 0)
    )
    ttk.Button(actions, text="Save", command=app.save_personalization).grid(row=0, column=2, sticky="e")

    def _refresh() -> None:
        for name, var in text_vars.items():
            value = store.get_personalization(name)
            if var.get() != value:
                var.set(value)
        _set_text(suffix_text, store.get_personalization("system_message_suffix"))
        url_editor.set_items(store.browser_urls)

    def _on_changed(config: str, name: str) -> None:
        if config == "personalization" and name == "browser_urls":
            url_editor.set_items(store.browser_urls)

    store.events.on_reset(_refresh)
    store.events.on_changed(_on_changed)
    return frame
