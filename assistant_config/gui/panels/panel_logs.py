"""Logs tab with file shortcuts and error copy helper."""

from __future__ import annotations

import logging
import subprocess
import sys
import tkinter as tk
from pathlib import Path
from tkinter import messagebox, ttk
from typing import Optional

from ...log_utils import LOG_FILENAME, log_candidates, sanitize_log

logger = logging.getLogger(__name__)


def _existing_log() -> Optional[Path]:
    for p in log_candidates():
        if p.exists():
            return p
    return None


def _open_path(path: Path) -> None:
    if sys.platform.startswith("win"):
        cmd = ["notepad", str(path)]
    elif sys.platform == "darwin":
        cmd = ["open", str(path)]
    else:
        cmd = ["xdg-open", str(path)]
    subprocess.Popen(cmd)


def read_log_text() -> str:
    path = _existing_log()
    if path is None:
        return f"No {LOG_FILENAME} found yet."
    try:
        return sanitize_log(path.read_text(encoding="utf-8", errors="replace"))
    except OSError as e:
        return f"Could not read {path}: {e}"


def build_panel(parent, app=None) -> ttk.Frame:
    frame = ttk.Frame(parent)
    frame.columnconfigure(0, weight=1)
    frame.rowconfigure(0, weight=1)

    box = tk.Text(frame, wrap="word", state="disabled")
    box.grid(row=0, column=0, sticky="nsew", padx=12, pady=(12, 8))

    actions = ttk.Frame(frame)
    actions.grid(row=1, column=0, sticky="ew", padx=12, pady=(0, 12))

    def _refresh() -> None:
        box.configure(state="normal")
        box.delete("1.0", tk.END)
        box.insert("1.0", read_log_text())
        box.see(tk.END)
        box.configure(state="disabled")

    def _open_log() -> None:
        path = _existing_log()
        if path is None:
            messagebox.showinfo(LOG_FILENAME, f"No {LOG_FILENAME} found.")
            return
        try:
            _open_path(path)
        except OSError as e:
            logger.warning("Could not open %s: %s", path, e)
            messagebox.showerror(LOG_FILENAME, f"Could not open {path}:\n{e}")

    def _copy_last_error() -> None:
        lines = read_log_text().splitlines()
        error_lines = [ln for ln in lines if "[ERROR]" in ln or "traceback" in ln.lower()]
        text = "\n".join(error_lines[-20:]).strip() or f"No error line found in {LOG_FILENAME}."
        frame.clipboard_clear()
        frame.clipboard_append(text)
        messagebox.showinfo("Logs", "Last error copied to clipboard.")

    ttk.Button(actions, text="Refresh", command=_refresh).pack(side=tk.LEFT)
    ttk.Button(actions, text=f"Open {LOG_FILENAME}", command=_open_log).pack(side=tk.LEFT, padx=(8, 0))
    ttk.Button(actions, text="Copy last error", command=_copy_last_error).pack(side=tk.LEFT, padx=(8, 0))

    if app is not None:
        app.refresh_logs = _refresh
    _refresh()
    return frame
