"""GUI application entrypoint: notebook with Environment / Personalization / Launch / Logs tabs."""

from __future__ import annotations

import logging
import tkinter as tk
from pathlib import Path
from tkinter import messagebox, ttk
from typing import Optional, Union

from .. import __version__ as TOOL_VERSION
from ..autosave import DEFAULT_AUTOSAVE_DELAY_S
from ..launcher import launch_assistant
from ..log_utils import setup_logging
from ..store import ENV, PERSONALIZATION, ConfigurationStore
from .panels import panel_env, panel_launch, panel_logs, panel_personalization
from .scheduler import TkScheduler

__version__ = TOOL_VERSION
logger = logging.getLogger(__name__)

APP_TITLE = "AI Assistant Config"


class ConfigEditorGUI(tk.Tk):
    TAB_LABELS = (
        ("env", "Environment"),
        ("personalization", "Personalization"),
        ("launch", "Launch"),
        ("logs", "Logs"),
    )

    def __init__(
        self,
        base_dir: Union[str, Path, None] = None,
        *,
        autosave_delay_s: float = DEFAULT_AUTOSAVE_DELAY_S,
    ):
        super().__init__()
        self.title(APP_TITLE)
        self.minsize(800, 600)

        # Timers run on this Tk loop, so autosaves never race UI edits.
        self.store = ConfigurationStore(base_dir, scheduler=TkScheduler(self), autosave_delay_s=autosave_delay_s)

        self._build_menu()
        self.notebook = ttk.Notebook(self)
        self.notebook.pack(fill="both", expand=True, padx=8, pady=8)
        self.tabs = {}
        builders = {
            "env": panel_env.build_panel,
            "personalization": panel_personalization.build_panel,
            "launch": panel_launch.build_panel,
            "logs": panel_logs.build_panel,
        }
        for key, label in self.TAB_LABELS:
            tab = builders[key](self.notebook, app=self)
            self.notebook.add(tab, text=label)
            self.tabs[key] = tab

        self.store.events.on_changed(self._on_store_changed)
        self.store.events.on_saved(self._on_store_saved)
        self.store.events.on_save_failed(self._on_store_save_failed)

        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # ------------------------------------------------------------------
    # Menu
    # ------------------------------------------------------------------

    def _build_menu(self) -> None:
        menubar = tk.Menu(self)

        settings_menu = tk.Menu(menubar, tearoff=0)
        settings_menu.add_command(label="Save All", command=self.save_all)
        settings_menu.add_command(label="Reload from Disk", command=self.reload)
        settings_menu.add_separator()
        settings_menu.add_command(label="Reset to Defaults", command=self.reset_to_defaults)
        menubar.add_cascade(label="Settings", menu=settings_menu)

        help_menu = tk.Menu(menubar, tearoff=0)
        help_menu.add_command(label=f"About {APP_TITLE}", command=self._show_about)
        menubar.add_cascade(label="Help", menu=help_menu)

        self.config(menu=menubar)

    def _show_about(self) -> None:
        messagebox.showinfo(
            f"About {APP_TITLE}",
            f"{APP_TITLE} {TOOL_VERSION}\n\nA configuration tool for the real-time AI assistant.",
            parent=self,
        )

    # ------------------------------------------------------------------
    # Store events -> status badges
    # ------------------------------------------------------------------

    def _badge(self, config: str):
        return self.env_status if config == ENV else self.personalization_status

    def _on_store_changed(self, config: str, _name: str) -> None:
        self._badge(config).show("pending")

    def _on_store_saved(self, config: str) -> None:
        self._badge(config).show("saved")

    def _on_store_save_failed(self, config: str, error: Exception) -> None:
        self._badge(config).show("error")

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def save_env(self) -> bool:
        ok = self.store.save_env()
        if not ok:
            messagebox.showerror("Save failed", f"Could not write {self.store.env_path}.\nSee the Logs tab.", parent=self)
        return ok

    def save_personalization(self) -> bool:
        ok = self.store.save_personalization()
        if not ok:
            messagebox.showerror(
                "Save failed", f"Could not write {self.store.personalization_path}.\nSee the Logs tab.", parent=self
            )
        return ok

    def save_all(self) -> bool:
        return self.save_env() and self.save_personalization()

    def reload(self) -> None:
        self.store.reload()
        for config in (ENV, PERSONALIZATION):
            self._badge(config).show("loaded")

    def reset_to_defaults(self) -> None:
        if not messagebox.askyesno(
            "Reset to Defaults", "Reset all settings to their defaults and save both files?", parent=self
        ):
            return
        if not self.store.reset_to_defaults():
            messagebox.showerror("Reset", "Settings were reset but could not be saved.\nSee the Logs tab.", parent=self)

    def launch(self, prompt: Optional[str] = None) -> bool:
        # The assistant reads the files on startup; write pending edits first.
        self.store.flush()
        ok = launch_assistant(prompt or None, cwd=self.store.base_dir)
        if ok:
            messagebox.showinfo("Assistant Launched", "The AI Assistant has been successfully launched!", parent=self)
        else:
            messagebox.showerror("Launch failed", "The AI Assistant could not be started.\nSee the Logs tab.", parent=self)
        refresh_logs = getattr(self, "refresh_logs", None)
        if refresh_logs is not None:
            refresh_logs()
        return ok

    def _on_close(self) -> None:
        self.store.flush()
        self.destroy()


def main(base_dir: Union[str, Path, None] = None) -> None:
    log_path = setup_logging()
    if log_path:
        logger.info("Logging to %s", log_path)
    app = ConfigEditorGUI(base_dir)
    try:
        app.mainloop()
    finally:
        # Window closed some other way (e.g. Ctrl+C): still write pending edits.
        app.store.flush()


__all__ = ["ConfigEditorGUI", "main"]
