"""Editable list of URLs (listbox + entry + add/update/remove buttons)."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, List, Optional, Sequence


class UrlListEditor(ttk.Frame):
    """Order-preserving URL list.

    The widget holds no data of its own; every edit is reported through the
    callbacks and the owner pushes the new list back with :meth:`set_items`.
    """

    def __init__(
        self,
        master: tk.Misc,
        *,
        on_add: Callable[[str], None],
        on_update: Callable[[int, str], None],
        on_remove: Callable[[int], None],
        height: int = 5,
    ):
        super().__init__(master)
        self._on_add = on_add
        self._on_update = on_update
        self._on_remove = on_remove

        self.columnconfigure(0, weight=1)

        self.listbox = tk.Listbox(self, height=height, exportselection=False, activestyle="none")
        self.listbox.grid(row=0, column=0, columnspan=4, sticky="nsew")
        self.listbox.bind("<<ListboxSelect>>", self._on_select)

        self.var_new_url = tk.StringVar(master=self)
        self.entry = ttk.Entry(self, textvariable=self.var_new_url)
        self.entry.grid(row=1, column=0, sticky="ew", pady=(6, 0))
        self.entry.bind("<Return>", lambda _e: self._add())

        ttk.Button(self, text="Add", command=self._add).grid(row=1, column=1, padx=(6, 0), pady=(6, 0))
        ttk.Button(self, text="Update", command=self._update).grid(row=1, column=2, padx=(6, 0), pady=(6, 0))
        ttk.Button(self, text="Remove", command=self._remove).grid(row=1, column=3, padx=(6, 0), pady=(6, 0))

    def set_items(self, urls: Sequence[str]) -> None:
        sel = self.selected_index()
        self.listbox.delete(0, tk.END)
        for url in urls:
            self.listbox.insert(tk.END, url)
        if sel is not None and sel < len(urls):
            self.listbox.selection_set(sel)

    def items(self) -> List[str]:
        return list(self.listbox.get(0, tk.END))

    def selected_index(self) -> Optional[int]:
        sel = self.listbox.curselection()
        return int(sel[0]) if sel else None

    def _on_select(self, _event=None) -> None:
        idx = self.selected_index()
        if idx is not None:
            self.var_new_url.set(self.listbox.get(idx))

    def _add(self) -> None:
        url = self.var_new_url.get().strip()
        if not url:
            return
        self._on_add(url)
        self.var_new_url.set("")

    def _update(self) -> None:
        idx = self.selected_index()
        url = self.var_new_url.get().strip()
        if idx is None or not url:
            return
        self._on_update(idx, url)

    def _remove(self) -> None:
        idx = self.selected_index()
        if idx is None:
            return
        self.listbox.selection_clear(0, tk.END)
        self._on_remove(idx)
        self.var_new_url.set("")
