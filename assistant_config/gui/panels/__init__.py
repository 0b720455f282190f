"""Notebook tabs of the settings editor.

Each module exposes ``build_panel(parent, app) -> ttk.Frame``.
"""
