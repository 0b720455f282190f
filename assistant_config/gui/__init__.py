"""Tk settings editor.

Imports are lazy so that ``assistant_config.gui`` can be imported (and the
CLI can start) on machines without a working Tk installation.
"""

from __future__ import annotations

from typing import Any

__all__ = ["ConfigEditorGUI", "main"]


def __getattr__(name: str) -> Any:
    if name in {"ConfigEditorGUI", "main"}:
        from .app import ConfigEditorGUI, main

        return {"ConfigEditorGUI": ConfigEditorGUI, "main": main}[name]
    raise AttributeError(name)
