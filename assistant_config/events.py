"""Simple callback registry used by the store to notify the UI."""

from __future__ import annotations

from typing import Callable, Dict, List


class StoreEvents:
    """Small callback-based event hub.

    ``config`` arguments are ``"env"`` or ``"personalization"``.
    """

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Callable[..., None]]] = {
            "changed": [],
            "saved": [],
            "save_failed": [],
            "reset": [],
        }

    def on_changed(self, callback: Callable[[str, str], None]) -> None:
        self._listeners["changed"].append(callback)

    def on_saved(self, callback: Callable[[str], None]) -> None:
        self._listeners["saved"].append(callback)

    def on_save_failed(self, callback: Callable[[str, Exception], None]) -> None:
        self._listeners["save_failed"].append(callback)

    def on_reset(self, callback: Callable[[], None]) -> None:
        self._listeners["reset"].append(callback)

    def emit_changed(self, config: str, name: str) -> None:
        for callback in self._listeners["changed"]:
            callback(config, name)

    def emit_saved(self, config: str) -> None:
        for callback in self._listeners["saved"]:
            callback(config)

    def emit_save_failed(self, config: str, error: Exception) -> None:
        for callback in self._listeners["save_failed"]:
            callback(config, error)

    def emit_reset(self) -> None:
        for callback in self._listeners["reset"]:
            callback()


__all__ = ["StoreEvents"]
