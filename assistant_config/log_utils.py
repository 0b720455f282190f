"""Logging setup and small text helpers shared by the GUI and the CLI."""

from __future__ import annotations

import logging
import re
import sys
from pathlib import Path
from typing import List, Optional, TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_FILENAME = "editor.log"

_ANSI_ESCAPE_RE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def app_home() -> Path:
    return Path.home() / ".assistant_config"


def log_candidates() -> List[Path]:
    """Log files the editor may have written, most specific first."""
    return [Path.cwd() / LOG_FILENAME, app_home() / LOG_FILENAME]


def setup_logging(verbose: bool = False, stream: Optional[TextIO] = None) -> Optional[str]:
    """Configure logging to ``~/.assistant_config/editor.log`` and stdout.

    The editor is often started without a visible console, so a log file is
    the only place save/launch failures end up. An existing logging
    configuration (e.g. when embedded or under pytest) is left alone.

    Returns the log file path, or ``None`` if it could not be created.
    """
    level = logging.DEBUG if verbose else logging.INFO
    log_path: Optional[Path] = None

    handlers: List[logging.Handler] = [logging.StreamHandler(stream or sys.stdout)]
    try:
        app_home().mkdir(parents=True, exist_ok=True)
        log_path = app_home() / LOG_FILENAME
        handlers.insert(0, logging.FileHandler(str(log_path), mode="a", encoding="utf-8"))
    except OSError as e:
        print(f"[warn] could not open log file: {e}", file=sys.stderr)
        log_path = None

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
    else:
        for h in handlers:
            h.close()

    def _excepthook(exc_type, exc, tb):
        logging.error("Unhandled exception", exc_info=(exc_type, exc, tb))
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _excepthook
    return str(log_path) if log_path is not None else None


def mask_secret(value: str, *, keep: int = 4) -> str:
    """Render an API key as ``sk-…abcd`` so it can be logged or printed."""
    if not value:
        return ""
    if len(value) <= keep * 2:
        return "*" * len(value)
    prefix = value[:3] if value[:3].endswith("-") else ""
    return f"{prefix}…{value[-keep:]}"


def sanitize_log(text: str) -> str:
    """Normalize captured log text for display in a Tk text widget.

    Carriage returns become newlines and ANSI escape sequences are removed.
    Content is not filtered otherwise.
    """
    if not text:
        return ""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return _ANSI_ESCAPE_RE.sub("", text)
