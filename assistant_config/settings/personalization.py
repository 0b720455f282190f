from __future__ import annotations

import json
import logging
import time
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Tuple

from .atomic import atomic_write_text

logger = logging.getLogger(__name__)

SQL_DIALECTS: Tuple[str, ...] = ("duckdb", "sqlite", "postgres")


def _default_browser_urls() -> List[str]:
    return ["https://google.com", "https://chat.openai.com", "https://claude.ai/chat"]


class PersonalizationDecodeError(ValueError):
    """Raised when a JSON document does not have the personalization shape."""


@dataclass
class PersonalizationConfig:
    """Assistant preferences stored in ``personalization.json``.

    Field order is the key order of the written JSON document.
    """

    browser_urls: List[str] = field(default_factory=_default_browser_urls)
    browser_command: str = "open -a 'Google Chrome'"
    ai_assistant_name: str = "Ada"
    human_name: str = "User"
    # One of SQL_DIALECTS, but any string is accepted.
    sql_dialect: str = "duckdb"
    system_message_suffix: str = "Keep all of your responses ultra short."

    @classmethod
    def defaults(cls) -> "PersonalizationConfig":
        return cls()

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2, ensure_ascii=False) + "\n"

    @classmethod
    def from_dict(cls, data: Any) -> "PersonalizationConfig":
        """Strictly decode *data*; every field must be present and well-typed.

        Unknown keys are ignored.
        """
        if not isinstance(data, dict):
            raise PersonalizationDecodeError(f"expected a JSON object, got {type(data).__name__}")

        kwargs: Dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in data:
                raise PersonalizationDecodeError(f"missing field {f.name!r}")
            value = data[f.name]
            if f.name == "browser_urls":
                if not isinstance(value, list) or not all(isinstance(u, str) for u in value):
                    raise PersonalizationDecodeError("'browser_urls' must be a list of strings")
                value = list(value)
            elif not isinstance(value, str):
                raise PersonalizationDecodeError(f"{f.name!r} must be a string, got {type(value).__name__}")
            kwargs[f.name] = value
        return cls(**kwargs)


PERSONALIZATION_FIELDS: Tuple[str, ...] = tuple(f.name for f in fields(PersonalizationConfig))


@dataclass
class PersonalizationFile:
    """Load/save a :class:`PersonalizationConfig` at a fixed path."""

    path: Path

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def load(self) -> PersonalizationConfig:
        if not self.path.exists():
            logger.info("No personalization file at %s; using defaults", self.path)
            return PersonalizationConfig.defaults()

        try:
            raw = self.path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read personalization file %s: %s: %s", self.path, type(e).__name__, e)
            return PersonalizationConfig.defaults()

        try:
            cfg = PersonalizationConfig.from_dict(json.loads(raw))
        except (ValueError, RecursionError) as e:
            # json.JSONDecodeError is a ValueError; absurd nesting raises RecursionError.
            logger.warning("Invalid personalization file %s (%s); using defaults", self.path, e)
            self._backup_corrupt()
            return PersonalizationConfig.defaults()

        logger.info("Loaded personalization settings from %s", self.path)
        return cfg

    def save(self, cfg: PersonalizationConfig) -> None:
        """Write *cfg* atomically. Raises ``OSError`` or ``UnicodeEncodeError`` on failure."""
        atomic_write_text(self.path, cfg.to_json())
        logger.info("Saved personalization file: %s", self.path)

    def _backup_corrupt(self) -> None:
        # Keep the broken file around; the next autosave overwrites the original.
        ts = time.strftime("%Y%m%d_%H%M%S")
        bak = self.path.with_name(f"{self.path.name}.bak.{ts}")
        try:
            bak.write_bytes(self.path.read_bytes())
            logger.info("Backed up invalid personalization file to %s", bak)
        except OSError as e:
            logger.warning("Could not back up %s: %s", self.path, e)
