from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Tuple

from .atomic import atomic_write_text

logger = logging.getLogger(__name__)

# File key -> attribute name, in the order they are written.
ENV_KEYS: Tuple[Tuple[str, str], ...] = (
    ("OPENAI_API_KEY", "openai_api_key"),
    ("PERSONALIZATION_FILE", "personalization_file"),
    ("SCRATCH_PAD_DIR", "scratch_pad_dir"),
    ("ACTIVE_MEMORY_FILE", "active_memory_file"),
    ("FIRECRAWL_API_KEY", "firecrawl_api_key"),
    ("POSTGRES_URL", "postgres_url"),
    ("SQLITE_URL", "sqlite_url"),
    ("DUCKDB_URL", "duckdb_url"),
)

SECRET_KEYS = frozenset({"OPENAI_API_KEY", "FIRECRAWL_API_KEY"})

_ATTR_BY_KEY: Dict[str, str] = dict(ENV_KEYS)
_LINE_SPLIT_RE = re.compile(r"\r\n|\r|\n")


@dataclass
class EnvConfig:
    """Scalar settings stored in the assistant's ``.env`` file."""

    openai_api_key: str = ""
    personalization_file: str = "./personalization.json"
    scratch_pad_dir: str = "./scratchpad"
    active_memory_file: str = "./active_memory.json"
    firecrawl_api_key: str = ""
    postgres_url: str = ""
    sqlite_url: str = "./db/mock_sqlite.db"
    duckdb_url: str = "./db/mock_duck.duckdb"

    def get(self, key: str) -> str:
        return getattr(self, _attr_for(key))

    def set(self, key: str, value: str) -> None:
        setattr(self, _attr_for(key), str(value))

    def as_dict(self) -> Dict[str, str]:
        """Return ``{FILE_KEY: value}`` in file order."""
        return {key: getattr(self, attr) for key, attr in ENV_KEYS}

    def to_text(self) -> str:
        # No quoting: a value holding "\n" will break the next load.
        return "".join(f"{key}={value}\n" for key, value in self.as_dict().items())

    def apply_text(self, text: str) -> int:
        """Assign recognised ``KEY=VALUE`` lines from *text*.

        Only the first ``=`` separates key from value; values are taken
        verbatim. Returns the number of lines applied.
        """
        applied = 0
        for line in _LINE_SPLIT_RE.split(text):
            key, sep, value = line.partition("=")
            if not sep:
                continue
            attr = _ATTR_BY_KEY.get(key)
            if attr is None:
                continue
            setattr(self, attr, value)
            applied += 1
        return applied

    @classmethod
    def defaults(cls) -> "EnvConfig":
        return cls()


def _attr_for(key: str) -> str:
    try:
        return _ATTR_BY_KEY[key]
    except KeyError:
        raise KeyError(f"Unknown env key: {key!r} (expected one of {', '.join(_ATTR_BY_KEY)})") from None


@dataclass
class EnvFile:
    """Load/save an :class:`EnvConfig` at a fixed path."""

    path: Path

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def load(self) -> EnvConfig:
        cfg = EnvConfig.defaults()
        if not self.path.exists():
            logger.info("No env file at %s; using defaults", self.path)
            return cfg

        try:
            # utf-8-sig: editors on Windows like to prepend a BOM.
            text = self.path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read env file %s: %s: %s", self.path, type(e).__name__, e)
            return cfg

        applied = cfg.apply_text(text)
        logger.info("Loaded %d env value(s) from %s", applied, self.path)
        return cfg

    def save(self, cfg: EnvConfig) -> None:
        """Write *cfg* atomically. Raises ``OSError`` or ``UnicodeEncodeError`` on failure."""
        atomic_write_text(self.path, cfg.to_text())
        logger.info("Saved env file: %s", self.path)
