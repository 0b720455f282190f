"""Configuration store: owns both settings records and keeps them on disk.

The UI never touches the records directly. It calls the mutation methods
(:meth:`ConfigurationStore.set_env`, :meth:`ConfigurationStore.set_personalization`
and the browser URL helpers), each of which updates one field and restarts the
debounce timer of the affected file. Explicit saves and reset-to-defaults
write immediately.
"""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Union

from .autosave import DEFAULT_AUTOSAVE_DELAY_S, Debouncer, Scheduler
from .events import StoreEvents
from .log_utils import mask_secret
from .settings import EnvConfig, EnvFile, PersonalizationConfig, PersonalizationFile
from .settings.env_file import SECRET_KEYS
from .settings.personalization import PERSONALIZATION_FIELDS

logger = logging.getLogger(__name__)

ENV_FILENAME = ".env"
PERSONALIZATION_FILENAME = "personalization.json"

ENV = "env"
PERSONALIZATION = "personalization"


class ConfigurationStore:
    """Load, edit and persist the assistant's ``.env`` and personalization file.

    Pass a *scheduler* to enable debounced autosave. Without one, mutations
    stay in memory until :meth:`save_env` / :meth:`save_personalization` is
    called (this is what the CLI does).
    """

    def __init__(
        self,
        base_dir: Union[str, Path, None] = None,
        *,
        scheduler: Optional[Scheduler] = None,
        autosave_delay_s: float = DEFAULT_AUTOSAVE_DELAY_S,
        events: Optional[StoreEvents] = None,
    ) -> None:
        self.base_dir = Path(base_dir) if base_dir is not None else Path(os.getcwd())
        self.events = events or StoreEvents()
        self._env_file = EnvFile(self.base_dir / ENV_FILENAME)
        self._personalization_file = PersonalizationFile(self.base_dir / PERSONALIZATION_FILENAME)

        self._env: EnvConfig = self._env_file.load()
        self._personalization: PersonalizationConfig = self._personalization_file.load()

        self._env_autosave: Optional[Debouncer] = None
        self._personalization_autosave: Optional[Debouncer] = None
        if scheduler is not None:
            self._env_autosave = Debouncer(
                self._autosave_env, scheduler, delay_s=autosave_delay_s, name="env autosave"
            )
            self._personalization_autosave = Debouncer(
                self._autosave_personalization,
                scheduler,
                delay_s=autosave_delay_s,
                name="personalization autosave",
            )

    # ------------------------------------------------------------------
    # Paths / state
    # ------------------------------------------------------------------

    @property
    def env_path(self) -> Path:
        return self._env_file.path

    @property
    def personalization_path(self) -> Path:
        return self._personalization_file.path

    @property
    def autosave_enabled(self) -> bool:
        return self._env_autosave is not None

    def has_pending_saves(self) -> bool:
        return any(d is not None and d.pending for d in (self._env_autosave, self._personalization_autosave))

    # ------------------------------------------------------------------
    # Getters (copies only)
    # ------------------------------------------------------------------

    def get_env(self, key: str) -> str:
        return self._env.get(key)

    def env_values(self) -> Dict[str, str]:
        return self._env.as_dict()

    def env_snapshot(self) -> EnvConfig:
        return copy.copy(self._env)

    def get_personalization(self, name: str) -> Union[str, List[str]]:
        _check_personalization_field(name)
        value = getattr(self._personalization, name)
        return list(value) if isinstance(value, list) else value

    def personalization_snapshot(self) -> PersonalizationConfig:
        return copy.deepcopy(self._personalization)

    @property
    def browser_urls(self) -> List[str]:
        return list(self._personalization.browser_urls)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def set_env(self, key: str, value: str) -> bool:
        """Set one env value. Returns False if the value did not change."""
        value = str(value)
        if self._env.get(key) == value:
            return False
        self._env.set(key, value)
        logger.debug("env %s changed to %s", key, mask_secret(value) if key in SECRET_KEYS else repr(value))
        self._env_changed(key)
        return True

    def set_personalization(self, name: str, value: Union[str, List[str]]) -> bool:
        """Set one personalization field. Returns False if it did not change."""
        _check_personalization_field(name)
        if name == "browser_urls":
            if isinstance(value, str) or not all(isinstance(u, str) for u in value):
                raise TypeError("browser_urls must be a sequence of strings")
            value = list(value)
        else:
            value = str(value)
        if getattr(self._personalization, name) == value:
            return False
        setattr(self._personalization, name, value)
        logger.debug("personalization %s changed", name)
        self._personalization_changed(name)
        return True

    def add_browser_url(self, url: str) -> bool:
        """Append *url*; empty input is ignored."""
        url = str(url).strip()
        if not url:
            return False
        self._personalization.browser_urls.append(url)
        self._personalization_changed("browser_urls")
        return True

    def set_browser_url(self, index: int, url: str) -> bool:
        urls = self._personalization.browser_urls
        if urls[index] == url:
            return False
        urls[index] = str(url)
        self._personalization_changed("browser_urls")
        return True

    def remove_browser_url(self, index: int) -> str:
        removed = self._personalization.browser_urls.pop(index)
        self._personalization_changed("browser_urls")
        return removed

    def _env_changed(self, key: str) -> None:
        if self._env_autosave is not None:
            self._env_autosave.trigger()
        self.events.emit_changed(ENV, key)

    def _personalization_changed(self, name: str) -> None:
        if self._personalization_autosave is not None:
            self._personalization_autosave.trigger()
        self.events.emit_changed(PERSONALIZATION, name)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save_env(self) -> bool:
        """Write the env file now. Returns False (and logs) on failure."""
        try:
            self._env_file.save(self._env)
        except (OSError, ValueError) as e:
            # UnicodeEncodeError (a ValueError) for values holding lone surrogates.
            logger.exception("Failed to save env file %s", self.env_path)
            self.events.emit_save_failed(ENV, e)
            return False
        self.events.emit_saved(ENV)
        return True

    def save_personalization(self) -> bool:
        """Write the personalization file now. Returns False (and logs) on failure."""
        try:
            self._personalization_file.save(self._personalization)
        except (OSError, ValueError) as e:
            logger.exception("Failed to save personalization file %s", self.personalization_path)
            self.events.emit_save_failed(PERSONALIZATION, e)
            return False
        self.events.emit_saved(PERSONALIZATION)
        return True

    def save_all(self) -> bool:
        env_ok = self.save_env()
        personalization_ok = self.save_personalization()
        return env_ok and personalization_ok

    def reload(self) -> None:
        """Discard in-memory edits (and pending autosaves) and re-read both files."""
        self._cancel_autosaves()
        self._env = self._env_file.load()
        self._personalization = self._personalization_file.load()
        self.events.emit_reset()

    def reset_to_defaults(self) -> bool:
        """Restore every default and write both files immediately."""
        self._cancel_autosaves()
        self._env = EnvConfig.defaults()
        self._personalization = PersonalizationConfig.defaults()
        logger.info("Settings reset to defaults")
        self.events.emit_reset()
        return self.save_all()

    def flush(self) -> None:
        """Run pending autosaves now; called before the process exits."""
        for debouncer in (self._env_autosave, self._personalization_autosave):
            if debouncer is not None:
                debouncer.flush()

    def _cancel_autosaves(self) -> None:
        for debouncer in (self._env_autosave, self._personalization_autosave):
            if debouncer is not None:
                debouncer.cancel()

    def _autosave_env(self) -> None:
        self.save_env()

    def _autosave_personalization(self) -> None:
        self.save_personalization()


def _check_personalization_field(name: str) -> None:
    if name not in PERSONALIZATION_FIELDS:
        raise KeyError(f"Unknown personalization field: {name!r}")
