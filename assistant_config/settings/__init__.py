"""Persistent configuration records for the assistant.

Two files are managed next to each other in the assistant's working folder:

  * ``.env`` - flat ``KEY=VALUE`` lines (:class:`EnvConfig`)
  * ``personalization.json`` - structured preferences (:class:`PersonalizationConfig`)

Design goals:
  * Atomic writes (no truncated files on crash)
  * Resilient loads (fall back to defaults, never raise)
  * Secrets stay out of logs
"""

from .env_file import ENV_KEYS, EnvConfig, EnvFile
from .personalization import (
    PERSONALIZATION_FIELDS,
    PersonalizationConfig,
    PersonalizationDecodeError,
    PersonalizationFile,
)

__all__ = [
    "ENV_KEYS",
    "EnvConfig",
    "EnvFile",
    "PERSONALIZATION_FIELDS",
    "PersonalizationConfig",
    "PersonalizationDecodeError",
    "PersonalizationFile",
]
