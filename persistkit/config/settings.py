"""Library settings loaded from environment variables via pydantic-settings.

Every field can be overridden with a ``PERSISTKIT_``-prefixed environment
variable (``PERSISTKIT_CACHE_DIR=/tmp/cache``) or a ``.env`` file in the
working directory.  Explicit constructor arguments on caches and storages
always win over settings.

The default directories follow the XDG base directory convention:
``$XDG_CACHE_HOME/persistkit`` for caches and
``$XDG_DATA_HOME/persistkit`` for storages.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_cache_dir() -> Path:
    base = os.environ.get("XDG_CACHE_HOME") or Path.home() / ".cache"
    return Path(base) / "persistkit"


def _default_storage_dir() -> Path:
    base = os.environ.get("XDG_DATA_HOME") or Path.home() / ".local" / "share"
    return Path(base) / "persistkit"


class Settings(BaseSettings):
    """persistkit settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(
        env_prefix="PERSISTKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Locations ===
    cache_dir: Path = Field(default_factory=_default_cache_dir)
    storage_dir: Path = Field(default_factory=_default_storage_dir)

    # === Memory cache ===
    memory_cache_max_size: int = Field(default=1024, gt=0)

    # === Logging ===
    env: str = "development"
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance.

    Call ``get_settings.cache_clear()`` after changing the environment to
    pick up new values.
    """
    return Settings()
