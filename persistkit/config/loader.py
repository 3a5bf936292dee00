"""YAML configuration loader with environment variable overrides.

Configuration is loaded in layers (later layers override earlier):

  1. Field defaults on :class:`~persistkit.config.settings.Settings`
  2. A YAML file (flat mapping of setting names to values)
  3. ``PERSISTKIT_*`` environment variables and the ``.env`` file

Example ``persistkit.yaml``::

    cache_dir: /var/cache/myapp
    storage_dir: /var/lib/myapp
    memory_cache_max_size: 256
    log_level: DEBUG
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from persistkit.config.settings import Settings
from persistkit.utils.errors import ConfigurationError


def load_config(path: str | Path = "persistkit.yaml") -> dict[str, Any]:
    """Load the YAML config and merge environment-provided settings on top.

    A missing file is treated as an empty config.

    Raises
    ------
    ConfigurationError
        If the file is not valid YAML or does not contain a mapping, or an
        environment override fails validation.
    """
    config_path = Path(path)
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Malformed YAML in {config_path}: {exc}") from exc
    else:
        yaml_config = {}

    if not isinstance(yaml_config, dict):
        raise ConfigurationError(
            f"Expected a mapping at the top level of {config_path}, "
            f"got {type(yaml_config).__name__}"
        )

    # Only values actually provided by the environment override the file;
    # plain field defaults must not.
    try:
        env_settings = Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid PERSISTKIT_ environment settings: {exc}") from exc
    env_overrides = env_settings.model_dump(include=env_settings.model_fields_set)

    _deep_merge(yaml_config, env_overrides)
    return yaml_config


def load_settings(path: str | Path = "persistkit.yaml") -> Settings:
    """Build :class:`Settings` from the YAML file plus environment overrides.

    Raises
    ------
    ConfigurationError
        If the file is malformed or a value fails validation.
    """
    config = load_config(path)
    try:
        return Settings(**config)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid persistkit configuration: {exc}") from exc


def _deep_merge(base: dict, overrides: dict) -> None:
    """Recursively merge overrides into base dict, mutating base in place."""
    for key, value in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
