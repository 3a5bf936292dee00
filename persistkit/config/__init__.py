"""Configuration module: exports Settings, the settings accessor and the YAML loader."""

from persistkit.config.loader import load_config, load_settings
from persistkit.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "load_config", "load_settings"]
