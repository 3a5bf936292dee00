"""Preferences providers."""

from persistkit.providers.preferences.json_preferences import JSONPreferences

__all__ = ["JSONPreferences"]
