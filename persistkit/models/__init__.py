"""Data models: the persisted cache entry and the file backend configs."""

from persistkit.models.config import FileCacheConfig, FileStorageConfig
from persistkit.models.entry import CacheEntry

__all__ = ["CacheEntry", "FileCacheConfig", "FileStorageConfig"]
