"""File-system cache provider.

Layout::

    <config.root>/<cache_id>/<key_hasher(key)>

Each file holds a JSON-encoded :class:`~persistkit.models.entry.CacheEntry`
with both key and value.  The cache directory is created lazily before
every write, so inserting right after ``clear()`` transparently recreates
it.  Reusing a ``cache_id`` reopens the entries written by an earlier
instance, which allows a cache to survive process restarts.

Filenames come from a lossy hash.  When two keys collide, the later insert
overwrites the earlier file; lookups compare the stored key (by its encoded
form, so untyped caches still recognise UUID or tuple keys) and report the
overwritten key as missing instead of returning a foreign value.
"""

from __future__ import annotations

import uuid
from collections.abc import Hashable, Mapping
from pathlib import Path
from typing import Any, Generic, TypeVar

import structlog

from persistkit.interfaces.cache import ICache
from persistkit.models.config import FileCacheConfig
from persistkit.models.entry import CacheEntry
from persistkit.utils.errors import (
    InsufficientPermissionsError,
    InvalidCacheIdError,
    MissingFileForKeyError,
    PersistKitError,
)
from persistkit.utils.logging import get_logger

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class FileCache(ICache[K, V], Generic[K, V]):
    """Cache that writes one file per entry.

    Parameters
    ----------
    cache_id:
        Identifies the cache directory below ``config.root``.  Defaults to a
        fresh random UUID.  Avoid using the same id from two live instances.
    config:
        Location, coder, filesystem accessor and key hasher.
    key_type, value_type:
        Types used to decode entries read back from disk.  ``Any`` yields
        plain JSON types.
    initial_values:
        Entries inserted on construction.

    Raises
    ------
    InvalidCacheIdError
        If a regular file already occupies the cache directory path.
    """

    def __init__(
        self,
        cache_id: uuid.UUID | None = None,
        config: FileCacheConfig | None = None,
        key_type: Any = Any,
        value_type: Any = Any,
        initial_values: Mapping[K, V] | None = None,
    ) -> None:
        self._config = config or FileCacheConfig()
        self._id = cache_id or uuid.uuid4()
        self._entry_type = CacheEntry[key_type, value_type]
        self._logger: structlog.BoundLogger = get_logger(__name__)

        self._ensure_valid_cache_directory()

        for key, value in (initial_values or {}).items():
            self.insert(value, key)

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def config(self) -> FileCacheConfig:
        return self._config

    @property
    def cache_directory(self) -> Path:
        return self._config.root / str(self._id)

    # ------------------------------------------------------------------
    # ICache implementation
    # ------------------------------------------------------------------

    def content(self) -> dict[K, V]:
        fs = self._config.file_system
        if not fs.is_directory(self.cache_directory):
            return {}

        try:
            paths = fs.list_directory(self.cache_directory)
        except OSError as exc:
            self._logger.warning(
                "cache_list_failed", directory=str(self.cache_directory), error=str(exc)
            )
            return {}

        content: dict[K, V] = {}
        for path in paths:
            try:
                entry = self._read_entry(path)
                content[entry.key] = entry.value
            except (PersistKitError, TypeError) as exc:
                # TypeError: an unhashable key decoded from an untyped entry.
                self._logger.debug("cache_entry_skipped", path=str(path), error=str(exc))
        return content

    def clear(self) -> None:
        fs = self._config.file_system
        if not fs.is_directory(self.cache_directory):
            return

        try:
            fs.remove(self.cache_directory)
        except OSError as exc:
            self._logger.warning(
                "cache_clear_failed", directory=str(self.cache_directory), error=str(exc)
            )
            return
        self._logger.debug("cache_clear", directory=str(self.cache_directory))

    def insert(self, value: V, key: K) -> None:
        data = self._config.coder.encode(CacheEntry(key=key, value=value))
        path = self._make_path(key)

        self._make_cache_directory_if_required()

        # Existing files are overwritten without a check.
        try:
            self._config.file_system.write(data, path)
        except OSError as exc:
            raise InsufficientPermissionsError(
                f"Cannot write cache file {path}: {exc}", key=key
            ) from exc
        self._logger.debug("cache_set", key=key, path=str(path))

    def value(self, key: K) -> V:
        return self._entry_for_key(key).value

    def remove(self, key: K) -> V:
        entry = self._entry_for_key(key)
        path = self._make_path(key)

        fs = self._config.file_system
        if fs.file_exists(path):
            try:
                fs.remove(path)
            except OSError as exc:
                raise InsufficientPermissionsError(
                    f"Cannot remove cache file {path}: {exc}", key=key
                ) from exc
        self._logger.debug("cache_delete", key=key, path=str(path))
        return entry.value

    # ------------------------------------------------------------------
    # Private
    # ------------------------------------------------------------------

    def _make_path(self, key: K) -> Path:
        return self.cache_directory / self._config.key_hasher(key)

    def _read_entry(self, path: Path) -> CacheEntry:
        try:
            data = self._config.file_system.read(path)
        except OSError as exc:
            raise MissingFileForKeyError(f"Cannot read cache file {path}: {exc}") from exc
        return self._config.coder.decode(self._entry_type, data)

    def _entry_for_key(self, key: K) -> CacheEntry:
        path = self._make_path(key)
        if not self._config.file_system.file_exists(path):
            raise MissingFileForKeyError(key=key)

        entry = self._read_entry(path)
        if not self._is_same_key(entry.key, key):
            # Hash collision: the file belongs to another key.
            raise MissingFileForKeyError("Cache file holds a different key", key=key)
        return entry

    def _is_same_key(self, stored: Any, key: K) -> bool:
        # Untyped entries decode UUIDs, tuples and enums into plain JSON
        # types, so keys are compared in their encoded form.
        if stored == key:
            return True
        coder = self._config.coder
        return coder.encode(stored) == coder.encode(key)

    def _ensure_valid_cache_directory(self) -> None:
        fs = self._config.file_system
        if fs.file_exists(self.cache_directory) and not fs.is_directory(self.cache_directory):
            raise InvalidCacheIdError(
                f"{self.cache_directory} exists and is not a directory", key=str(self._id)
            )

    def _make_cache_directory_if_required(self) -> None:
        self._ensure_valid_cache_directory()
        if self._config.file_system.is_directory(self.cache_directory):
            return

        try:
            self._config.file_system.create_directory(self.cache_directory)
        except OSError as exc:
            raise InsufficientPermissionsError(
                f"Cannot create cache directory {self.cache_directory}: {exc}"
            ) from exc
