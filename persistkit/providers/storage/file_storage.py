"""File-system storage provider.

Layout::

    <config.root>/<key_coder.encode(key)>

The default key coder JSON-encodes the key and renders the bytes as
URL-safe base64, so every key maps to a filesystem-safe name that can be
decoded back into the key.  Files contain only the encoded value.

The storage directory is created lazily, and only by ``insert``.  Reads on
a storage that was never written to behave like an empty storage.
"""

from __future__ import annotations

from collections.abc import Hashable
from pathlib import Path
from typing import Any, Generic, TypeVar

import structlog

from persistkit.interfaces.coder import ITypedCoder
from persistkit.interfaces.storage import IStorage
from persistkit.models.config import FileStorageConfig
from persistkit.providers.coder.json_coder import JSONCoder
from persistkit.utils.errors import (
    CoderError,
    FileAlreadyExistsError,
    FileDoesNotExistError,
    ReadFailureError,
    WriteFailureError,
)
from persistkit.utils.logging import get_logger

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def default_key_coder(key_type: Any = Any) -> ITypedCoder[str, Any]:
    """Return the JSON -> URL-safe base64 key coder for *key_type*."""
    return JSONCoder().typed(key_type).base64_string(urlsafe=True)


class FileStorage(IStorage[K, V], Generic[K, V]):
    """Storage that keeps one file per key.

    Parameters
    ----------
    config:
        Location, coders and filesystem accessor.
    key_type, value_type:
        Types used to decode filenames and file contents.  ``Any`` yields
        plain JSON types.  Keys that decode to an unhashable value (a tuple
        stored without ``key_type``) are still readable through ``value`` but
        are left out of ``keys()`` and the bulk reads.
    """

    def __init__(
        self,
        config: FileStorageConfig | None = None,
        key_type: Any = Any,
        value_type: Any = Any,
    ) -> None:
        self._config = config or FileStorageConfig()
        self._key_coder = self._config.key_coder or default_key_coder(key_type)
        self._value_type = value_type
        self._logger: structlog.BoundLogger = get_logger(__name__)

    @property
    def config(self) -> FileStorageConfig:
        return self._config

    # ------------------------------------------------------------------
    # IStorage implementation
    # ------------------------------------------------------------------

    def keys(self) -> list[K]:
        fs = self._config.file_system
        if not fs.is_directory(self._config.root):
            return []

        try:
            paths = fs.list_directory(self._config.root)
        except OSError as exc:
            self._logger.warning(
                "storage_list_failed", directory=str(self._config.root), error=str(exc)
            )
            return []

        keys: list[K] = []
        for path in paths:
            try:
                key = self._make_key(path)
                # An untyped tuple key decodes to a list.
                hash(key)
            except (CoderError, TypeError) as exc:
                self._logger.debug("storage_file_skipped", path=str(path), error=str(exc))
                continue
            keys.append(key)
        return keys

    def insert(self, value: V, key: K) -> None:
        path = self._make_path(key)

        if self._config.file_system.file_exists(path):
            raise FileAlreadyExistsError(key=key)

        self._make_storage_directory_if_required()

        data = self._config.value_coder.encode(value)

        self._logger.info("storage_write", key=key, path=str(path))
        try:
            self._config.file_system.write(data, path)
        except OSError as exc:
            raise WriteFailureError(f"Cannot write {path}: {exc}", key=key) from exc

    def remove(self, key: K) -> None:
        path = self._make_path(key)

        # Removing a missing file is a no-op.
        if not self._config.file_system.file_exists(path):
            return

        self._logger.info("storage_delete", key=key, path=str(path))
        try:
            self._config.file_system.remove(path)
        except OSError as exc:
            raise WriteFailureError(f"Cannot remove {path}: {exc}", key=key) from exc

    def value(self, key: K) -> V:
        path = self._make_path(key)

        if not self._config.file_system.file_exists(path):
            raise FileDoesNotExistError(key=key)

        self._logger.debug("storage_read", key=key, path=str(path))
        try:
            data = self._config.file_system.read(path)
        except OSError as exc:
            raise ReadFailureError(f"Cannot read {path}: {exc}", key=key) from exc

        return self._config.value_coder.decode(self._value_type, data)

    # ------------------------------------------------------------------
    # Private
    # ------------------------------------------------------------------

    def _make_path(self, key: K) -> Path:
        return self._config.root / self._key_coder.encode(key)

    def _make_key(self, path: Path) -> K:
        return self._key_coder.decode(path.name)

    def _make_storage_directory_if_required(self) -> None:
        if self._config.file_system.is_directory(self._config.root):
            return

        try:
            self._config.file_system.create_directory(self._config.root)
        except OSError as exc:
            raise WriteFailureError(
                f"Cannot create storage directory {self._config.root}: {exc}"
            ) from exc
