"""In-memory storage provider.

Keeps the whole table in one dict for the lifetime of the instance.  Useful
for data that should not outlive the process and as a drop-in replacement
for ``FileStorage`` in tests.
"""

from __future__ import annotations

import threading
from collections.abc import Hashable, Mapping
from typing import TypeVar

import structlog

from persistkit.interfaces.storage import IStorage
from persistkit.utils.errors import KeyAlreadyExistsError, KeyDoesNotExistError
from persistkit.utils.logging import get_logger

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class MemoryStorage(IStorage[K, V]):
    """Thread-safe dict-backed storage.

    Each primitive runs under one lock; derived operations such as
    ``update`` are sequences of primitives and are not atomic.

    Parameters
    ----------
    initial_values:
        Entries available right after construction.
    """

    def __init__(self, initial_values: Mapping[K, V] | None = None) -> None:
        self._storage: dict[K, V] = dict(initial_values or {})
        self._lock = threading.Lock()
        self._logger: structlog.BoundLogger = get_logger(__name__)

    def keys(self) -> list[K]:
        with self._lock:
            return list(self._storage)

    def insert(self, value: V, key: K) -> None:
        with self._lock:
            if key in self._storage:
                raise KeyAlreadyExistsError(key=key)
            self._storage[key] = value
        self._logger.debug("storage_insert", key=key)

    def remove(self, key: K) -> None:
        with self._lock:
            if key not in self._storage:
                return
            del self._storage[key]
        self._logger.debug("storage_remove", key=key)

    def value(self, key: K) -> V:
        with self._lock:
            try:
                return self._storage[key]
            except KeyError:
                raise KeyDoesNotExistError(key=key) from None
