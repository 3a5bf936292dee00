"""In-memory cache provider using a bounded ``cachetools.LRUCache``.

The LRU map is the single source of truth for which keys are cached.  When
it evicts the least-recently-used entry to make room, it notifies a
:class:`KeyTracker`; the tracker's key set exists only so that ``content()``
can enumerate entries.  Because a key may disappear from the LRU map
between reading the tracker and looking it up, a tracked key without an
entry is simply treated as absent.
"""

from __future__ import annotations

import threading
from collections.abc import Hashable, Mapping
from typing import Any, Callable, Generic, TypeVar

import structlog
from cachetools import Cache, LRUCache

from persistkit.config.settings import get_settings
from persistkit.interfaces.cache import ICache
from persistkit.utils.errors import MissingValueForKeyError
from persistkit.utils.logging import get_logger

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class _NotifyingLRUCache(LRUCache):
    """LRU map that reports every capacity eviction to a callback."""

    def __init__(self, maxsize: int, on_evict: Callable[[Any, Any], None]) -> None:
        super().__init__(maxsize=maxsize)
        self._on_evict = on_evict

    def popitem(self) -> tuple[Any, Any]:
        key, value = super().popitem()
        self._on_evict(key, value)
        return key, value


class KeyTracker(Generic[K]):
    """Set of keys that were inserted and have not been evicted since."""

    def __init__(self) -> None:
        self._keys: set[K] = set()

    @property
    def all(self) -> frozenset[K]:
        return frozenset(self._keys)

    def insert(self, key: K) -> None:
        self._keys.add(key)

    def evicted(self, key: K, value: Any = None) -> None:
        self._keys.discard(key)

    def reset(self) -> None:
        self._keys.clear()


class MemoryCache(ICache[K, V]):
    """Volatile cache holding at most ``max_size`` entries.

    Inserting into a full cache evicts the least-recently-used entry.  All
    operations are serialized by a re-entrant lock, so the eviction callback
    runs while the lock is held.

    Parameters
    ----------
    initial_values:
        Entries inserted on construction.
    max_size:
        Capacity of the cache.  Defaults to ``Settings.memory_cache_max_size``.
    """

    def __init__(
        self,
        initial_values: Mapping[K, V] | None = None,
        max_size: int | None = None,
    ) -> None:
        self._max_size = max_size if max_size is not None else get_settings().memory_cache_max_size
        self._key_tracker: KeyTracker[K] = KeyTracker()
        self._cache = _NotifyingLRUCache(maxsize=self._max_size, on_evict=self._on_evict)
        self._lock = threading.RLock()
        self._logger: structlog.BoundLogger = get_logger(__name__)

        for key, value in (initial_values or {}).items():
            self.insert(value, key)

    @property
    def max_size(self) -> int:
        return self._max_size

    # ------------------------------------------------------------------
    # ICache implementation
    # ------------------------------------------------------------------

    def content(self) -> dict[K, V]:
        with self._lock:
            content: dict[K, V] = {}
            for key in self._key_tracker.all:
                try:
                    content[key] = self._peek(key)
                except KeyError:
                    continue
            return content

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()
            self._key_tracker.reset()
        self._logger.debug("cache_clear")

    def insert(self, value: V, key: K) -> None:
        with self._lock:
            self._cache[key] = value
            self._key_tracker.insert(key)
        self._logger.debug("cache_set", key=key)

    def value(self, key: K) -> V:
        with self._lock:
            try:
                value = self._cache[key]
            except KeyError:
                self._logger.debug("cache_miss", key=key)
                raise MissingValueForKeyError(key=key) from None
        self._logger.debug("cache_hit", key=key)
        return value

    def remove(self, key: K) -> V:
        with self._lock:
            try:
                value = self._cache.pop(key)
            except KeyError:
                raise MissingValueForKeyError(key=key) from None
            self._key_tracker.evicted(key)
        self._logger.debug("cache_delete", key=key)
        return value

    # ------------------------------------------------------------------
    # Private
    # ------------------------------------------------------------------

    def _peek(self, key: K) -> V:
        # Plain Cache lookup leaves the LRU order untouched.
        return Cache.__getitem__(self._cache, key)

    def _on_evict(self, key: K, value: V) -> None:
        self._key_tracker.evicted(key, value)
        self._logger.debug("cache_evict", key=key)
