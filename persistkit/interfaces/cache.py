"""Abstract base class for caches.

A cache is a best-effort key-value container: implementations may drop
entries at any time (memory pressure, LRU eviction, a cleaned-up cache
directory) and callers must be prepared to recompute a value.  Contrast
with :class:`~persistkit.interfaces.storage.IStorage`, which keeps every
entry until it is explicitly removed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class ICache(ABC, Generic[K, V]):
    """Contract for key-value caches."""

    @abstractmethod
    def content(self) -> dict[K, V]:
        """Return a snapshot of every readable entry.

        Entries that fail to load are skipped; this method never raises.
        Loading the whole cache can be expensive for file-backed caches.
        """

    @abstractmethod
    def clear(self) -> None:
        """Remove every entry.  Best-effort: failures are logged, not raised."""

    @abstractmethod
    def insert(self, value: V, key: K) -> None:
        """Store *value* under *key*, replacing any previous value.

        Raises
        ------
        InsufficientPermissionsError
            If a file-backed cache cannot write the entry.
        """

    @abstractmethod
    def value(self, key: K) -> V:
        """Return the value stored under *key*.

        Raises
        ------
        MissingValueForKeyError
            If the cache holds no value for *key*.
        """

    @abstractmethod
    def remove(self, key: K) -> V:
        """Remove *key* and return the value it held.

        Raises
        ------
        MissingValueForKeyError
            If the cache holds no value for *key*.
        """
