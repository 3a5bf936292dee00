"""Abstract base class for storages.

Storages are strict where caches are lenient: ``insert`` refuses to
overwrite, ``value`` raises for unknown keys, and nothing is evicted behind
the caller's back.  Implementations provide the four primitives (``keys``,
``insert``, ``remove``, ``value``); the bulk operations and ``update`` are
derived here once for every backend.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class IStorage(ABC, Generic[K, V]):
    """Contract for key-value storages holding one value type."""

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    @abstractmethod
    def keys(self) -> list[K]:
        """Return every key in the storage.

        Never raises: a missing backing store yields an empty list and
        unreadable entries are skipped.
        """

    @abstractmethod
    def insert(self, value: V, key: K) -> None:
        """Store *value* under a new *key*.

        Raises
        ------
        KeyAlreadyExistsError
            If the storage already holds *key*.  Use :meth:`update` to
            replace values.
        """

    @abstractmethod
    def remove(self, key: K) -> None:
        """Delete *key*.  Removing an absent key is a no-op."""

    @abstractmethod
    def value(self, key: K) -> V:
        """Return the value stored under *key*.

        Raises
        ------
        KeyDoesNotExistError
            If the storage holds no entry for *key*.
        """

    # ------------------------------------------------------------------
    # Derived operations
    # ------------------------------------------------------------------

    def values(self) -> list[V]:
        """Return every value.  Loads the entire storage into memory."""
        return [self.value(key) for key in self.keys()]

    def content(self) -> dict[K, V]:
        """Return every key-value pair.  Loads the entire storage into memory."""
        return {key: self.value(key) for key in self.keys()}

    def clear(self) -> None:
        """Remove every key."""
        for key in self.keys():
            self.remove(key)

    def update(self, value: V, key: K) -> None:
        """Replace the value behind *key*, inserting it if absent.

        This is ``remove`` followed by ``insert`` and is not atomic: if the
        insert fails (or the process dies in between) the old value is gone.
        """
        self.remove(key)
        self.insert(value, key)
