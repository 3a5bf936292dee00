"""Awaitable facade over a blocking storage.

Every call is offloaded with ``asyncio.to_thread`` so file I/O does not
block the event loop.  Each call is still a single primitive of the wrapped
storage; nothing here adds transactions across calls.
"""

from __future__ import annotations

import asyncio
from typing import Generic, TypeVar

from persistkit.interfaces.storage import IStorage

K = TypeVar("K")
V = TypeVar("V")


class AsyncStorage(Generic[K, V]):
    """Expose an :class:`IStorage` through coroutines.

    Parameters
    ----------
    storage:
        The wrapped blocking storage.
    """

    def __init__(self, storage: IStorage[K, V]) -> None:
        self._storage = storage

    @property
    def storage(self) -> IStorage[K, V]:
        return self._storage

    async def keys(self) -> list[K]:
        return await asyncio.to_thread(self._storage.keys)

    async def insert(self, value: V, key: K) -> None:
        await asyncio.to_thread(self._storage.insert, value, key)

    async def remove(self, key: K) -> None:
        await asyncio.to_thread(self._storage.remove, key)

    async def value(self, key: K) -> V:
        return await asyncio.to_thread(self._storage.value, key)

    async def values(self) -> list[V]:
        return await asyncio.to_thread(self._storage.values)

    async def content(self) -> dict[K, V]:
        return await asyncio.to_thread(self._storage.content)

    async def clear(self) -> None:
        await asyncio.to_thread(self._storage.clear)

    async def update(self, value: V, key: K) -> None:
        await asyncio.to_thread(self._storage.update, value, key)
