"""On-disk entry model for file caches.

A file cache names its files after a hash of the key, which cannot be
reversed.  Each file therefore stores the key next to the value so that
``content()`` can rebuild the mapping and lookups can detect hash
collisions.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

K = TypeVar("K")
V = TypeVar("V")


class CacheEntry(BaseModel, Generic[K, V]):
    """A key-value pair as persisted by ``FileCache``.

    Parameterize with the cache's key and value types before decoding,
    e.g. ``CacheEntry[int, str]``, so pydantic restores the exact types.
    """

    model_config = ConfigDict(frozen=True)

    key: K
    value: V
