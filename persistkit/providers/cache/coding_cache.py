"""Cache adapter that stores encoded values in a bytes cache.

Lets one ``ICache[K, bytes]`` hold values of any serializable type::

    raw = MemoryCache[str, bytes]()
    users = CodingCache(raw, value_type=User)
    users.insert(User(name="ada"), "u1")
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

import structlog

from persistkit.interfaces.cache import ICache
from persistkit.interfaces.coder import ICoder
from persistkit.providers.coder.json_coder import JSONCoder
from persistkit.utils.errors import CoderError
from persistkit.utils.logging import get_logger

K = TypeVar("K")
V = TypeVar("V")


class CodingCache(ICache[K, V], Generic[K, V]):
    """Encode values with ``coder`` before handing them to ``cache``.

    Parameters
    ----------
    cache:
        Underlying cache of encoded payloads.
    value_type:
        Type the payloads are decoded into.
    coder:
        Coder for the payloads.  Defaults to :class:`JSONCoder`.
    """

    def __init__(
        self,
        cache: ICache[K, bytes],
        value_type: Any = Any,
        coder: ICoder[bytes] | None = None,
    ) -> None:
        self._cache = cache
        self._value_type = value_type
        self._coder = coder or JSONCoder()
        self._logger: structlog.BoundLogger = get_logger(__name__)

    def content(self) -> dict[K, V]:
        content: dict[K, V] = {}
        for key, data in self._cache.content().items():
            try:
                content[key] = self._coder.decode(self._value_type, data)
            except CoderError as exc:
                self._logger.debug("cache_entry_skipped", key=key, error=str(exc))
        return content

    def clear(self) -> None:
        self._cache.clear()

    def insert(self, value: V, key: K) -> None:
        self._cache.insert(self._coder.encode(value), key)

    def value(self, key: K) -> V:
        return self._coder.decode(self._value_type, self._cache.value(key))

    def remove(self, key: K) -> V:
        return self._coder.decode(self._value_type, self._cache.remove(key))
