"""JSON-encoded preferences on top of a string-keyed bytes mapping.

Any ``MutableMapping[str, bytes]`` works as the backing store: a plain
dict for tests, ``dbm.open(...)`` for a lightweight on-disk store.  Reads
are forgiving -- a missing or undecodable value yields ``None`` or the
supplied default -- which suits user preferences that may have been
written by an older version of the application.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, TypeVar

import structlog

from persistkit.interfaces.coder import ICoder
from persistkit.providers.coder.json_coder import JSONCoder
from persistkit.utils.errors import CoderError
from persistkit.utils.logging import get_logger

T = TypeVar("T")

_NO_DEFAULT: Any = object()


class JSONPreferences:
    """Typed get/set access to a preferences store.

    Keys of any type are stored under ``str(key)``, so enum members and
    other objects with a stable string form can be used directly.

    Parameters
    ----------
    store:
        Backing mapping.  Defaults to a new in-memory dict.
    coder:
        Coder for stored values.  Defaults to :class:`JSONCoder`.
    """

    def __init__(
        self,
        store: MutableMapping[str, bytes] | None = None,
        coder: ICoder[bytes] | None = None,
    ) -> None:
        self._store: MutableMapping[str, bytes] = store if store is not None else {}
        self._coder = coder or JSONCoder()
        self._logger: structlog.BoundLogger = get_logger(__name__)

    def get(self, key: Any, type_: type[T] | Any = Any, default: Any = _NO_DEFAULT) -> T | None:
        """Return the value stored under *key* decoded as *type_*.

        Returns *default* (or ``None`` when no default is given) if the key
        is absent or its value cannot be decoded.
        """
        fallback = None if default is _NO_DEFAULT else default
        data = self._store.get(str(key))
        if data is None:
            return fallback

        try:
            return self._coder.decode(type_, data)
        except CoderError as exc:
            self._logger.debug("preference_decode_failed", key=str(key), error=str(exc))
            return fallback

    def set(self, value: Any, key: Any) -> None:
        """Store *value* under *key*.

        A value that cannot be encoded clears the key, so a later ``get``
        falls back to its default.
        """
        try:
            data = self._coder.encode(value)
        except CoderError as exc:
            self._logger.warning("preference_encode_failed", key=str(key), error=str(exc))
            self.remove(key)
            return
        self._store[str(key)] = data

    def remove(self, key: Any) -> None:
        """Drop *key* if present."""
        self._store.pop(str(key), None)

    def __contains__(self, key: object) -> bool:
        return str(key) in self._store
