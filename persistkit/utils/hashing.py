"""Stable key hashing for file cache filenames.

Python's built-in ``hash()`` is salted per process for ``str`` and
``bytes``, so a filename derived from it would not survive a restart.
:func:`stable_key_hash` hashes the key's canonical JSON representation
with BLAKE2b instead, yielding the same decimal string in every process.

The hash is still lossy: two keys may collide and then share a file.
``FileCache`` detects that on read by comparing the stored key.
"""

from __future__ import annotations

import hashlib
from typing import Any

from pydantic_core import PydanticSerializationError, to_json

from persistkit.utils.errors import SerializationError

# 8 bytes keeps filenames short (at most 20 decimal digits).
_DIGEST_SIZE = 8


def stable_key_hash(key: Any) -> str:
    """Return a process-independent decimal hash string for *key*.

    Raises
    ------
    SerializationError
        If the key cannot be represented as JSON.
    """
    try:
        payload = to_json(key)
    except PydanticSerializationError as exc:
        raise SerializationError(f"Cannot hash key of type {type(key).__name__}: {exc}") from exc
    digest = hashlib.blake2b(payload, digest_size=_DIGEST_SIZE).digest()
    return str(int.from_bytes(digest, "big"))
