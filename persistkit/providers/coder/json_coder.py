"""JSON coder backed by pydantic.

Encoding uses ``pydantic_core.to_json``, which handles builtins, pydantic
models, dataclasses, datetimes, UUIDs, enums and paths.  Decoding validates
the payload against the requested type with ``pydantic.TypeAdapter``, so a
schema mismatch is reported the same way as malformed JSON.  Adapters are
built once per type; types pydantic has no schema for fail with
``SerializationError`` as well.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from persistkit.interfaces.coder import ICoder
from persistkit.utils.errors import SerializationError

T = TypeVar("T")


@lru_cache(maxsize=256)
def _cached_adapter(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


def adapter_for(type_: Any) -> TypeAdapter[Any]:
    """Return a ``TypeAdapter`` for *type_*, reusing one per hashable type."""
    try:
        hash(type_)
    except TypeError:
        return TypeAdapter(type_)
    return _cached_adapter(type_)


class JSONCoder(ICoder[bytes]):
    """Encode values as UTF-8 JSON bytes and decode them into any type.

    Parameters
    ----------
    indent:
        Optional indentation for human-readable output.  ``None`` produces
        compact JSON.
    """

    def __init__(self, indent: int | None = None) -> None:
        self._indent = indent

    def encode(self, value: Any) -> bytes:
        try:
            return to_json(value, indent=self._indent)
        except PydanticSerializationError as exc:
            raise SerializationError(
                f"Cannot encode {type(value).__name__} as JSON: {exc}"
            ) from exc

    def decode(self, type_: type[T] | Any, value: bytes) -> T:
        try:
            adapter = adapter_for(type_)
        except PydanticSchemaGenerationError as exc:
            raise SerializationError(f"Cannot decode JSON into {type_!r}: {exc}") from exc
        try:
            return adapter.validate_json(value)
        except ValidationError as exc:
            raise SerializationError(f"Cannot decode JSON into {type_!r}: {exc}") from exc
