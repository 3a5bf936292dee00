"""Type-erasing and decorating typed coders.

``AnyTypedCoder`` is the common currency of coder chains: a typed coder
built from a plain ``encode``/``decode`` callable pair.  Every concrete
coder, and every untyped coder pinned to a type, can be wrapped into one.

``DecoratingTypedCoder`` composes two typed coders so that the output of
the inner coder becomes the input of the decorator.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from persistkit.interfaces.coder import ICoder, ITypedCoder

E = TypeVar("E")
D = TypeVar("D")
T = TypeVar("T")


class AnyTypedCoder(ITypedCoder[E, D]):
    """A typed coder backed by two callables.

    Parameters
    ----------
    encode:
        Callable turning a decoded value into its encoded form.
    decode:
        Callable turning an encoded value back into the decoded form.
    """

    def __init__(
        self,
        encode: Callable[[D], E],
        decode: Callable[[E], D],
    ) -> None:
        self._on_encode = encode
        self._on_decode = decode

    def encode(self, value: D) -> E:
        return self._on_encode(value)

    def decode(self, value: E) -> D:
        return self._on_decode(value)

    def erase(self) -> AnyTypedCoder[E, D]:
        return self

    @classmethod
    def from_typed_coder(cls, coder: ITypedCoder[E, D]) -> AnyTypedCoder[E, D]:
        """Wrap any other typed coder."""
        return cls(encode=coder.encode, decode=coder.decode)

    @classmethod
    def from_coder(cls, coder: ICoder[E], type_: type[D] | Any) -> AnyTypedCoder[E, D]:
        """Pin an untyped coder to *type_*."""
        return cls(
            encode=coder.encode,
            decode=lambda value: coder.decode(type_, value),
        )


class DecoratingTypedCoder(ITypedCoder[E, D], Generic[E, D, T]):
    """Chain ``coder`` (``D -> T``) with ``decorator`` (``T -> E``).

    ``encode = decorator.encode(coder.encode(value))`` and
    ``decode = coder.decode(decorator.decode(value))``.
    """

    def __init__(self, coder: ITypedCoder[T, D], decorator: ITypedCoder[E, T]) -> None:
        self._coder = coder
        self._decorator = decorator

    def encode(self, value: D) -> E:
        return self._decorator.encode(self._coder.encode(value))

    def decode(self, value: E) -> D:
        return self._coder.decode(self._decorator.decode(value))
