"""Abstract base classes for value coders.

Two flavours of coder exist:

``ITypedCoder[Encoded, Decoded]``
    Both ends are fixed.  Typed coders compose: ``inner.decorate(outer)``
    feeds ``inner``'s encoded output into ``outer`` and runs the decode side
    in reverse order, so ``value -> JSON bytes -> base64 str`` is simply
    ``JSONCoder().typed(Value).base64_string()``.

``ICoder[Wire]``
    Only the wire type is fixed.  ``decode`` takes the target type at call
    time, which is how a single JSON coder serves every storage regardless
    of its value type.  ``typed(type_)`` pins an untyped coder into a typed
    one so it can take part in a decoration chain.

Coders hold no mutable state and may be shared across threads.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from persistkit.providers.coder.typed_coder import AnyTypedCoder

E = TypeVar("E")  # Encoded type
D = TypeVar("D")  # Decoded type
W = TypeVar("W")  # Wire type of an untyped coder
T = TypeVar("T")
X = TypeVar("X")


class ITypedCoder(ABC, Generic[E, D]):
    """Contract for coders with a fixed encoded and decoded type."""

    @abstractmethod
    def encode(self, value: D) -> E:
        """Encode *value*.

        Raises
        ------
        CoderError
            If the value cannot be represented in the encoded form.
        """

    @abstractmethod
    def decode(self, value: E) -> D:
        """Decode *value* back into the decoded type.

        Raises
        ------
        CoderError
            If *value* is not a valid encoding.
        """

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def decorate(self, other: ITypedCoder[X, E]) -> AnyTypedCoder[X, D]:
        """Chain *other* behind this coder.

        ``encode`` runs ``self`` then ``other``; ``decode`` runs ``other``
        then ``self``.
        """
        from persistkit.providers.coder.typed_coder import DecoratingTypedCoder

        return DecoratingTypedCoder(coder=self, decorator=other).erase()

    def base64_string(self: ITypedCoder[bytes, D], urlsafe: bool = False) -> AnyTypedCoder[str, D]:
        """Represent this coder's ``bytes`` output as a base64 string."""
        from persistkit.providers.coder.base64_coder import Base64Coder

        return self.decorate(Base64Coder(urlsafe=urlsafe))

    def string(self: ITypedCoder[bytes, D], encoding: str = "utf-8") -> AnyTypedCoder[str, D]:
        """Represent this coder's ``bytes`` output as text in *encoding*."""
        from persistkit.providers.coder.string_coder import StringCoder

        return self.decorate(StringCoder(encoding=encoding))

    def erase(self) -> AnyTypedCoder[E, D]:
        """Wrap this coder into an :class:`AnyTypedCoder`."""
        from persistkit.providers.coder.typed_coder import AnyTypedCoder

        return AnyTypedCoder.from_typed_coder(self)


class ICoder(ABC, Generic[W]):
    """Contract for coders whose decode target is chosen per call."""

    @abstractmethod
    def encode(self, value: Any) -> W:
        """Encode any supported value into the wire type.

        Raises
        ------
        SerializationError
            If the value cannot be serialized.
        """

    @abstractmethod
    def decode(self, type_: type[T] | Any, value: W) -> T:
        """Decode *value* into an instance of *type_*.

        Parameters
        ----------
        type_:
            Any type descriptor the coder understands -- builtins, generic
            aliases like ``list[int]``, pydantic models, dataclasses or
            ``typing.Any``.
        value:
            The encoded payload.

        Raises
        ------
        SerializationError
            If the payload is malformed or does not match *type_*.
        """

    def typed(self, type_: type[T] | Any) -> AnyTypedCoder[W, T]:
        """Pin this coder to *type_*, producing a typed coder."""
        from persistkit.providers.coder.typed_coder import AnyTypedCoder

        return AnyTypedCoder.from_coder(self, type_)
