"""Text coder: ``bytes`` <-> ``str`` under a configurable encoding."""

from __future__ import annotations

from persistkit.interfaces.coder import ITypedCoder
from persistkit.utils.errors import InvalidEncodingError


class StringCoder(ITypedCoder[str, bytes]):
    """Interpret bytes as text in ``encoding`` (default UTF-8).

    ``encode`` fails when the bytes are not valid in the encoding,
    ``decode`` fails when the text cannot be represented in it (e.g.
    non-ASCII text with ``encoding="ascii"``).  Unknown encoding names fail
    on first use.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        return self._encoding

    def encode(self, value: bytes) -> str:
        try:
            return value.decode(self._encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            raise InvalidEncodingError(
                f"Bytes are not valid {self._encoding}: {exc}", encoding=self._encoding
            ) from exc

    def decode(self, value: str) -> bytes:
        try:
            return value.encode(self._encoding)
        except (UnicodeEncodeError, LookupError) as exc:
            raise InvalidEncodingError(
                f"Text cannot be represented in {self._encoding}: {exc}", encoding=self._encoding
            ) from exc
