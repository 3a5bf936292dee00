"""Base64 coder: ``bytes`` <-> base64 ``str``."""

from __future__ import annotations

import base64
import binascii

from persistkit.interfaces.coder import ITypedCoder
from persistkit.utils.errors import InvalidEncodingError


class Base64Coder(ITypedCoder[str, bytes]):
    """Encode bytes as base64 text.

    Encoding never fails.  Decoding is strict: characters outside the
    alphabet or bad padding raise :class:`InvalidEncodingError`.

    Parameters
    ----------
    urlsafe:
        Use the URL- and filename-safe alphabet (``-`` and ``_`` instead of
        ``+`` and ``/``).
    """

    def __init__(self, urlsafe: bool = False) -> None:
        self._altchars = b"-_" if urlsafe else None

    def encode(self, value: bytes) -> str:
        return base64.b64encode(value, altchars=self._altchars).decode("ascii")

    def decode(self, value: str) -> bytes:
        try:
            return base64.b64decode(value, altchars=self._altchars, validate=True)
        except (binascii.Error, ValueError) as exc:
            # ValueError covers non-ASCII input.
            raise InvalidEncodingError(f"Invalid base64 input: {exc}", encoding="base64") from exc
