"""Coder providers.

JSONCoder is the untyped workhorse; Base64Coder and StringCoder are typed
``bytes <-> str`` decorators meant to be chained behind it, e.g.
``JSONCoder().typed(int).base64_string()``.
"""

from persistkit.providers.coder.base64_coder import Base64Coder
from persistkit.providers.coder.json_coder import JSONCoder
from persistkit.providers.coder.string_coder import StringCoder
from persistkit.providers.coder.typed_coder import AnyTypedCoder, DecoratingTypedCoder

__all__ = [
    "AnyTypedCoder",
    "Base64Coder",
    "DecoratingTypedCoder",
    "JSONCoder",
    "StringCoder",
]
