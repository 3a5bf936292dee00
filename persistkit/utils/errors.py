"""Custom exception hierarchy for persistkit.

All library exceptions inherit from :class:`PersistKitError`, which carries
a human-readable ``message`` and an optional ``key`` identifying the cache or
storage entry involved in the failure.

The hierarchy is organized by component:

    PersistKitError  (base -- catch-all for any persistkit error)
    +-- CoderError
    |   +-- InvalidEncodingError     (malformed base64 / text encoding)
    |   +-- SerializationError       (malformed JSON / schema mismatch)
    +-- CacheError
    |   +-- MissingValueForKeyError  (lookup or removal miss)
    |   |   +-- MissingFileForKeyError
    |   +-- InsufficientPermissionsError
    |   +-- InvalidCacheIdError      (a file occupies the cache directory path)
    +-- StorageError
    |   +-- KeyAlreadyExistsError    (duplicate insert)
    |   |   +-- FileAlreadyExistsError
    |   +-- KeyDoesNotExistError     (lookup miss)
    |   |   +-- FileDoesNotExistError
    |   +-- WriteFailureError
    |   +-- ReadFailureError
    |   +-- InvalidDirectoryError    (reserved)
    |   +-- MigrationFailedError     (reserved)
    +-- ConfigurationError

Underlying ``OSError`` and pydantic errors are chained via ``raise ... from``
so the original cause stays available on ``__cause__``.
"""

from __future__ import annotations

from typing import Any


class PersistKitError(Exception):
    """Base exception for all persistkit errors.

    The ``__str__`` method appends the offending key, when known, for
    easier log scanning, e.g. ``Key already exists (key='foo')``.
    """

    def __init__(
        self,
        message: str = "An unexpected persistence error occurred",
        key: Any = None,
    ) -> None:
        self._message = message
        self._key = key
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def key(self) -> Any:
        return self._key

    def __str__(self) -> str:
        if self._key is not None:
            return f"{self._message} (key={self._key!r})"
        return self._message


# ---------------------------------------------------------------------------
# Coder errors
# ---------------------------------------------------------------------------

class CoderError(PersistKitError):
    """Raised when a value cannot be encoded or decoded."""

    def __init__(self, message: str = "Coding failed", key: Any = None) -> None:
        super().__init__(message=message, key=key)


class InvalidEncodingError(CoderError):
    """Raised for malformed base64 input or text invalid under an encoding."""

    def __init__(
        self,
        message: str = "Invalid encoding",
        encoding: str | None = None,
        key: Any = None,
    ) -> None:
        self._encoding = encoding
        super().__init__(message=message, key=key)

    @property
    def encoding(self) -> str | None:
        return self._encoding


class SerializationError(CoderError):
    """Raised when JSON is malformed, does not match the target type, or a
    value cannot be serialized at all."""

    def __init__(self, message: str = "Serialization failed", key: Any = None) -> None:
        super().__init__(message=message, key=key)


# ---------------------------------------------------------------------------
# Cache errors
# ---------------------------------------------------------------------------

class CacheError(PersistKitError):
    """Base class for cache failures."""

    def __init__(self, message: str = "Cache operation failed", key: Any = None) -> None:
        super().__init__(message=message, key=key)


class MissingValueForKeyError(CacheError):
    """Raised when a cache holds no value for the requested key."""

    def __init__(self, message: str = "Missing value for key", key: Any = None) -> None:
        super().__init__(message=message, key=key)


class MissingFileForKeyError(MissingValueForKeyError):
    """Raised by file caches when no readable file exists for the key."""

    def __init__(self, message: str = "Missing file for key", key: Any = None) -> None:
        super().__init__(message=message, key=key)


class InsufficientPermissionsError(CacheError):
    """Raised when a cache entry cannot be written or removed."""

    def __init__(
        self, message: str = "Insufficient permissions to write cache entry", key: Any = None
    ) -> None:
        super().__init__(message=message, key=key)


class InvalidCacheIdError(CacheError):
    """Raised when a regular file already occupies the cache directory path."""

    def __init__(
        self,
        message: str = "A file with the name of the cache id already exists",
        key: Any = None,
    ) -> None:
        super().__init__(message=message, key=key)


# ---------------------------------------------------------------------------
# Storage errors
# ---------------------------------------------------------------------------

class StorageError(PersistKitError):
    """Base class for storage failures."""

    def __init__(self, message: str = "Storage operation failed", key: Any = None) -> None:
        super().__init__(message=message, key=key)


class KeyAlreadyExistsError(StorageError):
    """Raised by ``insert`` when the storage already holds the key.

    Use ``update`` to replace existing values.
    """

    def __init__(self, message: str = "Key already exists", key: Any = None) -> None:
        super().__init__(message=message, key=key)


class FileAlreadyExistsError(KeyAlreadyExistsError):
    """Raised by file storages when the key's file is already present."""

    def __init__(self, message: str = "File already exists", key: Any = None) -> None:
        super().__init__(message=message, key=key)


class KeyDoesNotExistError(StorageError):
    """Raised by ``value`` when the storage holds no entry for the key."""

    def __init__(self, message: str = "Key does not exist", key: Any = None) -> None:
        super().__init__(message=message, key=key)


class FileDoesNotExistError(KeyDoesNotExistError):
    """Raised by file storages when the key's file is missing."""

    def __init__(self, message: str = "File does not exist", key: Any = None) -> None:
        super().__init__(message=message, key=key)


class WriteFailureError(StorageError):
    """Raised when a storage file cannot be written or removed."""

    def __init__(self, message: str = "Write failure", key: Any = None) -> None:
        super().__init__(message=message, key=key)


class ReadFailureError(StorageError):
    """Raised when an existing storage file cannot be read."""

    def __init__(self, message: str = "Read failure", key: Any = None) -> None:
        super().__init__(message=message, key=key)


class InvalidDirectoryError(StorageError):
    """Reserved: the storage root is not usable as a directory."""

    def __init__(self, message: str = "Invalid storage directory", key: Any = None) -> None:
        super().__init__(message=message, key=key)


class MigrationFailedError(StorageError):
    """Reserved for storage format migrations. Never raised by persistkit."""

    def __init__(self, message: str = "Migration failed", key: Any = None) -> None:
        super().__init__(message=message, key=key)


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------

class ConfigurationError(PersistKitError):
    """Raised when settings or the YAML config file are invalid."""

    def __init__(self, message: str = "Invalid or missing configuration", key: Any = None) -> None:
        super().__init__(message=message, key=key)
