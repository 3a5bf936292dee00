"""Utility modules for persistkit.

- **errors** -- exception hierarchy rooted at PersistKitError.
- **logging** -- structlog setup with console/JSON dual rendering.
- **hashing** -- process-independent key hashing for file cache names.
"""

from persistkit.utils.errors import (
    CacheError,
    CoderError,
    ConfigurationError,
    FileAlreadyExistsError,
    FileDoesNotExistError,
    InsufficientPermissionsError,
    InvalidCacheIdError,
    InvalidDirectoryError,
    InvalidEncodingError,
    KeyAlreadyExistsError,
    KeyDoesNotExistError,
    MigrationFailedError,
    MissingFileForKeyError,
    MissingValueForKeyError,
    PersistKitError,
    ReadFailureError,
    SerializationError,
    StorageError,
    WriteFailureError,
)
from persistkit.utils.hashing import stable_key_hash
from persistkit.utils.logging import configure_logging, get_logger

__all__ = [
    "CacheError",
    "CoderError",
    "ConfigurationError",
    "FileAlreadyExistsError",
    "FileDoesNotExistError",
    "InsufficientPermissionsError",
    "InvalidCacheIdError",
    "InvalidDirectoryError",
    "InvalidEncodingError",
    "KeyAlreadyExistsError",
    "KeyDoesNotExistError",
    "MigrationFailedError",
    "MissingFileForKeyError",
    "MissingValueForKeyError",
    "PersistKitError",
    "ReadFailureError",
    "SerializationError",
    "StorageError",
    "WriteFailureError",
    "configure_logging",
    "get_logger",
    "stable_key_hash",
]
