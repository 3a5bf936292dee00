"""persistkit -- coders, caches and key-value storages with pluggable backends.

Typical use::

    from persistkit import FileStorage, FileStorageConfig

    storage = FileStorage(FileStorageConfig(root="/tmp/data"), value_type=dict)
    storage.insert({"a": 1}, "settings")
    storage.value("settings")
"""

from persistkit.interfaces import ICache, ICoder, IFileSystemAccessor, IStorage, ITypedCoder
from persistkit.models import CacheEntry, FileCacheConfig, FileStorageConfig
from persistkit.providers.cache import CodingCache, FileCache, MemoryCache
from persistkit.providers.coder import (
    AnyTypedCoder,
    Base64Coder,
    DecoratingTypedCoder,
    JSONCoder,
    StringCoder,
)
from persistkit.providers.file_system import FileSystemAccessorBuilder, LocalFileSystemAccessor
from persistkit.providers.preferences import JSONPreferences
from persistkit.providers.storage import AsyncStorage, FileStorage, MemoryStorage
from persistkit.utils.errors import (
    CacheError,
    CoderError,
    PersistKitError,
    StorageError,
)

__version__ = "0.1.0"

__all__ = [
    "AnyTypedCoder",
    "AsyncStorage",
    "Base64Coder",
    "CacheEntry",
    "CacheError",
    "CoderError",
    "CodingCache",
    "DecoratingTypedCoder",
    "FileCache",
    "FileCacheConfig",
    "FileStorage",
    "FileStorageConfig",
    "FileSystemAccessorBuilder",
    "ICache",
    "ICoder",
    "IFileSystemAccessor",
    "IStorage",
    "ITypedCoder",
    "JSONCoder",
    "JSONPreferences",
    "LocalFileSystemAccessor",
    "MemoryCache",
    "MemoryStorage",
    "PersistKitError",
    "StorageError",
    "StringCoder",
]
