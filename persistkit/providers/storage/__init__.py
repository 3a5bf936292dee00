"""Storage providers.

MemoryStorage holds its table in a dict for the lifetime of the process.
FileStorage keeps one file per key, named by the key's encoded form.
AsyncStorage wraps either one for use from coroutines.
"""

from persistkit.providers.storage.async_storage import AsyncStorage
from persistkit.providers.storage.file_storage import FileStorage, default_key_coder
from persistkit.providers.storage.memory_storage import MemoryStorage

__all__ = ["AsyncStorage", "FileStorage", "MemoryStorage", "default_key_coder"]
