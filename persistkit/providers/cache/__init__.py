"""Cache providers.

MemoryCache is a bounded LRU map -- fast, volatile and local to the process.
FileCache keeps one file per entry below a UUID-named directory and can be
reopened across restarts by reusing the id.  CodingCache layers a coder on
top of any bytes cache.
"""

from persistkit.providers.cache.coding_cache import CodingCache
from persistkit.providers.cache.file_cache import FileCache
from persistkit.providers.cache.memory_cache import KeyTracker, MemoryCache

__all__ = ["CodingCache", "FileCache", "KeyTracker", "MemoryCache"]
