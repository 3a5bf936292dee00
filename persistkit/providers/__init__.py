"""Concrete implementations of the persistkit interfaces.

PROVIDER MAP:
    Interface              →  Implementations
    ─────────────────────────────────────────────────────
    ICoder                 →  JSONCoder
    ITypedCoder            →  Base64Coder, StringCoder, AnyTypedCoder,
                              DecoratingTypedCoder
    ICache                 →  MemoryCache, FileCache, CodingCache
    IStorage               →  MemoryStorage, FileStorage
    IFileSystemAccessor    →  LocalFileSystemAccessor,
                              CallableFileSystemAccessor

AsyncStorage and JSONPreferences are facades rather than interface
implementations.
"""
