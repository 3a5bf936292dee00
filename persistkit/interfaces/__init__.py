"""Public interface definitions for coders, caches, storages and file access.

Callers depend on these abstract base classes; concrete implementations
live in ``persistkit/providers/`` and are chosen at construction time.
File-backed providers receive their filesystem through
:class:`IFileSystemAccessor`, which is what makes them testable without
touching the disk.

Re-exports
----------
ITypedCoder, ICoder
    Coder contracts.
ICache
    Best-effort key-value cache contract.
IStorage
    Strict key-value storage contract with derived bulk operations.
IFileSystemAccessor
    Minimal file operation seam.
"""

from persistkit.interfaces.cache import ICache
from persistkit.interfaces.coder import ICoder, ITypedCoder
from persistkit.interfaces.file_system import IFileSystemAccessor
from persistkit.interfaces.storage import IStorage

__all__ = [
    "ICache",
    "ICoder",
    "IFileSystemAccessor",
    "IStorage",
    "ITypedCoder",
]
