"""File-system accessor providers.

LocalFileSystemAccessor is the default for every file-backed cache and
storage.  FileSystemAccessorBuilder swaps individual operations, which is
how tests simulate permission errors or unreadable files.
"""

from persistkit.providers.file_system.builder import (
    CallableFileSystemAccessor,
    FileSystemAccessorBuilder,
)
from persistkit.providers.file_system.local_file_system import LocalFileSystemAccessor

__all__ = [
    "CallableFileSystemAccessor",
    "FileSystemAccessorBuilder",
    "LocalFileSystemAccessor",
]
