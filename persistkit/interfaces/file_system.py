"""Abstract base class for file-system access.

File-backed caches and storages never touch the filesystem directly; they
go through an injected :class:`IFileSystemAccessor`.  The local adapter
lives in ``persistkit/providers/file_system/`` and tests substitute
in-memory or failing accessors built with ``FileSystemAccessorBuilder``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class IFileSystemAccessor(ABC):
    """Contract for the minimal set of file operations persistkit needs.

    All operations are synchronous.  Every operation except the two
    predicates may raise :class:`OSError`.
    """

    @abstractmethod
    def list_directory(self, path: Path) -> list[Path]:
        """Return the paths of all entries directly inside *path*."""

    @abstractmethod
    def create_directory(self, path: Path) -> None:
        """Create *path* including missing parents.  Existing directories
        are left untouched."""

    @abstractmethod
    def file_exists(self, path: Path) -> bool:
        """Return ``True`` if a file or directory exists at *path*."""

    @abstractmethod
    def is_directory(self, path: Path) -> bool:
        """Return ``True`` if *path* exists and is a directory."""

    @abstractmethod
    def read(self, path: Path) -> bytes:
        """Return the full content of the file at *path*."""

    @abstractmethod
    def remove(self, path: Path) -> None:
        """Remove the file or the whole directory tree at *path*."""

    @abstractmethod
    def write(self, data: bytes, path: Path) -> None:
        """Write *data* to *path*, replacing any existing file."""

    @abstractmethod
    def copy(self, source: Path, destination: Path) -> None:
        """Copy the file (or directory tree) at *source* to *destination*."""
