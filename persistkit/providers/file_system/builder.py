"""Builder for file-system accessors with individually replaced operations.

Starts from the local filesystem and swaps single operations for custom
callables, e.g. a ``write`` that always fails::

    def failing_write(data: bytes, path: Path) -> None:
        raise PermissionError(path)

    accessor = FileSystemAccessorBuilder().with_write(failing_write).build()

Every ``with_*`` method returns the builder so calls can be chained.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from persistkit.interfaces.file_system import IFileSystemAccessor
from persistkit.providers.file_system.local_file_system import LocalFileSystemAccessor


@dataclass(frozen=True)
class CallableFileSystemAccessor(IFileSystemAccessor):
    """An accessor whose operations are plain callables."""

    list_directory_fn: Callable[[Path], list[Path]]
    create_directory_fn: Callable[[Path], None]
    file_exists_fn: Callable[[Path], bool]
    is_directory_fn: Callable[[Path], bool]
    read_fn: Callable[[Path], bytes]
    remove_fn: Callable[[Path], None]
    write_fn: Callable[[bytes, Path], None]
    copy_fn: Callable[[Path, Path], None]

    def list_directory(self, path: Path) -> list[Path]:
        return self.list_directory_fn(path)

    def create_directory(self, path: Path) -> None:
        self.create_directory_fn(path)

    def file_exists(self, path: Path) -> bool:
        return self.file_exists_fn(path)

    def is_directory(self, path: Path) -> bool:
        return self.is_directory_fn(path)

    def read(self, path: Path) -> bytes:
        return self.read_fn(path)

    def remove(self, path: Path) -> None:
        self.remove_fn(path)

    def write(self, data: bytes, path: Path) -> None:
        self.write_fn(data, path)

    def copy(self, source: Path, destination: Path) -> None:
        self.copy_fn(source, destination)


class FileSystemAccessorBuilder:
    """Assemble a :class:`CallableFileSystemAccessor` step by step.

    Parameters
    ----------
    base:
        Accessor providing every operation that is not replaced.
        Defaults to :class:`LocalFileSystemAccessor`.
    """

    def __init__(self, base: IFileSystemAccessor | None = None) -> None:
        base = base or LocalFileSystemAccessor()
        self._list_directory: Callable[[Path], list[Path]] = base.list_directory
        self._create_directory: Callable[[Path], None] = base.create_directory
        self._file_exists: Callable[[Path], bool] = base.file_exists
        self._is_directory: Callable[[Path], bool] = base.is_directory
        self._read: Callable[[Path], bytes] = base.read
        self._remove: Callable[[Path], None] = base.remove
        self._write: Callable[[bytes, Path], None] = base.write
        self._copy: Callable[[Path, Path], None] = base.copy

    def with_list_directory(self, operation: Callable[[Path], list[Path]]) -> FileSystemAccessorBuilder:
        self._list_directory = operation
        return self

    def with_create_directory(self, operation: Callable[[Path], None]) -> FileSystemAccessorBuilder:
        self._create_directory = operation
        return self

    def with_file_exists(self, operation: Callable[[Path], bool]) -> FileSystemAccessorBuilder:
        self._file_exists = operation
        return self

    def with_is_directory(self, operation: Callable[[Path], bool]) -> FileSystemAccessorBuilder:
        self._is_directory = operation
        return self

    def with_read(self, operation: Callable[[Path], bytes]) -> FileSystemAccessorBuilder:
        self._read = operation
        return self

    def with_remove(self, operation: Callable[[Path], None]) -> FileSystemAccessorBuilder:
        self._remove = operation
        return self

    def with_write(self, operation: Callable[[bytes, Path], None]) -> FileSystemAccessorBuilder:
        self._write = operation
        return self

    def with_copy(self, operation: Callable[[Path, Path], None]) -> FileSystemAccessorBuilder:
        self._copy = operation
        return self

    def build(self) -> CallableFileSystemAccessor:
        return CallableFileSystemAccessor(
            list_directory_fn=self._list_directory,
            create_directory_fn=self._create_directory,
            file_exists_fn=self._file_exists,
            is_directory_fn=self._is_directory,
            read_fn=self._read,
            remove_fn=self._remove,
            write_fn=self._write,
            copy_fn=self._copy,
        )
