"""Local file-system accessor using pathlib and shutil."""

from __future__ import annotations

import shutil
from pathlib import Path

import structlog

from persistkit.interfaces.file_system import IFileSystemAccessor
from persistkit.utils.logging import get_logger


class LocalFileSystemAccessor(IFileSystemAccessor):
    """Access the real filesystem.

    The two predicates never raise; like ``os.path.exists`` they answer
    ``False`` for paths the OS refuses to stat.

    ``remove`` deletes directories recursively and ``copy`` copies whole
    trees when the source is a directory.
    """

    def __init__(self) -> None:
        self._logger: structlog.BoundLogger = get_logger(__name__)

    def list_directory(self, path: Path) -> list[Path]:
        return sorted(path.iterdir())

    def create_directory(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)
        self._logger.debug("directory_created", path=str(path))

    def file_exists(self, path: Path) -> bool:
        # Names the OS rejects (ENAMETOOLONG, EACCES on a parent) count as absent.
        try:
            return path.exists()
        except OSError:
            return False

    def is_directory(self, path: Path) -> bool:
        try:
            return path.is_dir()
        except OSError:
            return False

    def read(self, path: Path) -> bytes:
        return path.read_bytes()

    def remove(self, path: Path) -> None:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
        self._logger.debug("path_removed", path=str(path))

    def write(self, data: bytes, path: Path) -> None:
        path.write_bytes(data)

    def copy(self, source: Path, destination: Path) -> None:
        if source.is_dir():
            shutil.copytree(source, destination)
        else:
            shutil.copy2(source, destination)
        self._logger.debug("path_copied", source=str(source), destination=str(destination))
