"""Shared pytest fixtures for the persistkit test suite."""

from __future__ import annotations

import os
import uuid
from collections.abc import Iterator
from pathlib import Path

import pytest
from pydantic import BaseModel

from persistkit.config.settings import get_settings
from persistkit.interfaces.file_system import IFileSystemAccessor
from persistkit.models.config import FileCacheConfig, FileStorageConfig
from persistkit.providers.file_system import FileSystemAccessorBuilder


class Person(BaseModel):
    """Small pydantic model used as a structured value in tests."""

    name: str
    age: int


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop PERSISTKIT_* variables and the cached Settings around each test."""
    for name in list(os.environ):
        if name.startswith("PERSISTKIT_"):
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# File backend fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def cache_root(tmp_path: Path) -> Path:
    """Return a not-yet-created directory for file caches."""
    return tmp_path / "cache"


@pytest.fixture
def storage_root(tmp_path: Path) -> Path:
    """Return a not-yet-created directory for file storages."""
    return tmp_path / "storage"


@pytest.fixture
def cache_config(cache_root: Path) -> FileCacheConfig:
    return FileCacheConfig(root=cache_root)


@pytest.fixture
def storage_config(storage_root: Path) -> FileStorageConfig:
    return FileStorageConfig(root=storage_root)


@pytest.fixture
def cache_id() -> uuid.UUID:
    return uuid.UUID("9f1c0d4e-6a53-4c1b-8f0e-2b7d5a3c9e10")


@pytest.fixture
def person() -> Person:
    return Person(name="Ada", age=36)


# ---------------------------------------------------------------------------
# In-memory file system
# ---------------------------------------------------------------------------


class InMemoryFiles:
    """Dict-backed file tree driven through FileSystemAccessorBuilder.

    Records every write so tests can assert on what a backend persisted
    without touching the disk.
    """

    def __init__(self) -> None:
        self.files: dict[Path, bytes] = {}
        self.directories: set[Path] = set()
        self.writes: list[Path] = []

    def accessor(self) -> IFileSystemAccessor:
        return (
            FileSystemAccessorBuilder()
            .with_list_directory(self._list_directory)
            .with_create_directory(self._create_directory)
            .with_file_exists(lambda path: path in self.files or path in self.directories)
            .with_is_directory(lambda path: path in self.directories)
            .with_read(self._read)
            .with_remove(self._remove)
            .with_write(self._write)
            .with_copy(self._copy)
            .build()
        )

    def _list_directory(self, path: Path) -> list[Path]:
        if path not in self.directories:
            raise FileNotFoundError(path)
        children = {p for p in self.files if p.parent == path}
        children |= {d for d in self.directories if d.parent == path and d != path}
        return sorted(children)

    def _create_directory(self, path: Path) -> None:
        self.directories.add(path)
        self.directories.update(path.parents)

    def _read(self, path: Path) -> bytes:
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(path) from None

    def _remove(self, path: Path) -> None:
        if path in self.files:
            del self.files[path]
            return
        if path not in self.directories:
            raise FileNotFoundError(path)
        self.files = {p: d for p, d in self.files.items() if path not in p.parents}
        self.directories = {d for d in self.directories if d != path and path not in d.parents}

    def _write(self, data: bytes, path: Path) -> None:
        if path.parent not in self.directories:
            raise FileNotFoundError(path.parent)
        self.files[path] = data
        self.writes.append(path)

    def _copy(self, source: Path, destination: Path) -> None:
        self.files[destination] = self._read(source)


@pytest.fixture
def memory_files() -> InMemoryFiles:
    return InMemoryFiles()
