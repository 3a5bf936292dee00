"""Unit tests for LocalFileSystemAccessor and FileSystemAccessorBuilder."""

from __future__ import annotations

from pathlib import Path

import pytest

from persistkit.providers.file_system import (
    CallableFileSystemAccessor,
    FileSystemAccessorBuilder,
    LocalFileSystemAccessor,
)


# ======================================================================
# LocalFileSystemAccessor
# ======================================================================


class TestLocalFileSystemAccessor:
    @pytest.fixture()
    def fs(self) -> LocalFileSystemAccessor:
        return LocalFileSystemAccessor()

    def test_write_and_read(self, fs: LocalFileSystemAccessor, tmp_path: Path) -> None:
        path = tmp_path / "file.bin"
        fs.write(b"payload", path)
        assert fs.read(path) == b"payload"

    def test_write_replaces_existing(self, fs: LocalFileSystemAccessor, tmp_path: Path) -> None:
        path = tmp_path / "file.bin"
        fs.write(b"old", path)
        fs.write(b"new", path)
        assert fs.read(path) == b"new"

    def test_create_directory_with_parents(
        self, fs: LocalFileSystemAccessor, tmp_path: Path
    ) -> None:
        path = tmp_path / "a" / "b" / "c"
        fs.create_directory(path)
        fs.create_directory(path)
        assert fs.is_directory(path)

    def test_predicates(self, fs: LocalFileSystemAccessor, tmp_path: Path) -> None:
        file_path = tmp_path / "file"
        file_path.write_bytes(b"")

        assert fs.file_exists(file_path)
        assert not fs.is_directory(file_path)
        assert fs.file_exists(tmp_path)
        assert fs.is_directory(tmp_path)
        assert not fs.file_exists(tmp_path / "missing")

    def test_predicates_answer_false_for_overlong_names(
        self, fs: LocalFileSystemAccessor, tmp_path: Path
    ) -> None:
        path = tmp_path / ("x" * 300)
        assert fs.file_exists(path) is False
        assert fs.is_directory(path) is False

    def test_list_directory_is_sorted(self, fs: LocalFileSystemAccessor, tmp_path: Path) -> None:
        for name in ("b", "c", "a"):
            (tmp_path / name).write_bytes(b"")
        assert fs.list_directory(tmp_path) == [tmp_path / "a", tmp_path / "b", tmp_path / "c"]

    def test_remove_file_and_tree(self, fs: LocalFileSystemAccessor, tmp_path: Path) -> None:
        file_path = tmp_path / "file"
        file_path.write_bytes(b"")
        tree = tmp_path / "tree"
        (tree / "nested").mkdir(parents=True)
        (tree / "nested" / "leaf").write_bytes(b"x")

        fs.remove(file_path)
        fs.remove(tree)

        assert not file_path.exists()
        assert not tree.exists()

    def test_read_missing_file_raises_os_error(
        self, fs: LocalFileSystemAccessor, tmp_path: Path
    ) -> None:
        with pytest.raises(OSError):
            fs.read(tmp_path / "missing")

    def test_copy_file_and_tree(self, fs: LocalFileSystemAccessor, tmp_path: Path) -> None:
        source = tmp_path / "source.bin"
        source.write_bytes(b"data")
        fs.copy(source, tmp_path / "copy.bin")
        assert (tmp_path / "copy.bin").read_bytes() == b"data"

        tree = tmp_path / "tree"
        tree.mkdir()
        (tree / "leaf").write_bytes(b"x")
        fs.copy(tree, tmp_path / "tree-copy")
        assert (tmp_path / "tree-copy" / "leaf").read_bytes() == b"x"


# ======================================================================
# FileSystemAccessorBuilder
# ======================================================================


class TestFileSystemAccessorBuilder:
    def test_defaults_to_local_operations(self, tmp_path: Path) -> None:
        fs = FileSystemAccessorBuilder().build()
        path = tmp_path / "file"

        fs.write(b"x", path)

        assert isinstance(fs, CallableFileSystemAccessor)
        assert fs.read(path) == b"x"

    def test_replaces_single_operation(self, tmp_path: Path) -> None:
        written: list[tuple[bytes, Path]] = []

        fs = FileSystemAccessorBuilder().with_write(lambda d, p: written.append((d, p))).build()
        path = tmp_path / "file"
        fs.write(b"x", path)

        assert written == [(b"x", path)]
        assert not path.exists()

    def test_chained_replacements(self, tmp_path: Path) -> None:
        fs = (
            FileSystemAccessorBuilder()
            .with_file_exists(lambda p: True)
            .with_is_directory(lambda p: False)
            .with_read(lambda p: b"stub")
            .build()
        )

        assert fs.file_exists(tmp_path / "anything")
        assert not fs.is_directory(tmp_path)
        assert fs.read(tmp_path / "anything") == b"stub"

    def test_builds_on_custom_base(self, tmp_path: Path) -> None:
        base = FileSystemAccessorBuilder().with_read(lambda p: b"base").build()
        fs = FileSystemAccessorBuilder(base).with_list_directory(lambda p: []).build()

        assert fs.read(tmp_path) == b"base"
        assert fs.list_directory(tmp_path) == []

    def test_replaced_failure_surfaces(self, tmp_path: Path) -> None:
        def denied(path: Path) -> None:
            raise PermissionError(path)

        fs = (
            FileSystemAccessorBuilder()
            .with_create_directory(denied)
            .with_remove(denied)
            .with_copy(lambda source, destination: None)
            .build()
        )

        with pytest.raises(PermissionError):
            fs.create_directory(tmp_path / "new")
        with pytest.raises(PermissionError):
            fs.remove(tmp_path)
        fs.copy(tmp_path, tmp_path / "copy")
        assert not (tmp_path / "copy").exists()
