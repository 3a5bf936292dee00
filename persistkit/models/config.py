"""Configuration objects for the file-backed cache and storage.

Both configs are frozen: they are built once, handed to a cache or storage,
and never mutated afterwards.  Every field has a default, so
``FileStorageConfig()`` alone yields a JSON storage under the configured
storage directory on the local filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

from persistkit.config.settings import get_settings
from persistkit.interfaces.coder import ICoder, ITypedCoder
from persistkit.interfaces.file_system import IFileSystemAccessor
from persistkit.providers.coder.json_coder import JSONCoder
from persistkit.providers.file_system.local_file_system import LocalFileSystemAccessor
from persistkit.utils.hashing import stable_key_hash


@dataclass(frozen=True)
class FileCacheConfig:
    """Configuration of a ``FileCache``.

    Attributes
    ----------
    root:
        Directory that holds the per-cache directories.
    coder:
        Coder for the ``{key, value}`` entries written to disk.
    file_system:
        Accessor used for every filesystem operation.
    key_hasher:
        Maps a key to its filename.  Must be deterministic across processes
        for a cache to be restorable.
    """

    root: Path = field(default_factory=lambda: get_settings().cache_dir)
    coder: ICoder[bytes] = field(default_factory=JSONCoder)
    file_system: IFileSystemAccessor = field(default_factory=LocalFileSystemAccessor)
    key_hasher: Callable[[Any], str] = stable_key_hash

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", Path(self.root))


@dataclass(frozen=True)
class FileStorageConfig:
    """Configuration of a ``FileStorage``.

    Attributes
    ----------
    root:
        Directory that holds one file per key.
    key_coder:
        Typed coder turning keys into filenames and back.  ``None`` selects
        JSON followed by URL-safe base64 for the storage's key type.
    value_coder:
        Coder for the file contents.
    file_system:
        Accessor used for every filesystem operation.
    """

    root: Path = field(default_factory=lambda: get_settings().storage_dir)
    key_coder: ITypedCoder[str, Any] | None = None
    value_coder: ICoder[bytes] = field(default_factory=JSONCoder)
    file_system: IFileSystemAccessor = field(default_factory=LocalFileSystemAccessor)

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", Path(self.root))
