"""Unit tests for Settings, load_config and load_settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from persistkit.config import Settings, get_settings, load_config, load_settings
from persistkit.models.config import FileCacheConfig, FileStorageConfig
from persistkit.utils.errors import ConfigurationError


@pytest.fixture(autouse=True)
def _working_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty directory so no stray .env file is picked up."""
    monkeypatch.chdir(tmp_path)


# ======================================================================
# Settings
# ======================================================================


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "xdg-cache"))
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg-data"))

        settings = Settings()

        assert settings.cache_dir == tmp_path / "xdg-cache" / "persistkit"
        assert settings.storage_dir == tmp_path / "xdg-data" / "persistkit"
        assert settings.memory_cache_max_size == 1024
        assert settings.log_level == "INFO"

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("PERSISTKIT_CACHE_DIR", str(tmp_path / "c"))
        monkeypatch.setenv("PERSISTKIT_MEMORY_CACHE_MAX_SIZE", "16")

        settings = Settings()

        assert settings.cache_dir == tmp_path / "c"
        assert settings.memory_cache_max_size == 16

    def test_dotenv_file(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("PERSISTKIT_LOG_LEVEL=DEBUG\n", encoding="utf-8")
        assert Settings().log_level == "DEBUG"

    def test_non_positive_max_size_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PERSISTKIT_MEMORY_CACHE_MAX_SIZE", "0")
        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_file_configs_default_to_settings(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("PERSISTKIT_CACHE_DIR", str(tmp_path / "c"))
        monkeypatch.setenv("PERSISTKIT_STORAGE_DIR", str(tmp_path / "s"))
        get_settings.cache_clear()

        assert FileCacheConfig().root == tmp_path / "c"
        assert FileStorageConfig().root == tmp_path / "s"

    def test_file_config_root_coerced_to_path(self, tmp_path: Path) -> None:
        config = FileStorageConfig(root=str(tmp_path))
        assert config.root == tmp_path


# ======================================================================
# load_config / load_settings
# ======================================================================


class TestLoadConfig:
    def test_missing_file_yields_empty_config(self, tmp_path: Path) -> None:
        assert load_config(tmp_path / "absent.yaml") == {}

    def test_reads_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "persistkit.yaml"
        path.write_text("memory_cache_max_size: 8\nlog_level: WARNING\n", encoding="utf-8")

        assert load_config(path) == {"memory_cache_max_size": 8, "log_level": "WARNING"}

    def test_environment_overrides_yaml(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = tmp_path / "persistkit.yaml"
        path.write_text("memory_cache_max_size: 8\nlog_level: WARNING\n", encoding="utf-8")
        monkeypatch.setenv("PERSISTKIT_LOG_LEVEL", "DEBUG")

        config = load_config(path)

        assert config["log_level"] == "DEBUG"
        assert config["memory_cache_max_size"] == 8

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "persistkit.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == {}

    def test_malformed_yaml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "persistkit.yaml"
        path.write_text("log_level: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "persistkit.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_invalid_environment_raises(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PERSISTKIT_MEMORY_CACHE_MAX_SIZE", "lots")
        with pytest.raises(ConfigurationError):
            load_config(tmp_path / "absent.yaml")


class TestLoadSettings:
    def test_builds_settings_from_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "persistkit.yaml"
        path.write_text(
            f"cache_dir: {tmp_path / 'cache'}\nmemory_cache_max_size: 32\n", encoding="utf-8"
        )

        settings = load_settings(path)

        assert settings.cache_dir == tmp_path / "cache"
        assert settings.memory_cache_max_size == 32

    def test_invalid_value_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "persistkit.yaml"
        path.write_text("memory_cache_max_size: -1\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_settings(path)
