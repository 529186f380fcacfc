"""Tests for the storage configuration system."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from user_settings.config.loader import clear_cache, get_config, load_config
from user_settings.config.models import StorageConfig
from user_settings.domain.errors import ConfigurationError
from user_settings.domain.models.enums import LogLevel


@pytest.fixture(autouse=True)
def _fresh_cache():
    """Ensure a clean config cache for every test."""
    clear_cache()
    yield
    clear_cache()


class TestDefaults:
    def test_default_values(self):
        cfg = get_config()
        assert cfg.app_name == "user_settings"
        assert cfg.app_author is None
        assert cfg.roaming is True
        assert cfg.root_dir is None
        assert cfg.log_level == LogLevel.WARNING

    def test_default_is_cached(self):
        assert load_config() is load_config()


class TestFileLoading:
    def test_loads_values(self, tmp_path: Path):
        path = tmp_path / "storage.json"
        path.write_text(
            json.dumps(
                {
                    "app_name": "ConnectedServices",
                    "app_author": "Contoso",
                    "roaming": False,
                    "root_dir": str(tmp_path / "store"),
                    "log_level": "debug",
                }
            ),
            encoding="utf-8",
        )
        cfg = load_config(path)
        assert isinstance(cfg, StorageConfig)
        assert cfg.app_name == "ConnectedServices"
        assert cfg.app_author == "Contoso"
        assert cfg.roaming is False
        assert cfg.root_dir == tmp_path / "store"
        assert cfg.log_level == LogLevel.DEBUG

    def test_partial_file_keeps_defaults(self, tmp_path: Path):
        path = tmp_path / "storage.json"
        path.write_text('{"app_name": "Other"}', encoding="utf-8")
        cfg = load_config(path)
        assert cfg.app_name == "Other"
        assert cfg.roaming is True

    def test_file_is_cached(self, tmp_path: Path):
        path = tmp_path / "storage.json"
        path.write_text("{}", encoding="utf-8")
        first = load_config(path)
        path.write_text('{"app_name": "Changed"}', encoding="utf-8")
        assert load_config(path) is first
        clear_cache()
        assert load_config(path).app_name == "Changed"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "storage.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid config file"):
            load_config(path)

    def test_schema_violation(self, tmp_path: Path):
        path = tmp_path / "storage.json"
        path.write_text('{"app_name": "", "log_level": "loud"}', encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(path)
