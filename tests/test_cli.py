"""Tests for the read-only inspection CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import BaseModel
from typer.testing import CliRunner

from user_settings.bootstrap import Container
from user_settings.config.loader import clear_cache
from user_settings.presentation.cli.app import app

runner = CliRunner()


class ServiceSettings(BaseModel):
    service_name: str = "Contoso"
    timeout: int = 30


@pytest.fixture(autouse=True)
def _fresh_cache():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture()
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "storage.json"
    path.write_text(json.dumps({"root_dir": str(tmp_path / "store")}), encoding="utf-8")
    return path


@pytest.fixture()
def populated(config_file: Path) -> Path:
    container = Container(config_path=config_file)
    container.provider("Prov").save("A", ServiceSettings())
    container.provider("Prov").save("B", ServiceSettings(timeout=5))
    container.provider("Other").save("C", ServiceSettings())
    return config_file


class TestPath:
    def test_prints_store_directory(self, config_file: Path, tmp_path: Path) -> None:
        result = runner.invoke(app, ["path", "--config", str(config_file)])
        assert result.exit_code == 0
        assert str(tmp_path / "store") in result.output


class TestList:
    def test_lists_all_entries(self, populated: Path) -> None:
        result = runner.invoke(app, ["list", "--config", str(populated)])
        assert result.exit_code == 0
        for name in ("Prov_A.xml", "Prov_B.xml", "Other_C.xml"):
            assert name in result.output

    def test_filters_by_provider(self, populated: Path) -> None:
        result = runner.invoke(app, ["list", "--provider", "Prov", "--config", str(populated)])
        assert result.exit_code == 0
        assert "Prov_A.xml" in result.output
        assert "Other_C.xml" not in result.output

    def test_empty_store(self, config_file: Path) -> None:
        result = runner.invoke(app, ["list", "--config", str(config_file)])
        assert result.exit_code == 0
        assert "No settings stored" in result.output


class TestShow:
    def test_shows_xml(self, populated: Path) -> None:
        result = runner.invoke(app, ["show", "Prov", "B", "--config", str(populated)])
        assert result.exit_code == 0
        assert "ServiceSettings" in result.output
        assert "Contoso" in result.output

    def test_missing_entry(self, populated: Path) -> None:
        result = runner.invoke(app, ["show", "Prov", "Z", "--config", str(populated)])
        assert result.exit_code == 1
        assert "No settings stored as Prov_Z.xml" in result.output

    def test_invalid_entry_name(self, populated: Path) -> None:
        result = runner.invoke(app, ["show", "../Prov", "A", "--config", str(populated)])
        assert result.exit_code == 1
        assert "Invalid isolated storage entry name" in result.output


def test_no_args_shows_help() -> None:
    result = runner.invoke(app, [])
    assert "Usage" in result.output
