"""Unit tests for the catalog settings and their loaders."""
from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

import pytest

from recipe_catalog.config import (
    CatalogSettings,
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    load_settings,
)

_URI = "mongodb://localhost:27017"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so that values loaded from .env files are undone too
    for name in ("MONGO_URI", "DATABASE", "COLLECTION", "SEARCH_INDEX", "MAX_DOCS", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.setenv(f"RECIPES_{name}", "")
        monkeypatch.delenv(f"RECIPES_{name}")


class TestCatalogSettings:
    def test_defaults(self) -> None:
        settings = CatalogSettings(mongo_uri=_URI)
        assert settings.database == "recipes"
        assert settings.collection == "recipes"
        assert settings.search_index == "recipe-name"
        assert settings.max_docs == 100
        assert settings.log_level_number == logging.INFO
        assert settings.log_json is True

    def test_prefix_is_not_a_field(self) -> None:
        names = [f.name for f in dataclasses.fields(CatalogSettings)]
        assert "_prefix" not in names
        assert names[0] == "mongo_uri"
        assert CatalogSettings._prefix == "RECIPES"

    def test_mongo_uri_is_required(self) -> None:
        with pytest.raises(TypeError):
            CatalogSettings()  # type: ignore[call-arg]

    def test_srv_uri_accepted(self) -> None:
        CatalogSettings(mongo_uri="mongodb+srv://user:pw@cluster0.example.net")

    def test_rejects_non_mongo_uri(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            CatalogSettings(mongo_uri="postgres://localhost")
        assert exc_info.value.setting_name == "mongo_uri"

    def test_rejects_zero_max_docs(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            CatalogSettings(mongo_uri=_URI, max_docs=0)

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            CatalogSettings(mongo_uri=_URI, log_level="LOUD")

    def test_log_level_is_case_insensitive(self) -> None:
        assert CatalogSettings(mongo_uri=_URI, log_level="debug").log_level_number == logging.DEBUG


class TestEnvSettingsLoader:
    def test_missing_uri(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(CatalogSettings)
        assert exc_info.value.setting_name == "RECIPES_MONGO_URI"

    def test_loads_and_coerces(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RECIPES_MONGO_URI", _URI)
        monkeypatch.setenv("RECIPES_MAX_DOCS", "25")
        monkeypatch.setenv("RECIPES_LOG_JSON", "false")
        monkeypatch.setenv("RECIPES_SEARCH_INDEX", "recipe-summary")
        settings = EnvSettingsLoader().load(CatalogSettings)
        assert settings.max_docs == 25
        assert settings.log_json is False
        assert settings.search_index == "recipe-summary"

    def test_bad_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RECIPES_MONGO_URI", _URI)
        monkeypatch.setenv("RECIPES_MAX_DOCS", "many")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(CatalogSettings)
        assert exc_info.value.setting_name == "RECIPES_MAX_DOCS"

    def test_validation_error_is_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RECIPES_MONGO_URI", "http://nope")
        with pytest.raises(ConfigError):
            EnvSettingsLoader().load(CatalogSettings)


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text(f"RECIPES_MONGO_URI={_URI}\nRECIPES_DATABASE=catalog\n")
        settings = DotenvSettingsLoader(str(env_file)).load(CatalogSettings)
        assert settings.mongo_uri == _URI
        assert settings.database == "catalog"

    def test_environment_wins_without_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("RECIPES_MONGO_URI=mongodb://from-file\n")
        monkeypatch.setenv("RECIPES_MONGO_URI", _URI)
        assert DotenvSettingsLoader(str(env_file)).load(CatalogSettings).mongo_uri == _URI

    def test_load_settings_without_file(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RECIPES_MONGO_URI", _URI)
        assert load_settings(None).mongo_uri == _URI
