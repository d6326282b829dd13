"""Tests for host configuration loading."""
import logging
import pytest
from pathlib import Path
from src.host.config import HostConfig, _parse_bool, load_config_from_env


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SHADOWMUTE_WORLD_PATH", "SHADOWMUTE_FILENAME", "SHADOWMUTE_AUDIT",
                 "SHADOWMUTE_ORIGIN", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    def test_defaults(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("SHADOWMUTE_WORLD_PATH", str(tmp_path))
        config = load_config_from_env()
        assert config == HostConfig(world_path=tmp_path)
        assert config.store_path == tmp_path / "shadowmute_players.json"

    def test_missing_world_path(self):
        with pytest.raises(ValueError, match="SHADOWMUTE_WORLD_PATH"):
            load_config_from_env()

    def test_overrides(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("SHADOWMUTE_WORLD_PATH", str(tmp_path))
        monkeypatch.setenv("SHADOWMUTE_FILENAME", "mutes.json")
        monkeypatch.setenv("SHADOWMUTE_AUDIT", "no")
        monkeypatch.setenv("SHADOWMUTE_ORIGIN", "00_custom")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        config = load_config_from_env()
        assert config.store_path == tmp_path / "mutes.json"
        assert config.audit is False
        assert config.origin == "00_custom"
        assert config.log_level == "DEBUG"

    def test_filename_must_be_plain(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("SHADOWMUTE_WORLD_PATH", str(tmp_path))
        monkeypatch.setenv("SHADOWMUTE_FILENAME", "../elsewhere.json")
        with pytest.raises(ValueError, match="plain file name"):
            load_config_from_env()

    def test_unknown_log_level(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("SHADOWMUTE_WORLD_PATH", str(tmp_path))
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(ValueError, match="LOG_LEVEL"):
            load_config_from_env()


class TestParseBool:
    @pytest.mark.parametrize("value", ["1", "true", "YES"])
    def test_true(self, value):
        assert _parse_bool(value, default=False) is True

    @pytest.mark.parametrize("value", ["0", "false", "No"])
    def test_false(self, value):
        assert _parse_bool(value, default=True) is False

    def test_empty_uses_default(self):
        assert _parse_bool("", default=True) is True

    def test_unrecognised_warns(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert _parse_bool("ture", default=True) is True
        assert "Unrecognised boolean value" in caplog.text
