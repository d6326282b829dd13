"""Tests for CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from src.cli.main import app
from src.cli.utils.config import ConfigManager

runner = CliRunner()


@pytest.fixture
def config_dir(tmp_path, monkeypatch) -> Path:
    config_dir = tmp_path / "config"
    monkeypatch.setattr(ConfigManager, "DEFAULT_DIR", config_dir)
    return config_dir


@pytest.fixture
def world(tmp_path) -> Path:
    return tmp_path / "world"


def _init(world: Path, operator: str = "admin1", *extra: str):
    return runner.invoke(
        app,
        ["init", "--operator", operator, "--world", str(world), "--force", *extra],
    )


def _entries(world: Path) -> dict:
    return json.loads((world / "shadowmute_players.json").read_text())["entries"]


class TestInitCommand:
    """Tests for shadowmute init."""

    def test_init_creates_config_and_store(self, config_dir, world):
        """Init writes config.yaml and an empty store."""
        result = _init(world)

        assert result.exit_code == 0
        assert "initialized successfully" in result.stdout
        assert (config_dir / "config.yaml").exists()
        assert _entries(world) == {}

    def test_init_json_output(self, config_dir, world):
        """Init with --json outputs JSON."""
        result = _init(world, "admin1", "--override", "--json")

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["status"] == "initialized"
        assert data["operator"] == "admin1"
        assert data["privileges"] == ["shadowmute", "shadowmute_override"]

    def test_init_fails_without_force(self, config_dir, world):
        """Init fails if config exists without --force."""
        _init(world)
        result = runner.invoke(
            app, ["init", "--operator", "admin2", "--world", str(world)]
        )

        assert result.exit_code == 1
        assert "already exists" in result.stdout

    def test_init_validates_operator(self, config_dir, world):
        """Init rejects invalid player names."""
        result = _init(world, "bad name")
        assert result.exit_code == 2

    def test_init_refuses_bad_store(self, config_dir, world):
        """Init does not overwrite a store with an unknown version."""
        world.mkdir()
        (world / "shadowmute_players.json").write_text('{"version": 7, "entries": {}}')

        result = _init(world)

        assert result.exit_code == 1
        assert not (config_dir / "config.yaml").exists()
        assert "version" in (world / "shadowmute_players.json").read_text()


class TestMuteCommand:
    """Tests for shadowmute mute."""

    def test_mute(self, config_dir, world):
        _init(world)
        result = runner.invoke(app, ["mute", "griefer", "--reason", "spam", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["status"] == "ok"
        assert data["target"] == "griefer"
        assert _entries(world) == {"griefer": {"reason": "spam", "by": "admin1"}}

    def test_mute_without_reason(self, config_dir, world):
        _init(world)
        result = runner.invoke(app, ["mute", "griefer"])

        assert result.exit_code == 0
        assert "Successfully" in result.stdout
        assert _entries(world)["griefer"]["reason"] == "(none)"

    def test_conflict_exit_code(self, config_dir, world):
        _init(world)
        runner.invoke(app, ["mute", "griefer", "-r", "spam"])
        _init(world, "admin2")

        result = runner.invoke(app, ["mute", "griefer", "-r", "other", "--json"])

        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["status"] == "conflict"
        assert data["record"] == {"target": "griefer", "reason": "spam", "by": "admin1"}
        assert _entries(world)["griefer"]["by"] == "admin1"

    def test_force_requires_override(self, config_dir, world):
        _init(world)
        result = runner.invoke(app, ["mute", "griefer", "--force", "--json"])

        assert result.exit_code == 1
        assert json.loads(result.stdout)["status"] == "denied"
        assert _entries(world) == {}

    def test_force_with_override(self, config_dir, world):
        _init(world)
        runner.invoke(app, ["mute", "griefer", "-r", "spam"])
        _init(world, "admin2", "--override")

        result = runner.invoke(app, ["mute", "griefer", "-r", "worse", "--force"])

        assert result.exit_code == 0
        assert _entries(world)["griefer"] == {"reason": "worse", "by": "admin2"}

    def test_unknown_user_rejected(self, config_dir, world):
        _init(world, "admin1", "--user", "griefer")
        result = runner.invoke(app, ["mute", "nobody"])

        assert result.exit_code == 2
        assert "never logged in" in result.stdout
        assert _entries(world) == {}

    def test_invalid_name(self, config_dir, world):
        _init(world)
        result = runner.invoke(app, ["mute", "not@valid"])
        assert result.exit_code == 2

    def test_requires_init(self, config_dir):
        result = runner.invoke(app, ["mute", "griefer"])
        assert result.exit_code == 1
        assert "shadowmute init" in result.stdout

    def test_corrupt_store_aborts(self, config_dir, world):
        _init(world)
        (world / "shadowmute_players.json").write_text("garbage")

        result = runner.invoke(app, ["mute", "griefer"])

        assert result.exit_code == 1
        assert (world / "shadowmute_players.json").read_text() == "garbage"

    def test_non_utf8_store_aborts(self, config_dir, world):
        _init(world)
        (world / "shadowmute_players.json").write_bytes(b"\xff\xfe\x00garbage")

        result = runner.invoke(app, ["mute", "griefer"])

        assert result.exit_code == 1
        assert "UTF-8" in result.stdout


class TestUnmuteCommand:
    """Tests for shadowmute unmute."""

    def test_unmute_own(self, config_dir, world):
        _init(world)
        runner.invoke(app, ["mute", "griefer"])

        result = runner.invoke(app, ["unmute", "griefer", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["was_muted"] is True
        assert data["record"]["by"] == "admin1"
        assert _entries(world) == {}

    def test_unmute_not_muted(self, config_dir, world):
        _init(world)
        result = runner.invoke(app, ["unmute", "griefer"])

        assert result.exit_code == 0
        assert "was not shadow muted" in result.stdout

    def test_unmute_others_refused(self, config_dir, world):
        _init(world)
        runner.invoke(app, ["mute", "griefer"])
        _init(world, "admin2")

        result = runner.invoke(app, ["unmute", "griefer", "--json"])

        assert result.exit_code == 1
        assert json.loads(result.stdout)["status"] == "conflict"
        assert "griefer" in _entries(world)

    def test_force_unmute_others(self, config_dir, world):
        _init(world)
        runner.invoke(app, ["mute", "griefer"])
        _init(world, "admin2", "--override")

        result = runner.invoke(app, ["unmute", "griefer", "--force"])

        assert result.exit_code == 0
        assert _entries(world) == {}


class TestFindCommand:
    """Tests for shadowmute find."""

    def test_find_json(self, config_dir, world):
        _init(world)
        for name in ["troll2", "troll1", "griefer"]:
            runner.invoke(app, ["mute", name])

        result = runner.invoke(app, ["find", "troll", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["count"] == 2
        assert [t["target"] for t in data["targets"]] == ["troll1", "troll2"]

    def test_find_all_table(self, config_dir, world):
        _init(world)
        runner.invoke(app, ["mute", "griefer"])

        result = runner.invoke(app, ["find"])

        assert result.exit_code == 0
        assert "griefer" in result.stdout
        assert "For a total of 1 entries." in result.stdout

    def test_find_nothing(self, config_dir, world):
        _init(world)
        result = runner.invoke(app, ["find", "zzz"])
        assert result.exit_code == 0
        assert "No shadow muted players found" in result.stdout

    def test_find_bad_pattern(self, config_dir, world):
        _init(world)
        result = runner.invoke(app, ["find", "(", "--json"])

        assert result.exit_code == 2
        assert json.loads(result.stdout)["status"] == "invalid"


class TestShowCommand:
    """Tests for shadowmute show."""

    def test_show_muted(self, config_dir, world):
        _init(world)
        runner.invoke(app, ["mute", "griefer", "-r", "spam"])

        result = runner.invoke(app, ["show", "griefer", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["muted"] is True
        assert data["record"] == {"target": "griefer", "reason": "spam", "by": "admin1"}

    def test_show_not_muted(self, config_dir, world):
        _init(world)
        result = runner.invoke(app, ["show", "griefer"])
        assert result.exit_code == 0
        assert "is not shadow muted" in result.stdout


class TestStatusCommand:
    """Tests for shadowmute status."""

    def test_status_json(self, config_dir, world):
        _init(world, "admin1", "--user", "griefer", "--user", "alice")
        runner.invoke(app, ["mute", "griefer"])

        result = runner.invoke(app, ["status", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["operator"] == "admin1"
        assert data["record_count"] == 1
        assert data["issued_by_operator"] == 1
        assert data["known_users"] == 2

    def test_status_not_initialized(self, config_dir):
        result = runner.invoke(app, ["status", "--json"])
        assert result.exit_code == 1
        assert json.loads(result.stdout)["status"] == "not_initialized"

