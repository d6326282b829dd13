"""Configuration file management for CLI."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from src.state.policy import Privilege
from src.state.store import DEFAULT_FILENAME


@dataclass
class OperatorConfig:
    """Operator configuration loaded from config file."""

    operator: str
    world_path: Path
    privileges: tuple[str, ...]
    known_users: Optional[frozenset[str]] = None
    filename: str = DEFAULT_FILENAME

    @property
    def store_path(self) -> Path:
        return self.world_path / self.filename

    def has_override(self) -> bool:
        return Privilege.OVERRIDE.value in self.privileges

    def player_exists(self, name: str) -> bool:
        """Without a known_users list, every valid name counts as known."""
        return self.known_users is None or name in self.known_users


class ConfigError(Exception):
    """Configuration file error."""

    pass


class ConfigManager:
    """Manages operator configuration in ~/.shadowmute/config.yaml."""

    DEFAULT_DIR = Path.home() / ".shadowmute"
    CONFIG_FILE = "config.yaml"

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        self._config_dir = config_dir or self.DEFAULT_DIR
        self._config_path = self._config_dir / self.CONFIG_FILE

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    @property
    def config_path(self) -> Path:
        return self._config_path

    def exists(self) -> bool:
        """Check if configuration exists."""
        return self._config_path.exists()

    def load(self) -> OperatorConfig:
        """Load configuration from file. Raises ConfigError if not found."""
        if not self._config_path.exists():
            raise ConfigError(
                f"Config not found at {self._config_path}. Run 'shadowmute init' first."
            )

        try:
            with open(self._config_path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid config file: {e}") from e

        if not isinstance(data, dict) or "operator" not in data or "world_path" not in data:
            raise ConfigError("Invalid config: missing operator or world_path")

        privileges = data.get("privileges") or [Privilege.SHADOWMUTE.value]
        if not isinstance(privileges, list):
            raise ConfigError("Invalid config: privileges must be a list")
        known_users = data.get("known_users")
        if known_users is not None and not isinstance(known_users, list):
            raise ConfigError("Invalid config: known_users must be a list")
        filename = str(data.get("filename") or DEFAULT_FILENAME)
        if "/" in filename or "\\" in filename:
            raise ConfigError(f"Invalid config: filename must be a plain file name, got {filename!r}")

        return OperatorConfig(
            operator=str(data["operator"]),
            world_path=Path(data["world_path"]).expanduser(),
            privileges=tuple(str(p) for p in privileges),
            known_users=frozenset(str(u) for u in known_users) if known_users is not None else None,
            filename=filename,
        )

    def save(
        self,
        operator: str,
        world_path: Path,
        privileges: list[str],
        known_users: Optional[list[str]] = None,
    ) -> None:
        """Save configuration to file."""
        self._config_dir.mkdir(parents=True, exist_ok=True)

        config_data = {
            "operator": operator,
            "world_path": str(world_path),
            "privileges": privileges,
        }
        if known_users is not None:
            config_data["known_users"] = sorted(known_users)

        with open(self._config_path, "w") as f:
            yaml.safe_dump(config_data, f, default_flow_style=False)
