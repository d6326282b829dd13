"""CLI utilities."""

from .config import ConfigManager, OperatorConfig
from .session import CliSession, exit_code_for, open_session
from .validation import validate_player_name, validate_reason, validate_world_path

__all__ = [
    "ConfigManager",
    "OperatorConfig",
    "CliSession",
    "open_session",
    "exit_code_for",
    "validate_player_name",
    "validate_reason",
    "validate_world_path",
]
