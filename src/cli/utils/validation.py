"""Input validation utilities for CLI commands."""

import re


def validate_player_name(name: str) -> str:
    """Validate and return a player name. Raises ValueError if invalid."""
    if not name or not name.strip():
        raise ValueError("Player name cannot be empty")
    name = name.strip()
    if len(name) > 20:
        raise ValueError("Player name cannot exceed 20 characters")
    if not re.match(r"^[a-zA-Z0-9_-]+$", name):
        raise ValueError(
            "Player name can only contain letters, numbers, underscores, and hyphens"
        )
    return name


def validate_reason(reason: str) -> str:
    """Validate and return a mute reason. Raises ValueError if invalid."""
    if "\n" in reason or "\r" in reason:
        raise ValueError("Mute reason must be a single line")
    if len(reason) > 512:
        raise ValueError("Mute reason cannot exceed 512 characters")
    return reason.strip()


def validate_world_path(world_path: str) -> str:
    """Validate and return a world directory path. Raises ValueError if invalid."""
    if not world_path or not world_path.strip():
        raise ValueError("World path cannot be empty")
    return world_path.strip()
