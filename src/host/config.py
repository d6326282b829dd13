"""Host runtime configuration."""
import logging
from dataclasses import dataclass
from pathlib import Path
import os

from src.state.store import DEFAULT_FILENAME

logger = logging.getLogger(__name__)

_RECOGNISED_BOOL_VALUES = frozenset(
    ("1", "true", "yes", "0", "false", "no")
)


@dataclass(frozen=True)
class HostConfig:
    """Configuration for one world's shadow mute service.

    ``world_path``: directory holding the world's data; the store file lives here.
    ``filename``: name of the store file inside ``world_path``.
    ``audit``: log suppressed messages to the ``shadowmute.audit`` logger.
    ``origin``: origin name the chat interceptor registers under.
    ``log_level``: level passed to ``logging.basicConfig``.
    """

    world_path: Path
    filename: str = DEFAULT_FILENAME
    audit: bool = True
    origin: str = "00_shadowmute"
    log_level: str = "INFO"

    @property
    def store_path(self) -> Path:
        return self.world_path / self.filename


def _parse_bool(value: str, default: bool) -> bool:
    """Parse a boolean environment variable with explicit default.

    Recognises ``true/1/yes`` and ``false/0/no`` (case-insensitive).
    Returns *default* when the value is empty or unset.
    Logs a warning and returns *default* for unrecognised values.
    """
    if not value:
        return default
    normalised = value.lower()
    if normalised not in _RECOGNISED_BOOL_VALUES:
        logger.warning(
            "Unrecognised boolean value %r, using default %s. "
            "Expected one of: true/1/yes or false/0/no.",
            value,
            default,
        )
        return default
    return normalised in ("1", "true", "yes")


def load_config_from_env() -> HostConfig:
    world_path = os.environ.get("SHADOWMUTE_WORLD_PATH")
    if not world_path:
        raise ValueError("Missing: SHADOWMUTE_WORLD_PATH")

    filename = os.environ.get("SHADOWMUTE_FILENAME", DEFAULT_FILENAME)
    if not filename or "/" in filename or "\\" in filename:
        raise ValueError(f"SHADOWMUTE_FILENAME must be a plain file name, got {filename!r}")

    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"Unknown LOG_LEVEL: {log_level}")

    return HostConfig(
        world_path=Path(world_path),
        filename=filename,
        audit=_parse_bool(os.environ.get("SHADOWMUTE_AUDIT", ""), default=True),
        origin=os.environ.get("SHADOWMUTE_ORIGIN", "00_shadowmute"),
        log_level=log_level,
    )
