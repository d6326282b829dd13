"""Shared setup for commands that act on a world's shadow mute store."""

from dataclasses import dataclass

from src.cli.utils.config import ConfigManager, OperatorConfig
from src.host.commands import CommandReply, ModerationCommands, ReplyStatus
from src.state import MuteRegistry, PersistentStore


@dataclass
class CliSession:
    config: OperatorConfig
    registry: MuteRegistry
    commands: ModerationCommands


def open_session() -> CliSession:
    """Load config and the world's store.

    Raises:
        ConfigError: If configuration is missing or invalid.
        StoreError: If the store exists but cannot be trusted.
    """
    config = ConfigManager().load()
    registry = MuteRegistry.open(PersistentStore(config.store_path))
    commands = ModerationCommands(
        registry,
        config.player_exists,
        mute_override_hint="'shadowmute mute --force'",
        unmute_override_hint="'shadowmute unmute --force'",
    )
    return CliSession(config=config, registry=registry, commands=commands)


def exit_code_for(reply: CommandReply) -> int:
    """0 for success, 2 for rejected input, 1 for everything else."""
    if reply.status == ReplyStatus.OK:
        return 0
    if reply.status == ReplyStatus.INVALID:
        return 2
    return 1
