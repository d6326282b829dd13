"""Host runtime integration for shadowmute."""
from src.host.commands import (COMMANDS, CommandDefinition, CommandReply, ModerationCommands, ReplyStatus,
                               parse_mute_params)
from src.host.config import HostConfig, load_config_from_env
from src.host.errors import ShadowmuteError, StartupError
from src.host.service import ShadowmuteService, create_service
__all__ = ["COMMANDS", "CommandDefinition", "CommandReply", "ModerationCommands", "ReplyStatus", "parse_mute_params",
           "HostConfig", "load_config_from_env", "ShadowmuteError", "StartupError",
           "ShadowmuteService", "create_service"]
