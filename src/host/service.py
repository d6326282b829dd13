"""Shadow mute service factory for a host runtime."""
import logging
from dataclasses import dataclass
from typing import Optional

from src.chat.interceptor import MessageInterceptor, SendToPlayer, install_interceptor
from src.chat.pipeline import ChatPipeline
from src.host.commands import ModerationCommands, PlayerExists
from src.host.config import HostConfig, load_config_from_env
from src.host.errors import StartupError
from src.state.repositories.mutes import MuteRegistry
from src.state.store import PersistentStore, StoreError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShadowmuteService:
    config: HostConfig
    store: PersistentStore
    registry: MuteRegistry
    commands: ModerationCommands
    interceptor: MessageInterceptor


def create_service(
    pipeline: ChatPipeline,
    send_to_player: SendToPlayer,
    player_exists: PlayerExists,
    config: Optional[HostConfig] = None,
) -> ShadowmuteService:
    """Load the world's mute records and hook the interceptor into chat.

    When called without a config, loads it from environment variables.

    Raises:
        StartupError: If existing moderation data cannot be loaded.
        HandlerOrderError: If another origin's chat handler already runs
            ahead of the interceptor.
    """
    if config is None:
        config = load_config_from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    store = PersistentStore(config.store_path)
    try:
        registry = MuteRegistry.open(store)
    except StoreError as e:
        error = StartupError(str(e), store_path=str(store.path))
        logger.critical(
            "Refusing to start with unreliable shadow mute data [%s]: %s (details: %s)",
            error.error_code, error.message, error.details,
        )
        raise error from e

    interceptor = MessageInterceptor(registry, send_to_player, audit=config.audit)
    install_interceptor(pipeline, interceptor, config.origin)
    logger.info(
        "Shadowmute active as %s, %d record(s) in %s", config.origin, len(registry), store.path,
    )
    return ShadowmuteService(
        config=config,
        store=store,
        registry=registry,
        commands=ModerationCommands(registry, player_exists),
        interceptor=interceptor,
    )
