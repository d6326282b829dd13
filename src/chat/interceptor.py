"""Suppression of outgoing chat from shadow muted players."""
import logging
from typing import Callable

from src.chat.pipeline import BUILTIN_ORIGIN, ChatPipeline, HandlerOrderError
from src.state.repositories.mutes import MuteRegistry

audit_logger = logging.getLogger("shadowmute.audit")

SendToPlayer = Callable[[str, str], None]


def format_chat_message(name: str, message: str) -> str:
    return f"<{name}> {message}"


class MessageInterceptor:
    """Chat handler that swallows messages from muted senders.

    A muted sender still receives their own line, formatted exactly as a
    broadcast would be, so they cannot tell it went nowhere else.
    """

    def __init__(
        self,
        registry: MuteRegistry,
        send_to_player: SendToPlayer,
        formatter: Callable[[str, str], str] = format_chat_message,
        audit: bool = True,
    ) -> None:
        self._registry = registry
        self._send_to_player = send_to_player
        self._formatter = formatter
        self._audit = audit

    def should_suppress_broadcast(self, sender: str) -> bool:
        return self._registry.is_muted(sender)

    def __call__(self, sender: str, message: str) -> bool:
        if not self.should_suppress_broadcast(sender):
            return False
        if self._audit:
            audit_logger.info("shadow muted player %s tried to speak: %s", sender, message)
        self._send_to_player(sender, self._formatter(sender, message))
        return True


def install_interceptor(pipeline: ChatPipeline, interceptor: MessageInterceptor, origin: str) -> None:
    """Register ``interceptor`` as the first non-builtin chat handler.

    Raises:
        HandlerOrderError: If a handler from any other origin is already
            registered, since it could relay messages before the mute check.
    """
    for handler in pipeline.handlers:
        if handler.origin != BUILTIN_ORIGIN:
            raise HandlerOrderError(
                f"Chat handler from '{handler.origin}' is registered before shadowmute, "
                "muted players' messages could leak."
            )
    pipeline.register(origin, interceptor)
