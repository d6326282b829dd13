"""Ordered chat handler list of the host runtime."""
import logging
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)

BUILTIN_ORIGIN = "*builtin*"

ChatHandlerCallback = Callable[[str, str], bool]


class HandlerOrderError(RuntimeError):
    """A handler that could relay chat was registered ahead of the interceptor."""


@dataclass(frozen=True)
class ChatHandler:
    origin: str
    callback: ChatHandlerCallback


class ChatPipeline:
    """Runs chat handlers in registration order until one consumes the message."""

    def __init__(self) -> None:
        self._handlers: list[ChatHandler] = []

    @property
    def handlers(self) -> tuple[ChatHandler, ...]:
        return tuple(self._handlers)

    def register(self, origin: str, callback: ChatHandlerCallback) -> None:
        self._handlers.append(ChatHandler(origin=origin, callback=callback))
        logger.debug("Registered chat handler #%d from %s", len(self._handlers), origin)

    def dispatch(self, sender: str, message: str) -> bool:
        """Return True if some handler consumed the message."""
        for handler in self._handlers:
            if handler.callback(sender, message):
                return True
        return False
