"""Chat message interception."""
from src.chat.interceptor import MessageInterceptor, format_chat_message, install_interceptor
from src.chat.pipeline import BUILTIN_ORIGIN, ChatHandler, ChatPipeline, HandlerOrderError

__all__ = [
    "MessageInterceptor",
    "format_chat_message",
    "install_interceptor",
    "BUILTIN_ORIGIN",
    "ChatHandler",
    "ChatPipeline",
    "HandlerOrderError",
]
