"""CLI commands."""

from . import (
    find,
    init,
    mute,
    show,
    status,
    unmute,
)

__all__ = [
    "find",
    "init",
    "mute",
    "show",
    "status",
    "unmute",
]
