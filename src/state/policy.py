"""Authorization rules for shadow mute mutations.

An ordinary user may create a first-time mute and remove mutes they issued
themselves. Overwriting an existing mute or removing someone else's needs
``force``, which the command layer only grants to holders of the override
privilege.
"""
from enum import Enum
from typing import Iterable, Optional

from src.state.models.mute import MuteRecord


class Privilege(str, Enum):
    SHADOWMUTE = "shadowmute"
    OVERRIDE = "shadowmute_override"


PRIVILEGE_DESCRIPTIONS = {
    Privilege.SHADOWMUTE: "Enables querying, setting and removing your own shadowmutes on a player.",
    Privilege.OVERRIDE: "Enables overriding shadowmute records even if you are not the original muting admin.",
}


def can_mute(existing: Optional[MuteRecord], force: bool) -> bool:
    """Return True if a mute may be written over ``existing``."""
    return existing is None or force


def can_unmute(requester: str, record: MuteRecord, force: bool) -> bool:
    return force or requester == record.issued_by


def required_privileges(force: bool) -> frozenset[Privilege]:
    if force:
        return frozenset({Privilege.SHADOWMUTE, Privilege.OVERRIDE})
    return frozenset({Privilege.SHADOWMUTE})


def missing_privileges(required: Iterable[Privilege], granted: Iterable[str]) -> list[Privilege]:
    """Return the required privileges not present in ``granted``, sorted by name."""
    have = {p.value if isinstance(p, Privilege) else str(p) for p in granted}
    return sorted((p for p in required if p.value not in have), key=lambda p: p.value)
