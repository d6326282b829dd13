"""Shadow mute record models."""
from dataclasses import dataclass, field
from typing import Mapping, Optional

SCHEMA_VERSION = 1
NO_REASON = "(none)"


@dataclass(frozen=True)
class MuteRecord:
    """One active shadow mute. ``issued_by`` is the only ordinary-privilege owner."""

    target: str
    issued_by: str
    reason: str = NO_REASON

    def __post_init__(self) -> None:
        if not self.target: raise ValueError("target cannot be empty")
        if not self.issued_by: raise ValueError("issued_by cannot be empty")


@dataclass(frozen=True)
class RegistrySnapshot:
    """Full persisted state of the registry."""

    version: int = SCHEMA_VERSION
    records: Mapping[str, MuteRecord] = field(default_factory=dict)


@dataclass(frozen=True)
class MuteResult:
    """Outcome of a mute or unmute request.

    ``applied`` is False only for a conflict; ``prior`` carries the record
    that existed before the request, if any.
    """

    applied: bool
    prior: Optional[MuteRecord] = None

    @property
    def conflict(self) -> bool:
        return not self.applied
