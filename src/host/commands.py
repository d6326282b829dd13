"""Chat command surface for managing shadow mutes.

Each handler takes the requesting player's name and the raw parameter
string typed after the command, and returns a ``CommandReply``. Handlers
never raise for user errors, conflicts or failed writes; the reply status
says what happened and ``messages`` holds the lines to show the requester.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional

from src.state.models.mute import MuteRecord
from src.state.policy import Privilege, missing_privileges, required_privileges
from src.state.repositories.mutes import MuteRegistry
from src.state.search import InvalidPatternError
from src.state.store import StoreWriteError

logger = logging.getLogger(__name__)

MUTE = "shadowmute"
MUTE_FORCE = "shadowmute_force"
UNMUTE = "shadowunmute"
UNMUTE_FORCE = "shadowunmute_force"
FIND = "shadowmute_find"

USAGE = "No target user specified. (See help)"
UNKNOWN_PLAYER = "The specified player has never logged in, refusing. (Did you make a typo?)"
WRITE_FAILED = "Failed to save shadow mute records, nothing was changed. Check the server log."

PlayerExists = Callable[[str], bool]


class ReplyStatus(str, Enum):
    OK = "ok"
    CONFLICT = "conflict"
    INVALID = "invalid"
    DENIED = "denied"
    FAILED = "failed"


@dataclass(frozen=True)
class CommandReply:
    status: ReplyStatus
    messages: tuple[str, ...] = ()
    target: Optional[str] = None
    record: Optional[MuteRecord] = None
    targets: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status == ReplyStatus.OK


@dataclass(frozen=True)
class CommandDefinition:
    name: str
    params: str
    description: str
    privileges: frozenset[Privilege]
    handler: str


COMMANDS: dict[str, CommandDefinition] = {
    d.name: d
    for d in (
        CommandDefinition(
            MUTE, "<name> [mute reason]",
            'Shadow mute a player with an optional reason (defaults to "(none)")',
            required_privileges(False), "mute",
        ),
        CommandDefinition(
            MUTE_FORCE, "<name> [mute reason]",
            "See /shadowmute, but forces overwrite of a previous mute reason. Please use carefully.",
            required_privileges(True), "mute_force",
        ),
        CommandDefinition(
            UNMUTE, "<name>",
            "Unmute a player that you previously shadow muted yourself.",
            required_privileges(False), "unmute",
        ),
        CommandDefinition(
            UNMUTE_FORCE, "<name>",
            "See /shadowunmute, but forces unmute even if previously muted by someone else. Please use carefully.",
            required_privileges(True), "unmute_force",
        ),
        CommandDefinition(
            FIND, "<pattern>",
            "Queries for shadow muted players whose names match <pattern> (a regular expression).",
            frozenset({Privilege.SHADOWMUTE}), "find",
        ),
    )
}


def parse_mute_params(params: str) -> tuple[Optional[str], Optional[str]]:
    """Split ``<name> [reason]`` into target and reason (None when absent)."""
    stripped = params.strip()
    if not stripped:
        return None, None
    target, _, reason = stripped.partition(" ")
    reason = reason.strip()
    return target, reason or None


class ModerationCommands:
    """Handlers for the shadow mute chat commands."""

    def __init__(
        self,
        registry: MuteRegistry,
        player_exists: PlayerExists,
        mute_override_hint: str = f"/{MUTE_FORCE}",
        unmute_override_hint: str = f"/{UNMUTE_FORCE}",
    ) -> None:
        self._registry = registry
        self._player_exists = player_exists
        self._mute_override_hint = mute_override_hint
        self._unmute_override_hint = unmute_override_hint

    def dispatch(self, name: str, requester: str, params: str, granted: Iterable[str]) -> CommandReply:
        """Run command ``name`` after checking the requester's privileges.

        Raises:
            KeyError: If ``name`` is not a shadowmute command.
        """
        definition = COMMANDS[name]
        missing = missing_privileges(definition.privileges, granted)
        if missing:
            logger.info("%s denied /%s, missing %s", requester, name, [p.value for p in missing])
            return CommandReply(
                ReplyStatus.DENIED,
                (f"You don't have permission to run this command "
                 f"(missing privileges: {', '.join(p.value for p in missing)}).",),
            )
        return getattr(self, definition.handler)(requester, params)

    def mute(self, requester: str, params: str) -> CommandReply:
        return self._mute(requester, params, force=False)

    def mute_force(self, requester: str, params: str) -> CommandReply:
        return self._mute(requester, params, force=True)

    def unmute(self, requester: str, params: str) -> CommandReply:
        return self._unmute(requester, params, force=False)

    def unmute_force(self, requester: str, params: str) -> CommandReply:
        return self._unmute(requester, params, force=True)

    def find(self, requester: str, params: str) -> CommandReply:
        pattern = params.strip()
        try:
            found = self._registry.find(pattern)
        except InvalidPatternError as e:
            return CommandReply(
                ReplyStatus.INVALID, (f"String matching error occurred during search: {e}",)
            )
        matching = f" matching {pattern}" if pattern else ""
        return CommandReply(
            ReplyStatus.OK,
            (
                f"Found usernames{matching} with shadow mute records: {' '.join(found)}",
                f"For a total of {len(found)} entries.",
            ),
            targets=tuple(found),
        )

    def _check_target(self, target: Optional[str]) -> Optional[CommandReply]:
        if not target:
            return CommandReply(ReplyStatus.INVALID, (USAGE,))
        if not self._player_exists(target):
            return CommandReply(ReplyStatus.INVALID, (UNKNOWN_PLAYER,), target=target)
        return None

    def _mute(self, requester: str, params: str, force: bool) -> CommandReply:
        target, reason = parse_mute_params(params)
        rejected = self._check_target(target)
        if rejected is not None:
            return rejected
        try:
            result = self._registry.mute(requester, target, reason, force)
        except StoreWriteError as e:
            logger.error("Shadow mute of %s by %s not saved: %s", target, requester, e)
            return CommandReply(ReplyStatus.FAILED, (WRITE_FAILED,), target=target)

        if result.conflict:
            old = result.prior
            return CommandReply(
                ReplyStatus.CONFLICT,
                (
                    f"Target user {target} was already shadow muted by {old.issued_by} "
                    f"for the following reason: {old.reason}",
                    f"To override, use {self._mute_override_hint} if you have privilege to do so.",
                ),
                target=target,
                record=old,
            )
        current = self._registry.get(target)
        return CommandReply(
            ReplyStatus.OK,
            (f"Successfully shadow muted {target} with reason: {current.reason}",),
            target=target,
            record=result.prior,
        )

    def _unmute(self, requester: str, params: str, force: bool) -> CommandReply:
        target = params.strip()
        rejected = self._check_target(target)
        if rejected is not None:
            return rejected
        try:
            result = self._registry.unmute(requester, target, force)
        except StoreWriteError as e:
            logger.error("Unmute of %s by %s not saved: %s", target, requester, e)
            return CommandReply(ReplyStatus.FAILED, (WRITE_FAILED,), target=target)

        old = result.prior
        if result.conflict:
            return CommandReply(
                ReplyStatus.CONFLICT,
                (
                    f"Target user {target} was previously shadow muted by {old.issued_by} "
                    f"for the following reason: {old.reason}",
                    f"To force unmute, use {self._unmute_override_hint} if you have privilege to do so.",
                ),
                target=target,
                record=old,
            )
        if old is None:
            return CommandReply(
                ReplyStatus.OK, (f"Player {target} was not previously shadow muted.",), target=target
            )
        return CommandReply(
            ReplyStatus.OK,
            (f"Successfully unmuted {target}. Was previously muted by {old.issued_by} "
             f"with reason: {old.reason}",),
            target=target,
            record=old,
        )
