"""Mute registry."""
import logging
from typing import Optional

from src.state.models.mute import NO_REASON, MuteRecord, MuteResult, RegistrySnapshot
from src.state.policy import can_mute, can_unmute
from src.state.search import find_targets
from src.state.store import PersistentStore

logger = logging.getLogger("shadowmute.registry")


class MuteRegistry:
    """In-memory target -> MuteRecord table, flushed to the store on every change.

    A record's presence is the only meaning of "muted". Mutations write the
    new table through the store before adopting it, so a failed write leaves
    both memory and disk at the previous state.
    """

    def __init__(self, store: PersistentStore, snapshot: Optional[RegistrySnapshot] = None) -> None:
        self._store = store
        self._records: dict[str, MuteRecord] = dict(snapshot.records) if snapshot else {}

    @classmethod
    def open(cls, store: PersistentStore) -> "MuteRegistry":
        """Build a registry from the store's current contents."""
        return cls(store, store.load())

    @property
    def store(self) -> PersistentStore:
        return self._store

    def mute(self, requester: str, target: str, reason: Optional[str] = None, force: bool = False) -> MuteResult:
        """Mute ``target`` on behalf of ``requester``.

        Without ``force`` an existing record is left alone and returned as a
        conflict. With ``force`` it is overwritten and returned as ``prior``.

        Raises:
            StoreWriteError: If the change could not be persisted.
        """
        existing = self._records.get(target)
        if not can_mute(existing, force):
            logger.debug("Mute of %s by %s refused, already muted by %s", target, requester, existing.issued_by)
            return MuteResult(applied=False, prior=existing)

        record = MuteRecord(target=target, issued_by=requester, reason=NO_REASON if reason is None else reason)
        records = dict(self._records)
        records[target] = record
        self._commit(records)
        logger.info("%s shadow muted %s (reason: %s, forced: %s)", requester, target, record.reason, force)
        return MuteResult(applied=True, prior=existing)

    def unmute(self, requester: str, target: str, force: bool = False) -> MuteResult:
        """Remove the mute on ``target``.

        Unmuting a target with no record succeeds with ``prior=None``. A
        record issued by someone else is only removed with ``force``.

        Raises:
            StoreWriteError: If the change could not be persisted.
        """
        existing = self._records.get(target)
        if existing is None:
            return MuteResult(applied=True, prior=None)
        if not can_unmute(requester, existing, force):
            logger.debug("Unmute of %s by %s refused, muted by %s", target, requester, existing.issued_by)
            return MuteResult(applied=False, prior=existing)

        records = dict(self._records)
        del records[target]
        self._commit(records)
        logger.info("%s unmuted %s (was muted by %s, forced: %s)", requester, target, existing.issued_by, force)
        return MuteResult(applied=True, prior=existing)

    def is_muted(self, target: str) -> bool:
        return target in self._records

    def get(self, target: str) -> Optional[MuteRecord]:
        return self._records.get(target)

    def targets(self) -> list[str]:
        return sorted(self._records)

    def find(self, pattern: str) -> list[str]:
        """Sorted muted targets matching ``pattern``. Raises InvalidPatternError."""
        return find_targets(self._records, pattern)

    def snapshot(self) -> RegistrySnapshot:
        return RegistrySnapshot(records=dict(self._records))

    def __contains__(self, target: object) -> bool:
        return target in self._records

    def __len__(self) -> int:
        return len(self._records)

    def _commit(self, records: dict[str, MuteRecord]) -> None:
        self._store.sync(RegistrySnapshot(records=records))
        self._records = records
