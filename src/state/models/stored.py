"""On-disk document models for the shadow mute store."""
from typing import Annotated, Literal, Optional
from pydantic import BaseModel, Field

from src.state.models.mute import NO_REASON, SCHEMA_VERSION, MuteRecord, RegistrySnapshot


class StoredEntry(BaseModel):
    reason: Optional[str] = None
    by: Annotated[str, Field(min_length=1)]


class StoredSnapshot(BaseModel):
    version: Literal[1]
    entries: dict[Annotated[str, Field(min_length=1)], StoredEntry] = Field(default_factory=dict)

    @classmethod
    def from_snapshot(cls, snapshot: RegistrySnapshot) -> "StoredSnapshot":
        return cls(
            version=SCHEMA_VERSION,
            entries={
                target: StoredEntry(reason=record.reason, by=record.issued_by)
                for target, record in snapshot.records.items()
            },
        )

    def to_snapshot(self) -> RegistrySnapshot:
        records = {
            target: MuteRecord(
                target=target,
                issued_by=entry.by,
                reason=entry.reason if entry.reason is not None else NO_REASON,
            )
            for target, entry in self.entries.items()
        }
        return RegistrySnapshot(version=self.version, records=records)
