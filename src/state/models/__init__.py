"""State models."""
from src.state.models.mute import NO_REASON, SCHEMA_VERSION, MuteRecord, MuteResult, RegistrySnapshot
from src.state.models.stored import StoredEntry, StoredSnapshot
__all__ = [
    "NO_REASON", "SCHEMA_VERSION",
    "MuteRecord", "MuteResult", "RegistrySnapshot",
    "StoredEntry", "StoredSnapshot",
]
