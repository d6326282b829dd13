"""Shadow mute state: records, persistence, registry and authorization."""
from src.state.models import NO_REASON, SCHEMA_VERSION, MuteRecord, MuteResult, RegistrySnapshot
from src.state.policy import Privilege, PRIVILEGE_DESCRIPTIONS, can_mute, can_unmute, missing_privileges, required_privileges
from src.state.repositories import MuteRegistry
from src.state.search import InvalidPatternError, compile_pattern, find_targets
from src.state.store import (DEFAULT_FILENAME, PersistentStore, StoreError, StoreLoadError, StoreCorruptError,
                             StoreVersionError, StoreWriteError)
__all__ = ["NO_REASON", "SCHEMA_VERSION", "MuteRecord", "MuteResult", "RegistrySnapshot",
           "Privilege", "PRIVILEGE_DESCRIPTIONS", "can_mute", "can_unmute", "missing_privileges", "required_privileges",
           "MuteRegistry", "InvalidPatternError", "compile_pattern", "find_targets",
           "DEFAULT_FILENAME", "PersistentStore", "StoreError", "StoreLoadError", "StoreCorruptError",
           "StoreVersionError", "StoreWriteError"]
