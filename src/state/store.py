"""Durable storage for the shadow mute record table."""
import contextlib
import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from src.state.models.mute import SCHEMA_VERSION, RegistrySnapshot
from src.state.models.stored import StoredSnapshot

logger = logging.getLogger("shadowmute.store")

DEFAULT_FILENAME = "shadowmute_players.json"


class StoreError(Exception):
    pass


class StoreLoadError(StoreError):
    """The store file exists but could not be read."""


class StoreCorruptError(StoreError):
    """The store file could not be decoded into a snapshot."""


class StoreVersionError(StoreError):
    """The store file carries a missing or unrecognised version key."""


class StoreWriteError(StoreError):
    """Publishing a snapshot to disk failed; the previous file is untouched."""


class PersistentStore:
    """Loads and saves the record table as a single JSON document."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> RegistrySnapshot:
        """Load the snapshot, creating an empty store file on first run.

        Raises:
            StoreLoadError: If the file exists but cannot be read.
            StoreCorruptError: If the contents are not a valid store document.
            StoreVersionError: If ``version`` is missing or not 1.
            StoreWriteError: If the initial empty store cannot be written.
        """
        if not self._path.exists():
            snapshot = RegistrySnapshot()
            self.sync(snapshot)
            logger.info("No shadow mute store at %s, created an empty one", self._path)
            return snapshot

        try:
            raw = self._path.read_bytes()
        except OSError as e:
            raise StoreLoadError(f"Cannot read shadow mute store {self._path}: {e}") from e

        try:
            data = json.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise StoreCorruptError(f"Shadow mute store {self._path} is not valid UTF-8: {e}") from e
        except json.JSONDecodeError as e:
            raise StoreCorruptError(f"Shadow mute store {self._path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise StoreCorruptError(f"Shadow mute store {self._path} must contain an object")

        version = data.get("version")
        # bool is an int subclass, so True would otherwise pass as 1
        if type(version) is not int or version != SCHEMA_VERSION:
            raise StoreVersionError(
                f"unrecognised or missing version key in shadow mute data "
                f"(expected {SCHEMA_VERSION}, got {version!r})"
            )

        try:
            snapshot = StoredSnapshot.model_validate(data).to_snapshot()
        except (ValidationError, ValueError) as e:
            raise StoreCorruptError(f"Invalid shadow mute store {self._path}: {e}") from e

        logger.info("Loaded %d shadow mute record(s) from %s", len(snapshot.records), self._path)
        return snapshot

    def sync(self, snapshot: RegistrySnapshot) -> bool:
        """Atomically replace the store file with ``snapshot``.

        The document is written to a sibling temporary file, fsynced, and
        renamed over the store file, so readers see either the old or the
        new contents.

        Raises:
            StoreWriteError: If any step fails.
        """
        document = StoredSnapshot.from_snapshot(snapshot).model_dump(mode="json")
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2, sort_keys=True)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise StoreWriteError(f"Failed to write shadow mute store {self._path}: {e}") from e
        logger.debug("Synced %d shadow mute record(s) to %s", len(snapshot.records), self._path)
        return True
