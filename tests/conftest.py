"""Pytest fixtures for shadowmute tests."""
import pytest
from pathlib import Path
from src.state import MuteRegistry, PersistentStore


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "world" / "shadowmute_players.json"


@pytest.fixture
def store(store_path: Path) -> PersistentStore:
    return PersistentStore(store_path)


@pytest.fixture
def registry(store: PersistentStore) -> MuteRegistry:
    return MuteRegistry.open(store)


@pytest.fixture
def sent() -> list[tuple[str, str]]:
    """Messages delivered to individual players, as (recipient, text)."""
    return []
