"""Process-wide state store handle."""

import os
from pathlib import Path

from speech_lab.storage import DEFAULT_STATE_KEY, JsonFileStorage
from speech_lab.store import StateStore

_store: StateStore | None = None


def init_store(data_dir: Path, key: str | None = None) -> StateStore:
    """Open (or create) the state slot under `data_dir` and load it."""
    global _store
    slot = key or os.getenv("SPEECH_LAB_STATE_KEY", DEFAULT_STATE_KEY)
    _store = StateStore(JsonFileStorage(data_dir, slot))
    return _store


def get_store() -> StateStore:
    assert _store is not None, "Call init_store() before using the store"
    return _store
