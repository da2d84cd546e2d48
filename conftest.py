import os
from pathlib import Path

import pytest

from speech_lab.storage import JsonFileStorage
from speech_lab.store import StateStore

TEST_DATA_DIR = Path("data-tests")

# backend.app builds a default app at import time; keep it out of ./data
os.environ.setdefault("DATA_DIR", str(TEST_DATA_DIR))


@pytest.fixture
def storage(tmp_path: Path) -> JsonFileStorage:
    return JsonFileStorage(tmp_path)


@pytest.fixture
def store(storage: JsonFileStorage) -> StateStore:
    """A store over an empty slot: fresh state on every test."""
    return StateStore(storage)
