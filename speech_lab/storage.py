"""JSON state storage.

The whole AppState is kept as one JSON document in a single key-value slot.
There is no database and no partial write: every save overwrites the slot
wholesale with the full document.

Directory layout:

    {base}/
      {key}.json        ← the persisted AppState document

Document layout:

    {
      "contentLibrary": [{id, title, url, type, category}, ...],
      "analysisNotes":  [{id, contentId, script, intent, technique,
                          emotion, keywords, rewriting, tags}, ...],
      "challenges":     [{id, level, description, xp, completed}, ...],
      "playerStats":    {xp, level, skillTree: {logic, appeal, skill}}
    }

A slot holding bytes that are not such a document is treated as empty:
`load()` logs a warning and returns None, and the caller starts fresh.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from speech_lab.models import AppState

logger = logging.getLogger(__name__)

DEFAULT_STATE_KEY = "speechLabState"


class StateCorruptError(ValueError):
    """Raised when stored bytes are not a valid AppState document."""


def encode_state(state: AppState) -> str:
    return json.dumps(state.to_document(), indent=2, ensure_ascii=False)


def decode_state(raw: str) -> AppState:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise StateCorruptError(f"Stored state is not valid JSON: {e}") from e
    try:
        return AppState.model_validate(data)
    except ValidationError as e:
        raise StateCorruptError(
            f"Stored state does not match the expected shape ({e.error_count()} errors)"
        ) from e


# ---------------------------------------------------------------------------
# Protocol — every storage backend must match these signatures
# ---------------------------------------------------------------------------

class StateStorage(Protocol):
    def load(self) -> AppState | None: ...

    def save(self, state: AppState) -> bool: ...


# ---------------------------------------------------------------------------
# JsonFileStorage — one JSON file per slot key
# ---------------------------------------------------------------------------

class JsonFileStorage:
    """Stores the state document at ``{base_path}/{key}.json``.

    A base directory that cannot be created is not fatal: the slot reads
    as empty and every save fails, so the session runs in memory only.
    """

    def __init__(self, base_path: Path, key: str = DEFAULT_STATE_KEY) -> None:
        self._base = base_path
        self._path = base_path / f"{key}.json"
        try:
            self._base.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Cannot create state directory {self._base}: {e}")

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> AppState | None:
        """Read the slot. Returns None if it is missing or corrupt."""
        if not self._path.is_file():
            return None
        try:
            state = decode_state(self._path.read_text(encoding="utf-8"))
        except (StateCorruptError, OSError, UnicodeDecodeError) as e:
            logger.warning(f"Ignoring unreadable state at {self._path}: {e}")
            return None
        logger.debug("state loaded path=%s", self._path)
        return state

    def save(self, state: AppState) -> bool:
        """Overwrite the slot with `state`. Returns False if the write failed."""
        try:
            self._path.write_text(encode_state(state), encoding="utf-8")
        except OSError as e:
            logger.warning(f"Could not save state to {self._path}: {e}")
            return False
        logger.debug("state saved path=%s", self._path)
        return True


# ---------------------------------------------------------------------------
# MemoryStorage — keeps the encoded document in memory
# ---------------------------------------------------------------------------

class MemoryStorage:
    """Holds the encoded document in memory. Nothing survives the process.

    Goes through the same encode/decode path as JsonFileStorage, so a
    session backed by it behaves exactly like a file-backed one.
    """

    def __init__(self, raw: str | None = None) -> None:
        self.raw = raw

    def load(self) -> AppState | None:
        if self.raw is None:
            return None
        try:
            return decode_state(self.raw)
        except StateCorruptError as e:
            logger.warning(f"Ignoring unreadable in-memory state: {e}")
            return None

    def save(self, state: AppState) -> bool:
        self.raw = encode_state(state)
        return True
