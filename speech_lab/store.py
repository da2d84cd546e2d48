"""State store — sole owner of the session's AppState.

Every mutation goes through one of the entry points below and runs inside
`_mutation()`, which after the change:

  1. saves the full state through the configured StateStorage,
  2. re-projects all views,
  3. delivers queued level-ups and the new views to listeners.

Everything is synchronous; when an entry point returns, the stored document
and `views` both reflect the change.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator

from speech_lab import progression
from speech_lab.library import AnalysisNotebook, ChallengeTracker, ContentLibrary
from speech_lab.models import AnalysisNote, AppState, ContentItem
from speech_lab.progression import LevelUp
from speech_lab.skills import tally_tags
from speech_lab.storage import StateStorage
from speech_lab.views import Views, project

logger = logging.getLogger(__name__)

ViewListener = Callable[[Views], None]
LevelUpListener = Callable[[LevelUp], None]


class StateStore:
    def __init__(self, storage: StateStorage) -> None:
        self._storage = storage
        state = storage.load()
        if state is None:
            logger.info("Starting with a fresh state")
            state = AppState.fresh()
        self._state = state
        self._library = ContentLibrary(state.content_library)
        self._notebook = AnalysisNotebook(state.analysis_notes)
        self._challenges = ChallengeTracker(state.challenges)
        self._level_ups: list[LevelUp] = []
        self._view_listeners: list[ViewListener] = []
        self._level_up_listeners: list[LevelUpListener] = []
        self.persistent = True
        self.views: Views = project(self._state)

    # ------------------------------------------------------------------
    # Listeners and read access
    # ------------------------------------------------------------------

    def subscribe(self, listener: ViewListener) -> None:
        """Call `listener` with fresh views after every mutation."""
        self._view_listeners.append(listener)

    def on_level_up(self, listener: LevelUpListener) -> None:
        self._level_up_listeners.append(listener)

    def snapshot(self) -> AppState:
        """A deep copy of the current state."""
        return self._state.model_copy(deep=True)

    def drain_level_ups(self) -> list[LevelUp]:
        """Return the level-ups of the latest mutation, and forget them.

        Only the latest mutation's level-ups are kept; each mutation starts
        with an empty queue.
        """
        drained, self._level_ups = self._level_ups, []
        return drained

    # ------------------------------------------------------------------
    # Mutation entry points
    # ------------------------------------------------------------------

    def award_xp(self, amount: int) -> LevelUp | None:
        with self._mutation():
            return self._add_xp(amount)

    def add_content(self, title: str, url: str, type: str, category: str) -> ContentItem:
        with self._mutation():
            item = self._library.add_item(title, url, type, category)
            self._add_xp(progression.CONTENT_XP)
        return item

    def submit_note(
        self,
        content_id: int | str,
        script: str,
        intent: str = "",
        technique: str = "",
        emotion: str = "",
        keywords: str = "",
        rewriting: str = "",
        tags: list[str] | None = None,
    ) -> AnalysisNote:
        with self._mutation():
            note = self._notebook.add_note(
                content_id, script, intent, technique, emotion,
                keywords, rewriting, tags or [],
            )
            self._add_xp(progression.NOTE_XP)
            tally_tags(self._state.player_stats.skill_tree, note.tags)
        return note

    def complete_challenge(self, challenge_id: int) -> bool:
        """Complete a challenge and grant its reward.

        Returns False, without touching state or storage, when the
        challenge does not exist or is already completed. A negative
        reward raises ValueError before anything changes.
        """
        challenge = self._challenges.get(challenge_id)
        if challenge is None or challenge.completed:
            return False
        if challenge.xp < 0:
            raise ValueError(f"Challenge {challenge_id} has a negative reward: {challenge.xp}")
        with self._mutation():
            self._challenges.complete(challenge_id)
            self._add_xp(challenge.xp)
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _add_xp(self, amount: int) -> LevelUp | None:
        level_up = progression.add_xp(self._state.player_stats, amount)
        if level_up is not None:
            logger.info(f"Level up: now level {level_up.level} at {level_up.xp} XP")
            self._level_ups.append(level_up)
        return level_up

    @contextmanager
    def _mutation(self) -> Iterator[AppState]:
        self._level_ups = []
        yield self._state
        self._commit(list(self._level_ups))

    def _commit(self, level_ups: list[LevelUp]) -> None:
        self.persistent = self._storage.save(self._state)
        if not self.persistent:
            logger.warning("State kept in memory only; the last change was not saved")
        self.views = project(self._state)
        for level_up in level_ups:
            for listener in self._level_up_listeners:
                listener(level_up)
        for listener in self._view_listeners:
            listener(self.views)
