"""Domain collections: content library, analysis notebook, challenge tracker.

Each collection wraps a list owned by the AppState it was built from and
mutates that list in place. Insertion order is the canonical display order.
None of them awards XP; the StateStore does that around the calls.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from speech_lab.models import AnalysisNote, Challenge, ContentItem

RECENT_NOTES = 5


def _next_id(ids: Iterable[int]) -> int:
    """A fresh identity, greater than every identity issued so far."""
    return max(ids, default=0) + 1


class ContentLibrary:
    def __init__(self, items: list[ContentItem]) -> None:
        self._items = items

    def __iter__(self) -> Iterator[ContentItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add_item(self, title: str, url: str, type: str, category: str) -> ContentItem:
        item = ContentItem(
            id=_next_id(c.id for c in self._items),
            title=title, url=url, type=type, category=category,
        )
        self._items.append(item)
        return item

    def get(self, content_id: int | str) -> ContentItem | None:
        """Find an item by identity. Returns None if not found.

        Identities are compared in string form, so the "17" a form submits
        resolves item 17.
        """
        key = str(content_id)
        for item in self._items:
            if str(item.id) == key:
                return item
        return None


class AnalysisNotebook:
    def __init__(self, notes: list[AnalysisNote]) -> None:
        self._notes = notes

    def __iter__(self) -> Iterator[AnalysisNote]:
        return iter(self._notes)

    def __len__(self) -> int:
        return len(self._notes)

    def add_note(
        self,
        content_id: int | str,
        script: str,
        intent: str,
        technique: str,
        emotion: str,
        keywords: str,
        rewriting: str,
        tags: list[str],
    ) -> AnalysisNote:
        """Append a note. `content_id` is stored as given, unchecked."""
        note = AnalysisNote(
            id=_next_id(n.id for n in self._notes),
            content_id=content_id,
            script=script,
            intent=intent,
            technique=technique,
            emotion=emotion,
            keywords=keywords,
            rewriting=rewriting,
            tags=list(tags),
        )
        self._notes.append(note)
        return note

    def recent_notes(self, n: int = RECENT_NOTES) -> list[AnalysisNote]:
        """The last `n` notes, newest first, as a new list."""
        if n <= 0:
            return []
        return list(reversed(self._notes[-n:]))


class ChallengeTracker:
    def __init__(self, challenges: list[Challenge]) -> None:
        self._challenges = challenges

    def __iter__(self) -> Iterator[Challenge]:
        return iter(self._challenges)

    def __len__(self) -> int:
        return len(self._challenges)

    def get(self, challenge_id: int) -> Challenge | None:
        for challenge in self._challenges:
            if challenge.id == challenge_id:
                return challenge
        return None

    def complete(self, challenge_id: int) -> Challenge | None:
        """Mark a challenge completed.

        Returns the challenge if this call completed it, None when it does
        not exist or was already completed. The challenge's level is not
        checked against the player's.
        """
        challenge = self.get(challenge_id)
        if challenge is None or challenge.completed:
            return None
        challenge.completed = True
        return challenge
