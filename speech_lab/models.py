"""Core domain models.

Every collection, the state store, the persistence layer and the view
projector operate on these types. Pydantic is used for validation and
serialisation at the persistence boundary.

Attribute names are snake_case; the persisted document uses the camelCase
keys of the stored layout (``contentLibrary``, ``playerStats`` ...), produced
by alias. Both spellings are accepted on input.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ContentItem(_Record):
    """A reference video in the content library. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    url: str
    type: str
    category: str


class AnalysisNote(_Record):
    """A deconstruction note written about one content item."""

    model_config = ConfigDict(frozen=True)

    id: int
    # Soft reference; may not resolve to any ContentItem.
    content_id: int | str
    script: str
    intent: str = ""
    technique: str = ""
    emotion: str = ""
    keywords: str = ""
    rewriting: str = ""
    tags: list[str] = Field(default_factory=list)


class Challenge(_Record):
    """A one-time task. `completed` only ever goes False -> True."""

    id: int
    level: int = Field(ge=1)
    description: str
    xp: int = Field(ge=0)
    completed: bool = False


class SkillTree(_Record):
    logic: int = Field(default=0, ge=0)
    appeal: int = Field(default=0, ge=0)
    skill: int = Field(default=0, ge=0)


class PlayerStats(_Record):
    xp: int = Field(default=0, ge=0)
    level: int = Field(default=1, ge=1)
    skill_tree: SkillTree = Field(default_factory=SkillTree)


def default_challenges() -> list[Challenge]:
    """The fixed challenge catalog seeded on first run."""
    return [
        Challenge(id=1, level=1, xp=100,
                  description="Record a 1-minute shadowing of a reference video"),
        Challenge(id=2, level=5, xp=150,
                  description="Write 10 deconstruction notes"),
        Challenge(id=3, level=10, xp=200,
                  description="Record a 1-minute video using one analyzed technique"),
        Challenge(id=4, level=20, xp=300,
                  description="Record a 3-minute topic speech in the reference style"),
    ]


class AppState(_Record):
    """Aggregate root: everything that is persisted between sessions."""

    content_library: list[ContentItem] = Field(default_factory=list)
    analysis_notes: list[AnalysisNote] = Field(default_factory=list)
    challenges: list[Challenge] = Field(default_factory=default_challenges)
    player_stats: PlayerStats = Field(default_factory=PlayerStats)

    @classmethod
    def fresh(cls) -> AppState:
        """Empty libraries, zeroed stats, default challenge catalog."""
        return cls()

    def to_document(self) -> dict:
        """The persisted layout, keyed by the stored (camelCase) names."""
        return self.model_dump(mode="json", by_alias=True)
