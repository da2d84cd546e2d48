"""View projector — read-only snapshots of AppState for presentation.

`project(state)` builds all four panel snapshots. Nothing here mutates the
state; every list in a snapshot is newly built.
"""

from __future__ import annotations

import math

from pydantic import BaseModel

from speech_lab.library import AnalysisNotebook, ContentLibrary
from speech_lab.models import AppState
from speech_lab.progression import progress_percent, xp_for_next_level
from speech_lab.skills import skill_series

SKILL_LABELS = ["Logic", "Appeal", "Skill"]
UNKNOWN_CONTENT = "Unknown"
SELECT_PLACEHOLDER = "-- Select content --"
EMPTY_LIBRARY = "No content added yet."
EMPTY_NOTES = "No analysis notes yet."
EXCERPT_LENGTH = 30
COMPLETED_CLASS = "challenge-item-completed"


class SkillChart(BaseModel):
    labels: list[str]
    data: list[int]


class DashboardView(BaseModel):
    level: int
    xp: int
    xp_for_next_level: int
    progress_percent: float
    progress_label: str
    xp_text: str
    skill_chart: SkillChart


class ContentSummary(BaseModel):
    id: int
    title: str
    url: str
    subtitle: str


class LibraryView(BaseModel):
    items: list[ContentSummary]
    empty: bool
    empty_message: str | None = None


class ContentOption(BaseModel):
    value: str
    label: str


class NoteSummary(BaseModel):
    id: int
    excerpt: str
    content_title: str
    tags: list[str]


class AnalyzerView(BaseModel):
    options: list[ContentOption]
    recent_notes: list[NoteSummary]
    empty: bool
    empty_message: str | None = None


class ChallengeCard(BaseModel):
    id: int
    level: int
    description: str
    xp: int
    completed: bool
    title: str
    reward_text: str
    button_label: str
    disabled: bool
    css_class: str


class ChallengesView(BaseModel):
    items: list[ChallengeCard]


class Views(BaseModel):
    dashboard: DashboardView
    library: LibraryView
    analyzer: AnalyzerView
    challenges: ChallengesView


def dashboard_view(state: AppState) -> DashboardView:
    stats = state.player_stats
    percent = progress_percent(stats)
    next_level = xp_for_next_level(stats.level)
    return DashboardView(
        level=stats.level,
        xp=stats.xp,
        xp_for_next_level=next_level,
        progress_percent=percent,
        progress_label=f"{math.floor(percent + 0.5)}%",
        xp_text=f"{stats.xp:,} / {next_level:,}",
        skill_chart=SkillChart(labels=list(SKILL_LABELS), data=skill_series(stats.skill_tree)),
    )


def library_view(state: AppState) -> LibraryView:
    items = [
        ContentSummary(
            id=c.id, title=c.title, url=c.url,
            subtitle=f"{c.category} / {c.type}",
        )
        for c in state.content_library
    ]
    if not items:
        return LibraryView(items=[], empty=True, empty_message=EMPTY_LIBRARY)
    return LibraryView(items=items, empty=False)


def _excerpt(script: str) -> str:
    return f"{script[:EXCERPT_LENGTH]}..."


def analyzer_view(state: AppState) -> AnalyzerView:
    library = ContentLibrary(state.content_library)
    notebook = AnalysisNotebook(state.analysis_notes)

    options = [ContentOption(value="", label=SELECT_PLACEHOLDER)]
    options.extend(ContentOption(value=str(c.id), label=c.title) for c in library)

    recent: list[NoteSummary] = []
    for note in notebook.recent_notes():
        linked = library.get(note.content_id)
        recent.append(NoteSummary(
            id=note.id,
            excerpt=_excerpt(note.script),
            content_title=linked.title if linked else UNKNOWN_CONTENT,
            tags=list(note.tags),
        ))

    if not recent:
        return AnalyzerView(options=options, recent_notes=[], empty=True, empty_message=EMPTY_NOTES)
    return AnalyzerView(options=options, recent_notes=recent, empty=False)


def challenges_view(state: AppState) -> ChallengesView:
    cards = [
        ChallengeCard(
            id=c.id,
            level=c.level,
            description=c.description,
            xp=c.xp,
            completed=c.completed,
            title=f"Lv.{c.level}: {c.description}",
            reward_text=f"Reward: {c.xp} XP",
            button_label="Completed" if c.completed else "Complete",
            disabled=c.completed,
            css_class=COMPLETED_CLASS if c.completed else "",
        )
        for c in state.challenges
    ]
    return ChallengesView(items=cards)


def project(state: AppState) -> Views:
    """Build every panel snapshot from the current state."""
    return Views(
        dashboard=dashboard_view(state),
        library=library_view(state),
        analyzer=analyzer_view(state),
        challenges=challenges_view(state),
    )
