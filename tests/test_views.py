"""Tests for the view projector."""

import pytest

from speech_lab.models import AnalysisNote, AppState, ContentItem
from speech_lab.views import (
    COMPLETED_CLASS,
    EMPTY_LIBRARY,
    EMPTY_NOTES,
    SELECT_PLACEHOLDER,
    UNKNOWN_CONTENT,
    analyzer_view,
    challenges_view,
    dashboard_view,
    library_view,
    project,
)


def _item(id: int, title: str = "Talk") -> ContentItem:
    return ContentItem(id=id, title=title, url=f"https://v/{id}", type="video", category="speech")


def _note(id: int, content_id, script: str = "s", tags=None) -> AnalysisNote:
    return AnalysisNote(id=id, content_id=content_id, script=script, tags=tags or [])


# ── Dashboard ────────────────────────────────────────────────


def test_dashboard_fresh():
    view = dashboard_view(AppState.fresh())
    assert view.level == 1
    assert view.xp == 0
    assert view.xp_for_next_level == 1000
    assert view.progress_percent == 0
    assert view.progress_label == "0%"
    assert view.xp_text == "0 / 1,000"
    assert view.skill_chart.labels == ["Logic", "Appeal", "Skill"]
    assert view.skill_chart.data == [0, 0, 0]


def test_dashboard_progress_and_series():
    state = AppState.fresh()
    state.player_stats.xp = 1400
    state.player_stats.level = 2
    state.player_stats.skill_tree.logic = 4
    state.player_stats.skill_tree.skill = 1
    view = dashboard_view(state)
    assert view.progress_percent == pytest.approx(40)
    assert view.progress_label == "40%"
    assert view.xp_text == "1,400 / 2,000"
    assert view.skill_chart.data == [4, 0, 1]


def test_dashboard_label_rounds_half_up():
    state = AppState.fresh()
    state.player_stats.xp = 125
    assert dashboard_view(state).progress_label == "13%"


def test_dashboard_progress_clamped_when_level_lags():
    state = AppState.fresh()
    state.player_stats.xp = 3500
    state.player_stats.level = 2
    view = dashboard_view(state)
    assert view.progress_percent == 100
    assert view.progress_label == "100%"


# ── Library ──────────────────────────────────────────────────


def test_library_empty_marker():
    view = library_view(AppState.fresh())
    assert view.empty is True
    assert view.items == []
    assert view.empty_message == EMPTY_LIBRARY


def test_library_in_insertion_order():
    state = AppState.fresh()
    state.content_library.extend([_item(2, "B"), _item(1, "A")])
    view = library_view(state)
    assert view.empty is False
    assert [c.title for c in view.items] == ["B", "A"]
    assert view.items[0].subtitle == "speech / video"
    assert view.items[0].url == "https://v/2"


# ── Analyzer ─────────────────────────────────────────────────


def test_analyzer_options_start_with_placeholder():
    state = AppState.fresh()
    state.content_library.extend([_item(1, "A"), _item(2, "B")])
    options = analyzer_view(state).options
    assert (options[0].value, options[0].label) == ("", SELECT_PLACEHOLDER)
    assert [(o.value, o.label) for o in options[1:]] == [("1", "A"), ("2", "B")]


def test_analyzer_empty_notes():
    view = analyzer_view(AppState.fresh())
    assert view.empty is True
    assert view.recent_notes == []
    assert view.empty_message == EMPTY_NOTES


def test_analyzer_recent_notes_newest_first_max_five():
    state = AppState.fresh()
    state.content_library.append(_item(1))
    state.analysis_notes.extend(_note(i, 1, script=f"note {i}") for i in range(1, 8))
    view = analyzer_view(state)
    assert [n.id for n in view.recent_notes] == [7, 6, 5, 4, 3]
    assert [n.id for n in state.analysis_notes] == [1, 2, 3, 4, 5, 6, 7]


def test_analyzer_resolves_titles_and_placeholder():
    state = AppState.fresh()
    state.content_library.append(_item(1, "Keynote"))
    state.analysis_notes.extend([
        _note(1, "1"),
        _note(2, 99),
        _note(3, ""),
    ])
    titles = [n.content_title for n in analyzer_view(state).recent_notes]
    assert titles == [UNKNOWN_CONTENT, UNKNOWN_CONTENT, "Keynote"]


def test_analyzer_excerpt_and_tags():
    state = AppState.fresh()
    script = "Ladies and gentlemen, thank you all for coming tonight"
    state.analysis_notes.append(_note(1, 1, script=script, tags=["logic", "other"]))
    summary = analyzer_view(state).recent_notes[0]
    assert summary.excerpt == script[:30] + "..."
    assert summary.tags == ["logic", "other"]


# ── Challenges ───────────────────────────────────────────────


def test_challenge_cards():
    state = AppState.fresh()
    state.challenges[1].completed = True
    cards = challenges_view(state).items
    assert [c.id for c in cards] == [1, 2, 3, 4]

    pending, done = cards[0], cards[1]
    assert pending.title.startswith("Lv.1: ")
    assert pending.reward_text == "Reward: 100 XP"
    assert pending.button_label == "Complete"
    assert pending.disabled is False
    assert pending.css_class == ""

    assert done.completed is True
    assert done.button_label == "Completed"
    assert done.disabled is True
    assert done.css_class == COMPLETED_CLASS


# ── project ──────────────────────────────────────────────────


def test_project_does_not_mutate_state():
    state = AppState.fresh()
    state.content_library.append(_item(1))
    state.analysis_notes.extend(_note(i, 1) for i in range(1, 4))
    before = state.model_copy(deep=True)
    project(state)
    assert state == before


def test_project_builds_all_panels():
    views = project(AppState.fresh())
    assert views.dashboard.level == 1
    assert views.library.empty is True
    assert views.analyzer.empty is True
    assert len(views.challenges.items) == 4
