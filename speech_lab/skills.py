"""Skill tally — folds note tags into the three skill-tree counters."""

from __future__ import annotations

from typing import Iterable

from speech_lab.models import SkillTree

SKILL_KEYS: tuple[str, ...] = ("logic", "appeal", "skill")


def tally_tags(skill_tree: SkillTree, tags: Iterable[str]) -> list[str]:
    """Increment the counter of every recognized tag by one.

    Unrecognized tags are ignored. Returns the keys that were incremented,
    in tag order (a repeated tag counts each time it appears).
    """
    counted: list[str] = []
    for tag in tags:
        if tag in SKILL_KEYS:
            setattr(skill_tree, tag, getattr(skill_tree, tag) + 1)
            counted.append(tag)
    return counted


def skill_series(skill_tree: SkillTree) -> list[int]:
    """Counter values in chart order: logic, appeal, skill."""
    return [getattr(skill_tree, key) for key in SKILL_KEYS]
