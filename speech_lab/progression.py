"""XP accrual and leveling.

Levels are a fixed XP_PER_LEVEL apart: level L starts at (L-1) * 1000 XP and
the next level is reached at L * 1000 XP.

The level-up check is a single comparison per award. An award large enough to
cross several thresholds still advances the level by exactly one; the skipped
levels are picked up by later awards. `add_xp` is the only caller of
`check_level_up`, so each award yields at most one LevelUp.
"""

from __future__ import annotations

from pydantic import BaseModel

from speech_lab.models import PlayerStats

XP_PER_LEVEL = 1000

CONTENT_XP = 10
NOTE_XP = 50


class LevelUp(BaseModel):
    """Notification raised when an award pushes the player up a level."""

    level: int
    xp: int

    @property
    def message(self) -> str:
        return f"Level up! Reached Level {self.level}!"


def xp_floor(level: int) -> int:
    """XP at which `level` begins."""
    return (level - 1) * XP_PER_LEVEL


def xp_for_next_level(level: int) -> int:
    return level * XP_PER_LEVEL


def progress_percent(stats: PlayerStats) -> float:
    """Progress through the current level, clamped to [0, 100]."""
    gained = stats.xp - xp_floor(stats.level)
    percent = gained / XP_PER_LEVEL * 100
    return max(0.0, min(100.0, percent))


def check_level_up(stats: PlayerStats) -> LevelUp | None:
    """Advance one level if the next threshold has been reached."""
    if stats.xp >= xp_for_next_level(stats.level):
        stats.level += 1
        return LevelUp(level=stats.level, xp=stats.xp)
    return None


def add_xp(stats: PlayerStats, amount: int) -> LevelUp | None:
    """Add `amount` XP and run the level-up check once."""
    if amount < 0:
        raise ValueError(f"XP amount must be non-negative, got {amount}")
    stats.xp += amount
    return check_level_up(stats)
