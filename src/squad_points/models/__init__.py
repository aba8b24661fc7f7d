"""Data models for squad-points."""

from .player import Player
from .points import (
    CategorySummary,
    LeaderboardEntry,
    PointsBreakdown,
    PointsCategory,
    ScoreResult,
    WeeklyPoints,
)
from .workout import WorkoutEntry, WorkoutLog, WorkoutSet, WorkoutSource

__all__ = [
    "CategorySummary",
    "LeaderboardEntry",
    "Player",
    "PointsBreakdown",
    "PointsCategory",
    "ScoreResult",
    "WeeklyPoints",
    "WorkoutEntry",
    "WorkoutLog",
    "WorkoutSet",
    "WorkoutSource",
]
