"""Points, weekly rollup and leaderboard models."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class PointsCategory(str, Enum):
    """Workout intensity category driving the point value."""

    LIGHT = "light"
    MODERATE = "moderate"
    TEAM = "team"
    INTENSIVE = "intensive"


@dataclass(frozen=True)
class ScoreResult:
    """Points awarded to a single workout."""

    points: float
    category: PointsCategory

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"points": self.points, "category": self.category.value}


@dataclass
class PointsBreakdown:
    """One scored workout contributing to a rollup."""

    date: date
    title: str
    category: PointsCategory
    points: float
    source: str
    duration_minutes: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "date": self.date.isoformat(),
            "title": self.title,
            "category": self.category.value,
            "points": self.points,
            "source": self.source,
            "duration_minutes": self.duration_minutes,
        }


@dataclass
class WeeklyPoints:
    """Points rollup for one player over one period.

    ``week`` holds the ISO week key (``2025-W03``) for weekly rollups and
    ``YYYY-MM`` for monthly ones.
    """

    user_id: int
    week: str
    total_points: float = 0
    target_points: float = 20
    workout_days: int = 0
    team_training_days: int = 0
    coach_workout_days: int = 0
    personal_workout_days: int = 0
    breakdown: list[PointsBreakdown] = field(default_factory=list)

    @property
    def progress_percentage(self) -> float:
        """Progress towards the target, capped at 100."""
        if self.target_points <= 0:
            return 0.0
        return min(100.0, self.total_points / self.target_points * 100)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "user_id": self.user_id,
            "week": self.week,
            "total_points": self.total_points,
            "target_points": self.target_points,
            "workout_days": self.workout_days,
            "team_training_days": self.team_training_days,
            "coach_workout_days": self.coach_workout_days,
            "personal_workout_days": self.personal_workout_days,
            "breakdown": [b.to_dict() for b in self.breakdown],
        }


@dataclass
class LeaderboardEntry:
    """A ranked row of the weekly leaderboard."""

    rank: int
    user_id: int
    player_name: str
    position: str
    total_points: float
    target_points: float
    workout_days: int
    compliance_pct: int
    attendance_pct: int
    free_share_pct: int
    team_training_days: int
    coach_workout_days: int
    personal_workout_days: int

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "rank": self.rank,
            "user_id": self.user_id,
            "player_name": self.player_name,
            "position": self.position,
            "total_points": self.total_points,
            "target_points": self.target_points,
            "workout_days": self.workout_days,
            "compliance_pct": self.compliance_pct,
            "attendance_pct": self.attendance_pct,
            "free_share_pct": self.free_share_pct,
            "team_training_days": self.team_training_days,
            "coach_workout_days": self.coach_workout_days,
            "personal_workout_days": self.personal_workout_days,
        }


@dataclass
class CategorySummary:
    """Stored workouts and points for one category.

    ``category`` is ``None`` for workouts that have not been scored.
    """

    category: PointsCategory | None
    count: int
    total_points: float

    def get_display(self) -> str:
        """Human-readable summary line."""
        name = self.category.value if self.category else "null"
        return f"{name}: {self.count} workouts, {self.total_points:g} total points"
