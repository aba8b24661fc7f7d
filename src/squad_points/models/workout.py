"""Workout log model."""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from .points import PointsCategory


class WorkoutSource(str, Enum):
    """Where a workout came from."""

    PLAYER = "player"
    COACH = "coach"
    TEAM = "team"


@dataclass
class WorkoutSet:
    """A single logged set. Both fields are optional."""

    reps: int | float | None = None
    weight: int | float | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"reps": self.reps, "weight": self.weight}

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutSet":
        """Create from dictionary.

        Stored history is not always clean, so values that are not
        numbers are dropped instead of rejected.
        """
        reps = data.get("reps")
        weight = data.get("weight")
        return cls(
            reps=reps if _is_number(reps) else None,
            weight=weight if _is_number(weight) else None,
        )


@dataclass
class WorkoutEntry:
    """A logged exercise within a workout."""

    exercise: str = ""
    sets: list[WorkoutSet] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "exercise": self.exercise,
            "sets": [s.to_dict() for s in self.sets],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutEntry":
        """Create from dictionary."""
        raw_sets = data.get("sets")
        if not isinstance(raw_sets, list):
            raw_sets = []
        return cls(
            exercise=str(data.get("exercise") or data.get("name") or ""),
            sets=[WorkoutSet.from_dict(s) for s in raw_sets if isinstance(s, dict)],
        )


@dataclass
class WorkoutLog:
    """A workout recorded for a player.

    ``points`` and ``points_category`` stay ``None`` until the workout
    has been scored, either at creation or by the backfill job.
    """

    user_id: int
    date: date
    source: WorkoutSource
    title: str = ""
    duration_minutes: int | None = None
    entries: list[WorkoutEntry] = field(default_factory=list)
    notes: str = ""
    points: float | None = None
    points_category: PointsCategory | None = None
    id: int | None = None
    created_at: datetime | None = None

    @property
    def is_scored(self) -> bool:
        """Whether both score fields are present."""
        return self.points is not None and self.points_category is not None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage and API responses."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "date": self.date.isoformat(),
            "title": self.title,
            "source": self.source.value,
            "duration_minutes": self.duration_minutes,
            "entries": [e.to_dict() for e in self.entries],
            "notes": self.notes,
            "points": self.points,
            "points_category": (
                self.points_category.value if self.points_category else None
            ),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "WorkoutLog":
        """Create from dictionary."""
        raw_entries = data.get("entries")
        if not isinstance(raw_entries, list):
            raw_entries = []

        workout_date = data["date"]
        if isinstance(workout_date, str):
            workout_date = date.fromisoformat(workout_date[:10])

        created_at = None
        if data.get("created_at"):
            created_at = datetime.fromisoformat(data["created_at"])

        duration = data.get("duration_minutes")
        points = data.get("points")

        return cls(
            id=id if id is not None else data.get("id"),
            user_id=data["user_id"],
            date=workout_date,
            title=data.get("title") or "",
            source=WorkoutSource(data["source"]),
            duration_minutes=int(duration) if _is_number(duration) else None,
            entries=[WorkoutEntry.from_dict(e) for e in raw_entries if isinstance(e, dict)],
            notes=data.get("notes") or "",
            points=points if _is_number(points) else None,
            points_category=_parse_category(data.get("points_category")),
            created_at=created_at,
        )

    def get_summary(self) -> str:
        """Short one-line description for CLI listings."""
        sets = sum(len(e.sets) for e in self.entries)
        duration = f"{self.duration_minutes}min" if self.duration_minutes else "-"
        return f"{self.date.isoformat()} {self.title or '(untitled)'} [{self.source.value}, {duration}, {sets} sets]"


def _is_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _parse_category(value) -> PointsCategory | None:
    # Unknown categories read as unscored so the backfill picks them up again
    try:
        return PointsCategory(value) if value else None
    except ValueError:
        return None
