"""Request models for the HTTP API.

Workout payloads are validated here, once, before anything is scored.
"""

from datetime import date

from pydantic import BaseModel, Field

from ..models.player import Player
from ..models.workout import WorkoutEntry, WorkoutLog, WorkoutSet, WorkoutSource


class SetIn(BaseModel):
    """One set of an exercise."""

    reps: int | None = Field(default=None, ge=0)
    weight: float | None = Field(default=None, ge=0, allow_inf_nan=False)


class EntryIn(BaseModel):
    """One exercise with its sets."""

    exercise: str = ""
    sets: list[SetIn] = Field(default_factory=list)


class WorkoutCreate(BaseModel):
    """Body of ``POST /workouts``."""

    user_id: int
    date: date
    source: WorkoutSource
    title: str = ""
    duration_minutes: int | None = Field(default=None, ge=0)
    entries: list[EntryIn] = Field(default_factory=list)
    notes: str = ""

    def to_workout(self) -> WorkoutLog:
        """Build the (not yet scored) workout log."""
        return WorkoutLog(
            user_id=self.user_id,
            date=self.date,
            source=self.source,
            title=self.title,
            duration_minutes=self.duration_minutes,
            entries=[
                WorkoutEntry(
                    exercise=e.exercise,
                    sets=[WorkoutSet(reps=s.reps, weight=s.weight) for s in e.sets],
                )
                for e in self.entries
            ],
            notes=self.notes,
        )


class PlayerCreate(BaseModel):
    """Body of ``POST /players``."""

    name: str = Field(min_length=1)
    position: str = ""

    def to_player(self) -> Player:
        """Build the player."""
        return Player(name=self.name, position=self.position)
