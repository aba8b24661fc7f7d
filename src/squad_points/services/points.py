"""Points calculation for workout scoring.

Point values and thresholds are fixed. A workout is put into exactly one
category and the category decides the points:

    light      1    short or low-volume sessions
    moderate   2    30+ minutes, 8+ sets or more than 1000 volume
    team       2.5  team training sessions
    intensive  3    60+ minutes or more than 5000 volume

Scoring never fails. Missing or malformed numbers count as 0 because the
same code scores years of historical logs of uneven quality.
"""

import math
from collections.abc import Iterable
from typing import Any, Protocol

from ..models.points import PointsCategory, ScoreResult
from ..models.workout import WorkoutSource

POINTS: dict[PointsCategory, float] = {
    PointsCategory.LIGHT: 1,
    PointsCategory.MODERATE: 2,
    PointsCategory.TEAM: 2.5,
    PointsCategory.INTENSIVE: 3,
}

INTENSIVE_MIN_DURATION = 60
INTENSIVE_MIN_VOLUME = 5000  # exclusive
MODERATE_MIN_DURATION = 30
MODERATE_MIN_SETS = 8
MODERATE_MIN_VOLUME = 1000  # exclusive


class Scorable(Protocol):
    """Anything with the three fields scoring looks at."""

    source: Any
    duration_minutes: Any
    entries: Any


def _number(value: Any) -> float:
    """Coerce to a finite, non-negative number, else 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if not math.isfinite(value) or value < 0:
        return 0
    return value


def _sets_of(entry: Any) -> list:
    sets = entry.get("sets") if isinstance(entry, dict) else getattr(entry, "sets", None)
    return sets if isinstance(sets, (list, tuple)) else []


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def _iter_entries(entries: Any) -> Iterable:
    if isinstance(entries, (list, tuple)):
        return entries
    return ()


def calculate_total_volume(entries: Any) -> float:
    """Sum of reps x weight over every set of every entry."""
    total = 0
    for entry in _iter_entries(entries):
        for s in _sets_of(entry):
            total += _number(_field(s, "reps")) * _number(_field(s, "weight"))
    return total


def calculate_total_sets(entries: Any) -> int:
    """Number of sets across all entries."""
    return sum(len(_sets_of(entry)) for entry in _iter_entries(entries))


def determine_category(duration: Any, source: Any, entries: Any) -> PointsCategory:
    """Pick the category. Checks run in order and the first match wins."""
    if source == WorkoutSource.TEAM:
        return PointsCategory.TEAM

    duration = _number(duration)
    total_volume = calculate_total_volume(entries)

    if duration >= INTENSIVE_MIN_DURATION or total_volume > INTENSIVE_MIN_VOLUME:
        return PointsCategory.INTENSIVE

    if (
        duration >= MODERATE_MIN_DURATION
        or calculate_total_sets(entries) >= MODERATE_MIN_SETS
        or total_volume > MODERATE_MIN_VOLUME
    ):
        return PointsCategory.MODERATE

    return PointsCategory.LIGHT


def calculate_points(workout: Scorable) -> ScoreResult:
    """Score a workout.

    Args:
        workout: A ``WorkoutLog`` or any object (or dict) exposing
            ``source``, ``duration_minutes`` and ``entries``

    Returns:
        The category and its fixed point value
    """
    category = determine_category(
        _field(workout, "duration_minutes"),
        _field(workout, "source"),
        _field(workout, "entries"),
    )
    return ScoreResult(points=POINTS[category], category=category)


def get_points_for_category(category: PointsCategory) -> float:
    """Get the point value for a category."""
    return POINTS[PointsCategory(category)]
