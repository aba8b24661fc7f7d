"""Weekly and monthly points rollups and the leaderboard.

Rollups only read the points already stored on each workout; they never
score anything again. Unscored workouts are skipped.
"""

import calendar
import math
import re
from collections.abc import Iterable
from datetime import date, timedelta

from ..exceptions import InvalidWeekError
from ..models.player import Player
from ..models.points import LeaderboardEntry, PointsBreakdown, WeeklyPoints
from ..models.workout import WorkoutLog, WorkoutSource

DEFAULT_WEEKLY_TARGET = 20
DAYS_PER_WEEK = 7

WEEK_KEY_PATTERN = re.compile(r"^(\d{4})-W(\d{2})$")


def iso_week_key(day: date) -> str:
    """ISO week key for a date, e.g. ``2025-W03``."""
    year, week, _ = day.isocalendar()
    return f"{year}-W{week:02d}"


def week_bounds(week_key: str) -> tuple[date, date]:
    """Monday and Sunday of an ISO week, both inclusive.

    Raises:
        InvalidWeekError: If the key is malformed or the week doesn't exist
    """
    match = WEEK_KEY_PATTERN.match(week_key)
    if not match:
        raise InvalidWeekError(week_key)
    year, week = int(match.group(1)), int(match.group(2))
    try:
        monday = date.fromisocalendar(year, week, 1)
    except ValueError:
        raise InvalidWeekError(week_key) from None
    return monday, monday + timedelta(days=DAYS_PER_WEEK - 1)


def recent_week_keys(today: date, count: int) -> list[str]:
    """The ``count`` most recent week keys up to ``today``, newest first."""
    return [iso_week_key(today - timedelta(weeks=i)) for i in range(count)]


def aggregate_period(
    workouts: Iterable[WorkoutLog],
    user_id: int,
    start: date,
    end: date,
    period_key: str,
    target_points: float = DEFAULT_WEEKLY_TARGET,
) -> WeeklyPoints:
    """Sum one player's points for workouts dated within [start, end]."""
    rollup = WeeklyPoints(user_id=user_id, week=period_key, target_points=target_points)

    days: set[date] = set()
    days_by_source: dict[WorkoutSource, set[date]] = {s: set() for s in WorkoutSource}

    for workout in workouts:
        if workout.user_id != user_id or not workout.is_scored:
            continue
        if not start <= workout.date <= end:
            continue

        rollup.total_points += workout.points
        days.add(workout.date)
        days_by_source[workout.source].add(workout.date)
        rollup.breakdown.append(
            PointsBreakdown(
                date=workout.date,
                title=workout.title,
                category=workout.points_category,
                points=workout.points,
                source=workout.source.value,
                duration_minutes=workout.duration_minutes or 0,
            )
        )

    rollup.breakdown.sort(key=lambda b: b.date)
    rollup.workout_days = len(days)
    rollup.team_training_days = len(days_by_source[WorkoutSource.TEAM])
    rollup.coach_workout_days = len(days_by_source[WorkoutSource.COACH])
    rollup.personal_workout_days = len(days_by_source[WorkoutSource.PLAYER])
    return rollup


def aggregate_week(
    workouts: Iterable[WorkoutLog],
    user_id: int,
    week_key: str,
    target_points: float = DEFAULT_WEEKLY_TARGET,
) -> WeeklyPoints:
    """Roll up one player's points for an ISO week (Monday to Sunday)."""
    monday, sunday = week_bounds(week_key)
    return aggregate_period(workouts, user_id, monday, sunday, week_key, target_points)


def aggregate_month(
    workouts: Iterable[WorkoutLog],
    user_id: int,
    year: int,
    month: int,
    target_points: float = DEFAULT_WEEKLY_TARGET,
) -> WeeklyPoints:
    """Roll up one player's points for a calendar month."""
    last_day = calendar.monthrange(year, month)[1]
    return aggregate_period(
        workouts,
        user_id,
        date(year, month, 1),
        date(year, month, last_day),
        f"{year}-{month:02d}",
        target_points,
    )


def aggregate_week_for_players(
    workouts: Iterable[WorkoutLog],
    week_key: str,
    target_points: float = DEFAULT_WEEKLY_TARGET,
) -> list[WeeklyPoints]:
    """Weekly rollup for every player with a workout in the list."""
    workouts = list(workouts)
    user_ids = sorted({w.user_id for w in workouts})
    return [aggregate_week(workouts, uid, week_key, target_points) for uid in user_ids]


def _round_pct(value: float) -> int:
    # Half rounds up, so 12.5 -> 13
    return int(math.floor(value + 0.5))


def build_leaderboard(
    weekly_points: Iterable[WeeklyPoints],
    players: dict[int, Player],
) -> list[LeaderboardEntry]:
    """Rank rollups by total points, highest first.

    Ties keep their input order.
    """
    ranked = sorted(weekly_points, key=lambda p: p.total_points, reverse=True)

    leaderboard = []
    for index, points in enumerate(ranked):
        player = players.get(points.user_id)

        compliance_pct = (
            _round_pct(points.total_points / points.target_points * 100)
            if points.target_points > 0
            else 0
        )
        attendance_pct = _round_pct(points.workout_days / DAYS_PER_WEEK * 100)
        free_share_pct = (
            _round_pct(points.personal_workout_days / points.workout_days * 100)
            if points.workout_days > 0
            else 0
        )

        leaderboard.append(
            LeaderboardEntry(
                rank=index + 1,
                user_id=points.user_id,
                player_name=player.name if player else "Unknown",
                position=(player.position if player and player.position else "N/A"),
                total_points=points.total_points,
                target_points=points.target_points,
                workout_days=points.workout_days,
                compliance_pct=compliance_pct,
                attendance_pct=attendance_pct,
                free_share_pct=free_share_pct,
                team_training_days=points.team_training_days,
                coach_workout_days=points.coach_workout_days,
                personal_workout_days=points.personal_workout_days,
            )
        )
    return leaderboard
