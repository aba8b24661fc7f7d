"""Leaderboard queries over stored workouts."""

import logging
from datetime import date

from ..db.repositories import PlayerRepository, WorkoutLogRepository
from ..models.points import LeaderboardEntry, WeeklyPoints
from .aggregation import (
    aggregate_week,
    aggregate_week_for_players,
    build_leaderboard,
    iso_week_key,
    recent_week_keys,
    week_bounds,
)

logger = logging.getLogger(__name__)


class LeaderboardService:
    """Builds weekly leaderboards and player histories."""

    def __init__(
        self,
        workout_repo: WorkoutLogRepository,
        player_repo: PlayerRepository,
    ):
        self.workout_repo = workout_repo
        self.player_repo = player_repo

    async def weekly(self, week_key: str | None = None) -> tuple[str, list[LeaderboardEntry]]:
        """Leaderboard for a week (the current one by default).

        Raises:
            InvalidWeekError: If the week key is malformed
        """
        week_key = week_key or iso_week_key(date.today())
        monday, sunday = week_bounds(week_key)

        logs = await self.workout_repo.list_between(monday, sunday)
        rollups = aggregate_week_for_players(logs, week_key)
        players = await self.player_repo.get_many([r.user_id for r in rollups])

        leaderboard = build_leaderboard(rollups, players)
        logger.info("Built leaderboard for week %s: %d players", week_key, len(leaderboard))
        return week_key, leaderboard

    async def player_history(
        self,
        user_id: int,
        weeks: int = 8,
        today: date | None = None,
    ) -> list[WeeklyPoints]:
        """One player's weekly rollups, most recent week first."""
        week_keys = recent_week_keys(today or date.today(), weeks)
        if not week_keys:
            return []

        start, _ = week_bounds(week_keys[-1])
        _, end = week_bounds(week_keys[0])
        logs = await self.workout_repo.list_for_user(user_id, start, end)
        return [aggregate_week(logs, user_id, key) for key in week_keys]
