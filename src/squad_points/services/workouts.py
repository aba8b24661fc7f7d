"""Workout logging: score on creation, then persist."""

import logging

from ..db.repositories import PlayerRepository, WorkoutLogRepository
from ..exceptions import PlayerNotFoundError
from ..models.workout import WorkoutLog
from .points import calculate_points

logger = logging.getLogger(__name__)


class WorkoutService:
    """Creates workout logs with their points already set."""

    def __init__(
        self,
        workout_repo: WorkoutLogRepository,
        player_repo: PlayerRepository,
    ):
        self.workout_repo = workout_repo
        self.player_repo = player_repo

    async def log_workout(self, workout: WorkoutLog) -> WorkoutLog:
        """Score and store a new workout.

        Raises:
            PlayerNotFoundError: If the workout's player doesn't exist
        """
        if await self.player_repo.get(workout.user_id) is None:
            raise PlayerNotFoundError(workout.user_id)

        result = calculate_points(workout)
        workout.points = result.points
        workout.points_category = result.category

        workout_id = await self.workout_repo.create(workout)
        logger.info(
            "Logged workout %s for player %s: %s (%g points)",
            workout_id,
            workout.user_id,
            result.category.value,
            result.points,
        )
        return await self.workout_repo.get(workout_id)
