"""Dependency injection for API routes."""

from fastapi import Request

from ..db.repositories import PlayerRepository, WorkoutLogRepository
from ..services.leaderboard import LeaderboardService
from ..services.workouts import WorkoutService


def get_player_repository(request: Request) -> PlayerRepository:
    """Player repository bound to the app's database."""
    return PlayerRepository(request.app.state.db_path)


def get_workout_repository(request: Request) -> WorkoutLogRepository:
    """Workout log repository bound to the app's database."""
    return WorkoutLogRepository(request.app.state.db_path)


def get_workout_service(request: Request) -> WorkoutService:
    """Workout service for scoring and storing new workouts."""
    return WorkoutService(get_workout_repository(request), get_player_repository(request))


def get_leaderboard_service(request: Request) -> LeaderboardService:
    """Leaderboard service bound to the app's database."""
    return LeaderboardService(get_workout_repository(request), get_player_repository(request))
