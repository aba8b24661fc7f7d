"""Workout log routes."""

from datetime import date

from fastapi import APIRouter, Depends

from ...db.repositories import WorkoutLogRepository
from ...exceptions import WorkoutNotFoundError
from ...services.points import calculate_total_sets, calculate_total_volume
from ...services.workouts import WorkoutService
from ..deps import get_workout_repository, get_workout_service
from ..schemas import WorkoutCreate

router = APIRouter(prefix="/workouts", tags=["workouts"])


def _workout_response(workout) -> dict:
    data = workout.to_dict()
    data["total_sets"] = calculate_total_sets(workout.entries)
    data["total_volume"] = calculate_total_volume(workout.entries)
    return data


@router.post("", status_code=201)
async def create_workout(
    body: WorkoutCreate,
    service: WorkoutService = Depends(get_workout_service),
):
    """Log a workout. Points and category are set before it is stored."""
    workout = await service.log_workout(body.to_workout())
    return _workout_response(workout)


@router.get("")
async def list_workouts(
    user_id: int,
    start_date: date | None = None,
    end_date: date | None = None,
    repo: WorkoutLogRepository = Depends(get_workout_repository),
):
    """List a player's workouts, newest first."""
    logs = await repo.list_for_user(user_id, start_date, end_date)
    return [_workout_response(w) for w in logs]


@router.get("/{workout_id}")
async def get_workout(
    workout_id: int,
    repo: WorkoutLogRepository = Depends(get_workout_repository),
):
    """Get a workout by ID."""
    workout = await repo.get(workout_id)
    if workout is None:
        raise WorkoutNotFoundError(workout_id)
    return _workout_response(workout)
