"""Exceptions raised by squad-points.

Each exception carries the HTTP status code the web layer answers with.
"""


class SquadPointsError(Exception):
    """Base class for squad-points errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(SquadPointsError):
    """A requested record does not exist."""

    status_code = 404


class WorkoutNotFoundError(NotFoundError):
    """Workout log lookup or update on a missing id."""

    def __init__(self, workout_id: int):
        super().__init__(f"Workout {workout_id} not found")
        self.workout_id = workout_id


class PlayerNotFoundError(NotFoundError):
    """Player lookup on a missing id."""

    def __init__(self, user_id: int):
        super().__init__(f"Player {user_id} not found")
        self.user_id = user_id


class InvalidWeekError(SquadPointsError, ValueError):
    """Week key is not in ``YYYY-Www`` form or names a week that doesn't exist."""

    status_code = 400

    def __init__(self, week: str):
        super().__init__(f"Week must be in format YYYY-Www, got {week!r}")
        self.week = week
