"""Database layer for squad-points."""

from .engine import get_data_dir, get_db_path, init_db
from .repositories import PlayerRepository, WorkoutLogRepository

__all__ = [
    "get_data_dir",
    "get_db_path",
    "init_db",
    "PlayerRepository",
    "WorkoutLogRepository",
]
