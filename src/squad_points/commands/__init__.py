"""CLI commands for squad-points."""

from .init import init
from .leaderboard import leaderboard
from .players import players
from .points import points
from .serve import serve
from .workouts import workouts

__all__ = [
    "init",
    "leaderboard",
    "players",
    "points",
    "serve",
    "workouts",
]
