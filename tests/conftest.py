"""Pytest configuration and fixtures."""

import asyncio
import tempfile
from datetime import date
from pathlib import Path

import pytest

from squad_points.db.engine import init_db
from squad_points.models.workout import (
    WorkoutEntry,
    WorkoutLog,
    WorkoutSet,
    WorkoutSource,
)


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def initialized_db(temp_db_path):
    """A temporary database with the schema created."""
    asyncio.run(init_db(temp_db_path))
    return temp_db_path


@pytest.fixture
def sample_workout():
    """A 45 minute personal gym session."""
    return WorkoutLog(
        user_id=1,
        date=date(2025, 1, 15),
        title="Leg day",
        source=WorkoutSource.PLAYER,
        duration_minutes=45,
        entries=[
            WorkoutEntry(
                exercise="Squat",
                sets=[WorkoutSet(reps=5, weight=100) for _ in range(3)],
            )
        ],
    )
