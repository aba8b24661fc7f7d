"""Database engine setup and initialization."""

import os
from pathlib import Path

import aiosqlite

# Default data directory, overridable with SQUAD_POINTS_DATA_DIR
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"


def get_data_dir() -> Path:
    """Get the configured data directory."""
    override = os.environ.get("SQUAD_POINTS_DATA_DIR")
    return Path(override) if override else DATA_DIR


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / "squad_points.db"


async def _run_migrations(db: aiosqlite.Connection) -> None:
    """Run database migrations for schema updates."""
    # Workout logs created before scoring existed lack the points columns.
    # Rows migrated here stay NULL until the backfill scores them.
    cursor = await db.execute("PRAGMA table_info(workout_logs)")
    columns = await cursor.fetchall()
    column_names = {col[1] for col in columns}

    if "points" not in column_names:
        await db.execute("ALTER TABLE workout_logs ADD COLUMN points REAL")

    if "points_category" not in column_names:
        await db.execute("ALTER TABLE workout_logs ADD COLUMN points_category TEXT")

    await db.commit()


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # Players table
        await db.execute("""
            CREATE TABLE IF NOT EXISTS players (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                position TEXT DEFAULT '',
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        # Workout logs table
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_logs (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                date TEXT NOT NULL,
                title TEXT DEFAULT '',
                source TEXT NOT NULL CHECK (source IN ('player', 'coach', 'team')),
                duration_minutes INTEGER,
                entries TEXT NOT NULL DEFAULT '[]',
                notes TEXT DEFAULT '',
                points REAL,
                points_category TEXT,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                FOREIGN KEY (user_id) REFERENCES players(id) ON DELETE CASCADE
            )
        """)

        # Create indexes for common queries
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_logs_user
            ON workout_logs(user_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_logs_date
            ON workout_logs(date)
        """)

        await db.commit()

        # Run migrations for existing databases
        await _run_migrations(db)
