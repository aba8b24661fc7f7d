"""Data access layer for squad-points."""

import json
from datetime import date, datetime
from pathlib import Path

import aiosqlite

from ..exceptions import WorkoutNotFoundError
from ..models.player import Player
from ..models.points import CategorySummary, PointsCategory
from ..models.workout import WorkoutLog
from .engine import get_db_path

_CATEGORY_VALUES = tuple(c.value for c in PointsCategory)
_CATEGORY_PLACEHOLDERS = ", ".join("?" for _ in _CATEGORY_VALUES)


class PlayerRepository:
    """Repository for players."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, player: Player) -> int:
        """Create a new player."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "INSERT INTO players (name, position) VALUES (?, ?)",
                (player.name, player.position),
            )
            await db.commit()
            return cursor.lastrowid

    async def get(self, user_id: int) -> Player | None:
        """Get a player by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM players WHERE id = ?", (user_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_player(row)

    async def get_many(self, user_ids: list[int]) -> dict[int, Player]:
        """Get players by ID, keyed by ID. Unknown IDs are left out."""
        if not user_ids:
            return {}
        placeholders = ", ".join("?" for _ in user_ids)
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                f"SELECT * FROM players WHERE id IN ({placeholders})",
                tuple(user_ids),
            )
            rows = await cursor.fetchall()
            return {row["id"]: self._row_to_player(row) for row in rows}

    async def list_all(self) -> list[Player]:
        """List all players."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM players ORDER BY name")
            rows = await cursor.fetchall()
            return [self._row_to_player(row) for row in rows]

    def _row_to_player(self, row: aiosqlite.Row) -> Player:
        """Convert a database row to a Player."""
        return Player(
            id=row["id"],
            name=row["name"],
            position=row["position"] or "",
            created_at=datetime.fromisoformat(row["created_at"]) if row["created_at"] else None,
        )


class WorkoutLogRepository:
    """Repository for workout logs."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, workout: WorkoutLog) -> int:
        """Store a workout log, scored or not."""
        data = workout.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO workout_logs
                (user_id, date, title, source, duration_minutes, entries, notes,
                 points, points_category)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    data["user_id"],
                    data["date"],
                    data["title"],
                    data["source"],
                    data["duration_minutes"],
                    json.dumps(data["entries"]),
                    data["notes"],
                    data["points"],
                    data["points_category"],
                ),
            )
            await db.commit()
            return cursor.lastrowid

    async def get(self, workout_id: int) -> WorkoutLog | None:
        """Get a workout log by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM workout_logs WHERE id = ?", (workout_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_workout(row)

    async def list_for_user(
        self,
        user_id: int,
        start: date | None = None,
        end: date | None = None,
    ) -> list[WorkoutLog]:
        """List a player's workouts, optionally within [start, end]."""
        query = "SELECT * FROM workout_logs WHERE user_id = ?"
        params: list = [user_id]
        if start:
            query += " AND date >= ?"
            params.append(start.isoformat())
        if end:
            query += " AND date <= ?"
            params.append(end.isoformat())
        query += " ORDER BY date DESC, id DESC"

        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(query, tuple(params))
            rows = await cursor.fetchall()
            return [self._row_to_workout(row) for row in rows]

    async def list_between(self, start: date, end: date) -> list[WorkoutLog]:
        """List all players' workouts with a date in [start, end]."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM workout_logs
                WHERE date >= ? AND date <= ?
                ORDER BY date DESC, id DESC
                """,
                (start.isoformat(), end.isoformat()),
            )
            rows = await cursor.fetchall()
            return [self._row_to_workout(row) for row in rows]

    async def list_unscored_ids(self) -> list[int]:
        """IDs of workouts missing either score field.

        Rows are decoded one at a time by ``get``, so a single unreadable
        row can't stop a caller working through the rest.
        """
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                f"""
                SELECT id FROM workout_logs
                WHERE points IS NULL OR points_category IS NULL
                   OR points_category NOT IN ({_CATEGORY_PLACEHOLDERS})
                ORDER BY id
                """,
                _CATEGORY_VALUES,
            )
            rows = await cursor.fetchall()
            return [row[0] for row in rows]

    async def update_points(
        self, workout_id: int, points: float, category: PointsCategory
    ) -> None:
        """Persist the score of one workout."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                UPDATE workout_logs SET points = ?, points_category = ?
                WHERE id = ?
                """,
                (points, PointsCategory(category).value, workout_id),
            )
            await db.commit()
            if cursor.rowcount == 0:
                raise WorkoutNotFoundError(workout_id)

    async def summarize_by_category(self) -> list[CategorySummary]:
        """Count workouts and sum points per category.

        Workouts with no category or one outside ``PointsCategory`` are
        grouped under ``None``.
        """
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                f"""
                SELECT
                    CASE WHEN points_category IN ({_CATEGORY_PLACEHOLDERS})
                        THEN points_category END AS category,
                    COUNT(id) AS count,
                    SUM(CASE WHEN points_category IN ({_CATEGORY_PLACEHOLDERS})
                        THEN points END) AS total_points
                FROM workout_logs
                GROUP BY category
                ORDER BY category
                """,
                _CATEGORY_VALUES * 2,
            )
            rows = await cursor.fetchall()
            return [
                CategorySummary(
                    category=(
                        PointsCategory(row["category"])
                        if row["category"]
                        else None
                    ),
                    count=row["count"],
                    total_points=row["total_points"] or 0,
                )
                for row in rows
            ]

    async def delete(self, workout_id: int) -> None:
        """Delete a workout log."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM workout_logs WHERE id = ?", (workout_id,))
            await db.commit()

    def _row_to_workout(self, row: aiosqlite.Row) -> WorkoutLog:
        """Convert a database row to a WorkoutLog."""
        data = {
            "user_id": row["user_id"],
            "date": row["date"],
            "title": row["title"],
            "source": row["source"],
            "duration_minutes": row["duration_minutes"],
            "entries": _load_entries(row["entries"]),
            "notes": row["notes"],
            "points": row["points"],
            "points_category": row["points_category"],
            "created_at": row["created_at"],
        }
        return WorkoutLog.from_dict(data, id=row["id"])


def _load_entries(raw: str | None) -> list:
    # Old rows may hold entries that are not valid JSON
    try:
        return json.loads(raw) if raw else []
    except (TypeError, ValueError):
        return []
