"""Backfill points for workouts logged before scoring existed."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

from ..exceptions import WorkoutNotFoundError
from ..models.points import CategorySummary, PointsCategory
from ..models.workout import WorkoutLog
from .points import calculate_points

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 50


class WorkoutStore(Protocol):
    """Persistence the backfill needs. ``WorkoutLogRepository`` fits."""

    async def list_unscored_ids(self) -> list[int]: ...

    async def get(self, workout_id: int) -> WorkoutLog | None: ...

    async def update_points(
        self, workout_id: int, points: float, category: PointsCategory
    ) -> None: ...

    async def summarize_by_category(self) -> list[CategorySummary]: ...


@dataclass
class BackfillReport:
    """Outcome of a backfill run."""

    found: int = 0
    updated: int = 0
    errors: int = 0
    failed_ids: list[int] = field(default_factory=list)
    summary: list[CategorySummary] = field(default_factory=list)
    dry_run: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "found": self.found,
            "updated": self.updated,
            "errors": self.errors,
            "failed_ids": self.failed_ids,
            "dry_run": self.dry_run,
            "summary": [
                {
                    "category": s.category.value if s.category else None,
                    "count": s.count,
                    "total_points": s.total_points,
                }
                for s in self.summary
            ],
        }


class PointsBackfill:
    """Scores every stored workout that has no points yet.

    Each workout is loaded, scored and written on its own. A workout that
    can't be read or saved is logged and counted, and the run moves on to
    the next one. Only unscored
    workouts are selected, so running again after an interruption or
    after errors picks up exactly what is left.
    """

    def __init__(
        self,
        store: WorkoutStore,
        on_progress: Callable[[int, int], None] | None = None,
    ):
        """Initialize the backfill.

        Args:
            store: Where workouts are read from and scores written to
            on_progress: Called with (updated, found) every
                ``PROGRESS_EVERY`` updated workouts
        """
        self.store = store
        self.on_progress = on_progress

    async def run(self, dry_run: bool = False) -> BackfillReport:
        """Run the backfill.

        Args:
            dry_run: Score workouts without writing anything

        Returns:
            Counts, failed workout IDs and the per-category summary
        """
        workout_ids = await self.store.list_unscored_ids()
        report = BackfillReport(found=len(workout_ids), dry_run=dry_run)
        logger.info("Found %d workouts without points", report.found)

        dry_run_counts: dict[PointsCategory, CategorySummary] = {}

        for workout_id in workout_ids:
            try:
                workout = await self.store.get(workout_id)
                if workout is None:
                    raise WorkoutNotFoundError(workout_id)
                result = calculate_points(workout)
                if not dry_run:
                    await self.store.update_points(
                        workout_id, result.points, result.category
                    )
            except Exception:
                logger.exception("Error scoring workout %s", workout_id)
                report.errors += 1
                report.failed_ids.append(workout_id)
                continue

            if dry_run:
                entry = dry_run_counts.setdefault(
                    result.category, CategorySummary(result.category, 0, 0)
                )
                entry.count += 1
                entry.total_points += result.points
                continue

            report.updated += 1
            if report.updated % PROGRESS_EVERY == 0:
                logger.info("Progress: %d/%d workouts updated", report.updated, report.found)
                if self.on_progress:
                    self.on_progress(report.updated, report.found)

        if dry_run:
            report.summary = sorted(
                dry_run_counts.values(), key=lambda s: s.category.value
            )
        else:
            report.summary = await self.store.summarize_by_category()

        logger.info(
            "Backfill complete: %d found, %d updated, %d errors",
            report.found,
            report.updated,
            report.errors,
        )
        return report
