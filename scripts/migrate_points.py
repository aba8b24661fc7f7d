#!/usr/bin/env python3
"""Calculate and store points for workouts logged before scoring existed.

Only workouts missing points or category are touched, so the script can be
run again at any time; a second run over the same data updates nothing.

Usage:
    uv run python scripts/migrate_points.py [path/to/squad_points.db]

Without an argument the default data directory is used
(SQUAD_POINTS_DATA_DIR if set).
"""

import asyncio
import logging
import sys
from pathlib import Path

from squad_points.db import WorkoutLogRepository, get_db_path, init_db
from squad_points.services.backfill import BackfillReport, PointsBackfill


def print_report(report: BackfillReport) -> None:
    """Print the migration summary."""
    print("\n=== Migration Complete ===")
    print(f"Total workouts processed: {report.found}")
    print(f"Successfully updated: {report.updated}")
    print(f"Errors: {report.errors}")
    if report.failed_ids:
        print(f"Failed workout IDs: {', '.join(str(i) for i in report.failed_ids)}")

    print("\n=== Points Summary by Category ===")
    for row in report.summary:
        print(row.get_display())


async def migrate_points(db_path: Path) -> BackfillReport:
    """Run the backfill against a database file."""
    print("Starting points migration...")

    # Adds the points columns to databases created before they existed
    await init_db(db_path)

    # Found and progress lines come through the backfill logger
    return await PointsBackfill(WorkoutLogRepository(db_path)).run()


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    db_path = Path(sys.argv[1]) if len(sys.argv) > 1 else get_db_path()
    if not db_path.exists():
        print(f"Database not found: {db_path}", file=sys.stderr)
        return 1

    report = asyncio.run(migrate_points(db_path))
    print_report(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
