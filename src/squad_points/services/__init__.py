"""Scoring, backfill and aggregation services."""

from .aggregation import (
    aggregate_month,
    aggregate_week,
    build_leaderboard,
    iso_week_key,
    week_bounds,
)
from .backfill import BackfillReport, PointsBackfill
from .points import calculate_points, get_points_for_category

__all__ = [
    "aggregate_month",
    "aggregate_week",
    "BackfillReport",
    "build_leaderboard",
    "calculate_points",
    "get_points_for_category",
    "iso_week_key",
    "PointsBackfill",
    "week_bounds",
]
