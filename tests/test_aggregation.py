"""Tests for weekly and monthly rollups and the leaderboard."""

from datetime import date

import pytest

from squad_points.exceptions import InvalidWeekError
from squad_points.models.player import Player
from squad_points.models.points import PointsCategory, WeeklyPoints
from squad_points.models.workout import WorkoutLog, WorkoutSource
from squad_points.services.aggregation import (
    aggregate_month,
    aggregate_week,
    aggregate_week_for_players,
    build_leaderboard,
    iso_week_key,
    recent_week_keys,
    week_bounds,
)


def scored(user_id, day, source="player", points=2.0, category="moderate", title=""):
    return WorkoutLog(
        user_id=user_id,
        date=day,
        source=WorkoutSource(source),
        title=title,
        points=points,
        points_category=PointsCategory(category) if category else None,
    )


class TestWeekKeys:
    """Tests for ISO week keys."""

    @pytest.mark.parametrize(
        "day,expected",
        [
            (date(2025, 1, 15), "2025-W03"),
            (date(2024, 12, 30), "2025-W01"),
            (date(2021, 1, 1), "2020-W53"),
            (date(2025, 6, 2), "2025-W23"),
        ],
    )
    def test_iso_week_key(self, day, expected):
        """Test keys follow the ISO calendar, not the calendar year."""
        assert iso_week_key(day) == expected

    def test_week_bounds(self):
        """Test Monday to Sunday bounds."""
        assert week_bounds("2025-W03") == (date(2025, 1, 13), date(2025, 1, 19))

    def test_week_bounds_year_boundary(self):
        """Test a week starting in the previous calendar year."""
        assert week_bounds("2025-W01") == (date(2024, 12, 30), date(2025, 1, 5))

    @pytest.mark.parametrize("key", ["2025-3", "2025W03", "25-W03", "2025-W3", "", "2025-W54"])
    def test_invalid_week(self, key):
        """Test malformed or impossible keys."""
        with pytest.raises(InvalidWeekError) as exc_info:
            week_bounds(key)
        assert exc_info.value.status_code == 400

    def test_invalid_week_is_value_error(self):
        """Test callers catching ValueError still work."""
        with pytest.raises(ValueError):
            week_bounds("2025-W00")

    def test_recent_week_keys(self):
        """Test keys run newest first across a year boundary."""
        assert recent_week_keys(date(2025, 1, 8), 3) == ["2025-W02", "2025-W01", "2024-W52"]


class TestAggregateWeek:
    """Tests for aggregate_week."""

    def test_sums_points_within_week(self):
        """Test only workouts dated inside the week count."""
        workouts = [
            scored(1, date(2025, 1, 12), points=3, category="intensive"),  # Sunday of W02
            scored(1, date(2025, 1, 13), points=2),
            scored(1, date(2025, 1, 19), points=1, category="light"),
            scored(1, date(2025, 1, 20), points=3, category="intensive"),  # Monday of W04
        ]

        rollup = aggregate_week(workouts, 1, "2025-W03")

        assert rollup.total_points == 3
        assert rollup.workout_days == 2
        assert [b.date for b in rollup.breakdown] == [date(2025, 1, 13), date(2025, 1, 19)]

    def test_other_players_ignored(self):
        """Test another player's workouts are left out."""
        workouts = [scored(1, date(2025, 1, 14)), scored(2, date(2025, 1, 14), points=3)]
        assert aggregate_week(workouts, 1, "2025-W03").total_points == 2

    def test_unscored_skipped(self):
        """Test workouts without points don't count."""
        workouts = [
            scored(1, date(2025, 1, 14)),
            scored(1, date(2025, 1, 15), points=None, category=None),
            scored(1, date(2025, 1, 16), points=2, category=None),
        ]
        rollup = aggregate_week(workouts, 1, "2025-W03")
        assert rollup.total_points == 2
        assert rollup.workout_days == 1

    def test_day_counts_by_source(self):
        """Test distinct days are counted per source."""
        workouts = [
            scored(1, date(2025, 1, 13), "team", 2.5, "team"),
            scored(1, date(2025, 1, 13), "player", 1, "light"),
            scored(1, date(2025, 1, 14), "player", 2),
            scored(1, date(2025, 1, 14), "player", 2),
            scored(1, date(2025, 1, 15), "coach", 3, "intensive"),
        ]

        rollup = aggregate_week(workouts, 1, "2025-W03")

        assert rollup.total_points == 10.5
        assert rollup.workout_days == 3
        assert rollup.team_training_days == 1
        assert rollup.coach_workout_days == 1
        assert rollup.personal_workout_days == 2

    def test_empty_week(self):
        """Test a week with nothing logged."""
        rollup = aggregate_week([], 5, "2025-W03")
        assert rollup == WeeklyPoints(user_id=5, week="2025-W03")

    def test_reads_stored_points(self):
        """Test rollups use stored points instead of rescoring."""
        workout = scored(1, date(2025, 1, 14), points=7, category="light")
        workout.duration_minutes = 90
        assert aggregate_week([workout], 1, "2025-W03").total_points == 7

    def test_custom_target(self):
        """Test the weekly target can be changed."""
        assert aggregate_week([], 1, "2025-W03", target_points=12).target_points == 12

    def test_for_players(self):
        """Test one rollup per player, ordered by player ID."""
        workouts = [
            scored(3, date(2025, 1, 14)),
            scored(1, date(2025, 1, 15)),
            scored(3, date(2025, 1, 16), points=3, category="intensive"),
        ]
        rollups = aggregate_week_for_players(workouts, "2025-W03")
        assert [(r.user_id, r.total_points) for r in rollups] == [(1, 2), (3, 5)]


class TestAggregateMonth:
    """Tests for aggregate_month."""

    def test_month_rollup(self):
        """Test a whole calendar month, crossing ISO weeks."""
        workouts = [
            scored(1, date(2025, 1, 31)),
            scored(1, date(2025, 2, 1), "team", 2.5, "team"),
            scored(1, date(2025, 2, 28), points=3, category="intensive"),
            scored(1, date(2025, 3, 1)),
        ]

        rollup = aggregate_month(workouts, 1, 2025, 2)

        assert rollup.week == "2025-02"
        assert rollup.total_points == 5.5
        assert rollup.workout_days == 2
        assert rollup.team_training_days == 1

    def test_leap_february(self):
        """Test the 29th is included in a leap year."""
        rollup = aggregate_month([scored(1, date(2024, 2, 29))], 1, 2024, 2)
        assert rollup.total_points == 2


class TestLeaderboard:
    """Tests for build_leaderboard."""

    def test_ranks_by_points(self):
        """Test highest total first with 1-based ranks."""
        rollups = [
            WeeklyPoints(user_id=1, week="2025-W03", total_points=8),
            WeeklyPoints(user_id=2, week="2025-W03", total_points=14.5),
            WeeklyPoints(user_id=3, week="2025-W03", total_points=11),
        ]
        players = {
            1: Player(name="Ana", position="QB", id=1),
            2: Player(name="Ben", position="WR", id=2),
            3: Player(name="Cam", id=3),
        }

        board = build_leaderboard(rollups, players)

        assert [(e.rank, e.user_id) for e in board] == [(1, 2), (2, 3), (3, 1)]
        assert board[0].player_name == "Ben"
        assert board[1].position == "N/A"

    def test_ties_keep_input_order(self):
        """Test equal totals are not reordered."""
        rollups = [
            WeeklyPoints(user_id=4, week="2025-W03", total_points=6),
            WeeklyPoints(user_id=2, week="2025-W03", total_points=6),
        ]
        assert [e.user_id for e in build_leaderboard(rollups, {})] == [4, 2]

    def test_unknown_player(self):
        """Test rollups for players that no longer exist."""
        board = build_leaderboard([WeeklyPoints(user_id=9, week="2025-W03")], {})
        assert board[0].player_name == "Unknown"
        assert board[0].position == "N/A"

    def test_percentages(self):
        """Test compliance, attendance and free share rounding."""
        rollup = WeeklyPoints(
            user_id=1,
            week="2025-W03",
            total_points=2.5,
            workout_days=3,
            personal_workout_days=1,
        )

        entry = build_leaderboard([rollup], {})[0]

        assert entry.compliance_pct == 13  # 12.5 rounds up
        assert entry.attendance_pct == 43  # 42.86
        assert entry.free_share_pct == 33  # 33.33

    def test_compliance_not_capped(self):
        """Test compliance can exceed 100."""
        rollup = WeeklyPoints(user_id=1, week="2025-W03", total_points=25)
        assert build_leaderboard([rollup], {})[0].compliance_pct == 125

    def test_zero_days(self):
        """Test no division by zero without workout days or target."""
        rollup = WeeklyPoints(user_id=1, week="2025-W03", target_points=0)
        entry = build_leaderboard([rollup], {})[0]
        assert entry.compliance_pct == 0
        assert entry.attendance_pct == 0
        assert entry.free_share_pct == 0

    def test_empty(self):
        """Test an empty leaderboard."""
        assert build_leaderboard([], {}) == []
