"""Tests for the command line interface."""

import asyncio
from datetime import date

import aiosqlite
import click
import pytest
from click.testing import CliRunner

from squad_points.cli import main
from squad_points.commands.base import parse_sets
from squad_points.db.repositories import WorkoutLogRepository
from squad_points.models.workout import WorkoutLog, WorkoutSet, WorkoutSource


@pytest.fixture
def runner(monkeypatch, tmp_path):
    """CLI runner working against a fresh data directory."""
    monkeypatch.setenv("SQUAD_POINTS_DATA_DIR", str(tmp_path))
    return CliRunner()


@pytest.fixture
def project(runner):
    """Initialized project with one player."""
    assert runner.invoke(main, ["init"]).exit_code == 0
    assert runner.invoke(main, ["players", "add", "Ana", "-p", "QB"]).exit_code == 0
    return runner


class TestParseSets:
    """Tests for --set parsing."""

    def test_groups_by_exercise(self):
        """Test sets naming one exercise end up in one entry."""
        entries = parse_sets(("Squat:5x100", "Bench:8x60", "Squat:3x120.5"))
        assert [e.exercise for e in entries] == ["Squat", "Bench"]
        assert entries[0].sets == [WorkoutSet(5, 100), WorkoutSet(3, 120.5)]

    def test_reps_only(self):
        """Test bodyweight sets without an exercise name."""
        entries = parse_sets(("12",))
        assert entries[0].exercise == ""
        assert entries[0].sets == [WorkoutSet(12, None)]

    @pytest.mark.parametrize("value", ["Squat", "Squat:x100", "Squat:5x", "5x-10"])
    def test_bad_value(self, value):
        """Test malformed sets are rejected."""
        with pytest.raises(click.BadParameter):
            parse_sets((value,))


class TestCommands:
    """Tests for the CLI commands."""

    def test_not_initialized(self, runner):
        """Test commands ask for init first."""
        result = runner.invoke(main, ["players", "list"])
        assert result.exit_code == 1
        assert "squad-points init" in result.output

    def test_players(self, project):
        """Test adding and listing players."""
        result = project.invoke(main, ["players", "list"])
        assert result.exit_code == 0
        assert "Ana" in result.output
        assert "QB" in result.output

    def test_log_workout(self, project):
        """Test a workout is scored when logged."""
        result = project.invoke(
            main,
            ["workouts", "log", "-u", "1", "--duration", "45", "--set", "Squat:5x100"],
        )
        assert result.exit_code == 0, result.output
        assert "Category: moderate, points: 2" in result.output

    def test_log_team_workout(self, project):
        """Test team sessions score as team."""
        result = project.invoke(
            main, ["workouts", "log", "-u", "1", "--source", "team", "--duration", "120"]
        )
        assert "Category: team, points: 2.5" in result.output

    def test_log_unknown_player(self, project):
        """Test logging for a missing player fails."""
        result = project.invoke(main, ["workouts", "log", "-u", "9", "--duration", "10"])
        assert result.exit_code == 1
        assert "Player 9 not found" in result.output

    def test_log_bad_set(self, project):
        """Test a malformed --set is a usage error."""
        result = project.invoke(main, ["workouts", "log", "-u", "1", "--set", "lots"])
        assert result.exit_code == 2

    def test_list_workouts(self, project):
        """Test listing a player's workouts for a week."""
        project.invoke(main, ["workouts", "log", "-u", "1", "-d", "2025-01-14", "-t", "Legs"])
        project.invoke(main, ["workouts", "log", "-u", "1", "-d", "2025-01-21", "-t", "Arms"])

        result = project.invoke(main, ["workouts", "list", "-u", "1", "-w", "2025-W03"])

        assert result.exit_code == 0
        assert "Legs" in result.output
        assert "Arms" not in result.output

    def test_list_bad_week(self, project):
        """Test a malformed week is rejected."""
        result = project.invoke(main, ["workouts", "list", "-u", "1", "-w", "2025-3"])
        assert result.exit_code == 1
        assert "YYYY-Www" in result.output

    def test_points_table(self, runner):
        """Test the point table needs no database."""
        result = runner.invoke(main, ["points", "table"])
        assert result.exit_code == 0
        assert "intensive" in result.output
        assert "2.5" in result.output

    def test_points_score(self, runner):
        """Test scoring without storing."""
        result = runner.invoke(main, ["points", "score", "--set", "Squat:10x600"])
        assert result.exit_code == 0
        assert "Total volume: 6000" in result.output
        assert "Category: intensive" in result.output

    def test_backfill(self, project, tmp_path):
        """Test backfill scores stored workouts once."""
        repo = WorkoutLogRepository(tmp_path / "squad_points.db")
        asyncio.run(
            repo.create(
                WorkoutLog(user_id=1, date=date(2024, 3, 1), source=WorkoutSource.COACH)
            )
        )

        first = project.invoke(main, ["points", "backfill"])
        second = project.invoke(main, ["points", "backfill"])

        assert first.exit_code == 0
        assert "Successfully updated: 1" in first.output
        assert "light: 1 workouts, 1 total points" in first.output
        assert "Found 0 workouts without points" in second.output

    def test_backfill_legacy_database(self, runner, tmp_path):
        """Test backfill adds the points columns to an old database first."""

        async def create_legacy():
            async with aiosqlite.connect(tmp_path / "squad_points.db") as db:
                await db.execute(
                    """
                    CREATE TABLE workout_logs (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        user_id INTEGER NOT NULL,
                        date TEXT NOT NULL,
                        title TEXT DEFAULT '',
                        source TEXT NOT NULL,
                        duration_minutes INTEGER,
                        entries TEXT NOT NULL DEFAULT '[]',
                        notes TEXT DEFAULT '',
                        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                    )
                    """
                )
                await db.execute(
                    "INSERT INTO workout_logs (user_id, date, source, duration_minutes) "
                    "VALUES (1, '2023-04-01', 'player', 70)"
                )
                await db.commit()

        asyncio.run(create_legacy())

        result = runner.invoke(main, ["points", "backfill"])

        assert result.exit_code == 0, result.output
        assert "Successfully updated: 1" in result.output
        assert "intensive: 1 workouts, 3 total points" in result.output

    def test_backfill_dry_run(self, project, tmp_path):
        """Test a dry run leaves workouts unscored."""
        repo = WorkoutLogRepository(tmp_path / "squad_points.db")
        asyncio.run(
            repo.create(WorkoutLog(user_id=1, date=date(2024, 3, 1), source=WorkoutSource.TEAM))
        )

        result = project.invoke(main, ["points", "backfill", "--dry-run"])

        assert "Dry run" in result.output
        assert "team: 1 workouts, 2.5 total points" in result.output
        assert len(asyncio.run(repo.list_unscored_ids())) == 1

    def test_leaderboard_week(self, project):
        """Test the weekly leaderboard."""
        project.invoke(main, ["players", "add", "Ben"])
        project.invoke(main, ["workouts", "log", "-u", "1", "-d", "2025-01-14", "--duration", "45"])
        project.invoke(main, ["workouts", "log", "-u", "2", "-d", "2025-01-15", "--duration", "70"])

        result = project.invoke(main, ["leaderboard", "week", "2025-W03"])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        ben = next(i for i, line in enumerate(lines) if "Ben" in line)
        ana = next(i for i, line in enumerate(lines) if "Ana" in line)
        assert ben < ana
        assert "Compliance" in result.output
        assert "Target" not in result.output
        assert "3/20" in lines[ben]

    def test_leaderboard_bad_week(self, project):
        """Test a malformed week key."""
        result = project.invoke(main, ["leaderboard", "week", "W03"])
        assert result.exit_code == 1

    def test_leaderboard_player(self, project):
        """Test a player's weekly history."""
        result = project.invoke(main, ["leaderboard", "player", "1", "-n", "3"])
        assert result.exit_code == 0
        assert len([line for line in result.output.splitlines() if "-W" in line]) == 3
        assert "Progress" in result.output
