"""Workout logging commands."""

from datetime import date

import click

from ..db.repositories import PlayerRepository, WorkoutLogRepository
from ..exceptions import InvalidWeekError, PlayerNotFoundError
from ..models.workout import WorkoutLog, WorkoutSource
from ..services.aggregation import week_bounds
from ..services.workouts import WorkoutService
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    parse_sets,
)


@click.group()
def workouts():
    """Log and list workouts.

    Every workout is scored when it is logged.
    """
    pass


@workouts.command("log")
@click.option("--user", "-u", "user_id", type=int, help="Player ID")
@click.option(
    "--date",
    "-d",
    "workout_date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Workout date (default: today)",
)
@click.option("--title", "-t", default="", help="Workout title")
@click.option(
    "--source",
    "-s",
    type=click.Choice([s.value for s in WorkoutSource]),
    default=WorkoutSource.PLAYER.value,
    show_default=True,
    help="Where the workout came from",
)
@click.option("--duration", type=click.IntRange(min=0), help="Duration in minutes")
@click.option(
    "--set",
    "sets",
    multiple=True,
    help="A set as EXERCISE:REPSxWEIGHT (repeatable), e.g. Squat:5x100",
)
@click.option("--notes", default="", help="Free-text notes")
@click.pass_context
@async_command
async def log(
    ctx: click.Context,
    user_id: int | None,
    workout_date,
    title: str,
    source: str,
    duration: int | None,
    sets: tuple[str, ...],
    notes: str,
):
    """Log a workout and show the points it earned.

    Without --user an interactive questionnaire asks for the details.

    Examples:

        # 45 minute personal gym session
        squad-points workouts log -u 1 --duration 45 --set Squat:5x100 --set Squat:5x100

        # Team practice
        squad-points workouts log -u 1 --source team --title "Tuesday practice"
    """
    ensure_initialized(ctx)

    player_repo = PlayerRepository()

    if user_id is None:
        from ..clients.manual import ManualWorkoutClient

        all_players = await player_repo.list_all()
        if not all_players:
            echo_error("No players yet. Add one with 'squad-points players add NAME'.")
            ctx.exit(1)

        workout = await ManualWorkoutClient().collect_workout(all_players)
        if workout is None:
            echo_info("Cancelled.")
            return
    else:
        workout = WorkoutLog(
            user_id=user_id,
            date=workout_date.date() if workout_date else date.today(),
            title=title,
            source=WorkoutSource(source),
            duration_minutes=duration,
            entries=parse_sets(sets),
            notes=notes,
        )

    service = WorkoutService(WorkoutLogRepository(), player_repo)
    try:
        stored = await service.log_workout(workout)
    except PlayerNotFoundError as e:
        echo_error(e.message)
        ctx.exit(1)

    echo_success(f"Logged workout {stored.id}: {stored.get_summary()}")
    click.echo(
        f"Category: {stored.points_category.value}, points: {stored.points:g}"
    )


@workouts.command("list")
@click.option("--user", "-u", "user_id", type=int, required=True, help="Player ID")
@click.option("--week", "-w", help="Only this ISO week (YYYY-Www)")
@click.pass_context
@async_command
async def list_workouts(ctx: click.Context, user_id: int, week: str | None):
    """List a player's workouts, newest first."""
    ensure_initialized(ctx)

    start = end = None
    if week:
        try:
            start, end = week_bounds(week)
        except InvalidWeekError as e:
            echo_error(e.message)
            ctx.exit(1)

    logs = await WorkoutLogRepository().list_for_user(user_id, start, end)
    if not logs:
        echo_info("No workouts found.")
        return

    rows = [
        [
            str(w.id),
            w.date.isoformat(),
            (w.title or "-")[:30],
            w.source.value,
            str(w.duration_minutes) if w.duration_minutes else "-",
            w.points_category.value if w.points_category else "unscored",
            f"{w.points:g}" if w.points is not None else "-",
        ]
        for w in logs
    ]

    click.echo()
    click.echo(
        format_table(
            headers=["ID", "Date", "Title", "Source", "Minutes", "Category", "Points"],
            rows=rows,
        )
    )
