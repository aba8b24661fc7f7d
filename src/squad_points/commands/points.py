"""Points scoring and backfill commands."""

from datetime import date

import click

from ..db import WorkoutLogRepository, get_db_path, init_db
from ..models.workout import WorkoutLog, WorkoutSource
from ..services.backfill import BackfillReport, PointsBackfill
from ..services.points import (
    POINTS,
    calculate_points,
    calculate_total_sets,
    calculate_total_volume,
)
from .base import (
    async_command,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    format_table,
    parse_sets,
)


@click.group()
def points():
    """Score workouts and backfill missing points."""
    pass


@points.command("table")
def table():
    """Show the fixed point value of each category."""
    click.echo()
    click.echo(
        format_table(
            headers=["Category", "Points"],
            rows=[[category.value, f"{value:g}"] for category, value in POINTS.items()],
        )
    )


@points.command("score")
@click.option(
    "--source",
    "-s",
    type=click.Choice([s.value for s in WorkoutSource]),
    default=WorkoutSource.PLAYER.value,
    show_default=True,
)
@click.option("--duration", type=click.IntRange(min=0), help="Duration in minutes")
@click.option("--set", "sets", multiple=True, help="A set as EXERCISE:REPSxWEIGHT")
def score(source: str, duration: int | None, sets: tuple[str, ...]):
    """Score a workout without storing it."""
    entries = parse_sets(sets)
    workout = WorkoutLog(
        user_id=0,
        date=date.today(),
        source=WorkoutSource(source),
        duration_minutes=duration,
        entries=entries,
    )
    result = calculate_points(workout)

    click.echo(f"Duration: {duration or 0} min")
    click.echo(f"Total sets: {calculate_total_sets(entries)}")
    click.echo(f"Total volume: {calculate_total_volume(entries):g}")
    click.echo(
        click.style(f"Category: {result.category.value}", bold=True)
        + f" ({result.points:g} points)"
    )


@points.command("backfill")
@click.option("--dry-run", is_flag=True, help="Show what would be scored without saving")
@click.pass_context
@async_command
async def backfill(ctx: click.Context, dry_run: bool):
    """Score stored workouts that have no points yet.

    Only unscored workouts are touched, so the command can be re-run
    after an interruption or after errors.
    """
    ensure_initialized(ctx)

    # Databases from before scoring lack the points columns
    db_path = get_db_path()
    await init_db(db_path)

    def show_progress(updated: int, found: int) -> None:
        click.echo(f"Progress: {updated}/{found} workouts updated")

    echo_info("Starting points backfill...")
    job = PointsBackfill(WorkoutLogRepository(db_path), on_progress=show_progress)
    report = await job.run(dry_run=dry_run)
    echo_report(report)


def echo_report(report: BackfillReport) -> None:
    """Print a backfill report."""
    click.echo(f"Found {report.found} workouts without points")

    click.echo()
    click.echo(click.style("=== Backfill Complete ===", bold=True))
    click.echo(f"Total workouts processed: {report.found}")
    if report.dry_run:
        echo_info("Dry run - no changes made.")
    else:
        click.echo(f"Successfully updated: {report.updated}")
    click.echo(f"Errors: {report.errors}")
    if report.errors:
        echo_warning(
            "Failed workout IDs: " + ", ".join(str(i) for i in report.failed_ids)
        )
        echo_warning("Re-run the backfill to retry them.")
    elif report.found and not report.dry_run:
        echo_success("All workouts scored.")

    click.echo()
    title = "Would be scored" if report.dry_run else "Points Summary by Category"
    click.echo(click.style(f"=== {title} ===", bold=True))
    for row in report.summary:
        click.echo(row.get_display())