"""Leaderboard commands."""

import click

from ..db.repositories import PlayerRepository, WorkoutLogRepository
from ..exceptions import InvalidWeekError
from ..services.leaderboard import LeaderboardService
from .base import async_command, echo_error, echo_info, ensure_initialized, format_table


def _service() -> LeaderboardService:
    return LeaderboardService(WorkoutLogRepository(), PlayerRepository())


@click.group()
def leaderboard():
    """Weekly points leaderboard."""
    pass


@leaderboard.command("week")
@click.argument("week", required=False)
@click.pass_context
@async_command
async def week(ctx: click.Context, week: str | None):
    """Show the leaderboard for WEEK (YYYY-Www), default the current week."""
    ensure_initialized(ctx)

    try:
        week_key, entries = await _service().weekly(week)
    except InvalidWeekError as e:
        echo_error(e.message)
        ctx.exit(1)

    click.echo()
    click.echo(click.style(f"Leaderboard {week_key}", bold=True))

    if not entries:
        echo_info("No scored workouts this week.")
        return

    rows = [
        [
            str(e.rank),
            e.player_name[:25],
            e.position,
            f"{e.total_points:g}/{e.target_points:g}",
            f"{e.compliance_pct}%",
            str(e.workout_days),
            str(e.team_training_days),
            f"{e.free_share_pct}%",
        ]
        for e in entries
    ]
    click.echo(
        format_table(
            headers=["#", "Player", "Pos", "Points", "Compliance", "Days", "Team", "Free"],
            rows=rows,
        )
    )


@leaderboard.command("player")
@click.argument("user_id", type=int)
@click.option("--weeks", "-n", type=click.IntRange(min=1), default=8, show_default=True)
@click.pass_context
@async_command
async def player(ctx: click.Context, user_id: int, weeks: int):
    """Show a player's weekly points history."""
    ensure_initialized(ctx)

    history = await _service().player_history(user_id, weeks)

    rows = [
        [
            h.week,
            f"{h.total_points:g}",
            f"{h.progress_percentage:.0f}%",
            str(h.workout_days),
            str(h.team_training_days),
            str(h.coach_workout_days),
            str(h.personal_workout_days),
        ]
        for h in history
    ]

    click.echo()
    click.echo(
        format_table(
            headers=["Week", "Points", "Progress", "Days", "Team", "Coach", "Personal"],
            rows=rows,
        )
    )
