"""Initialize project command."""

import click

from ..db import get_data_dir, get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the squad-points data directory and database.

    Safe to run again on an existing database: missing tables and
    columns are added, existing data is kept.
    """
    data_dir = get_data_dir()
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing squad-points in {data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("squad-points is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Add players:")
    click.echo('     squad-points players add "Jane Doe" --position QB')
    click.echo()
    click.echo("  2. Log a workout:")
    click.echo("     squad-points workouts log --user 1 --duration 45 --set Squat:5x100")
    click.echo()
    click.echo("  3. Score older workouts and see the leaderboard:")
    click.echo("     squad-points points backfill")
    click.echo("     squad-points leaderboard week")
