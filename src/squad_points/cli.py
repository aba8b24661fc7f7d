"""CLI entry point for squad-points."""

import logging

import click

from . import __version__
from .commands import init, leaderboard, players, points, serve, workouts


@click.group()
@click.version_option(version=__version__, prog_name="squad-points")
@click.option("--verbose", "-v", is_flag=True, help="Show diagnostic logging")
def main(verbose: bool):
    """squad-points: workout scoring and weekly leaderboards for team training.

    Every logged workout earns points by category: light (1), moderate (2),
    team (2.5) or intensive (3).

    Example usage:

        # Initialize the project
        squad-points init

        # Add a player and log a workout
        squad-points players add "Jane Doe" --position WR
        squad-points workouts log -u 1 --duration 45 --set Squat:5x100

        # Score workouts logged before points existed
        squad-points points backfill

        # This week's leaderboard
        squad-points leaderboard week
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register commands
main.add_command(init)
main.add_command(players)
main.add_command(workouts)
main.add_command(points)
main.add_command(leaderboard)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
