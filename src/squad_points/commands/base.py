"""Shared CLI utilities."""

import asyncio
import re
from functools import wraps

import click

from ..db import get_db_path
from ..models.workout import WorkoutEntry, WorkoutSet

SET_PATTERN = re.compile(
    r"^(?:(?P<exercise>[^:]+):)?(?P<reps>\d+)(?:x(?P<weight>\d+(?:\.\d+)?))?$"
)


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_db_path()
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'squad-points init' first."
        )
        ctx.exit(1)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def parse_sets(values: tuple[str, ...]) -> list[WorkoutEntry]:
    """Parse ``--set`` options into workout entries.

    Each value is ``[EXERCISE:]REPS[xWEIGHT]``, e.g. ``Squat:5x100``.
    Sets naming the same exercise are grouped into one entry, in the
    order the exercises first appear.

    Raises:
        click.BadParameter: If a value doesn't match the format
    """
    entries: dict[str, WorkoutEntry] = {}
    for value in values:
        match = SET_PATTERN.match(value.strip())
        if not match:
            raise click.BadParameter(
                f"'{value}' is not EXERCISE:REPSxWEIGHT", param_hint="--set"
            )
        exercise = (match.group("exercise") or "").strip()
        weight = match.group("weight")
        entry = entries.setdefault(exercise, WorkoutEntry(exercise=exercise))
        entry.sets.append(
            WorkoutSet(
                reps=int(match.group("reps")),
                weight=float(weight) if weight else None,
            )
        )
    return list(entries.values())


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = []
    lines.append("".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers)))
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row))
        )

    return "\n".join(lines)
