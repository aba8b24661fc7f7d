"""Player management commands."""

import click

from ..db.repositories import PlayerRepository
from ..models.player import Player
from .base import async_command, echo_info, echo_success, ensure_initialized, format_table


@click.group()
def players():
    """Manage team players."""
    pass


@players.command("add")
@click.argument("name")
@click.option("--position", "-p", default="", help="Playing position")
@click.pass_context
@async_command
async def add(ctx: click.Context, name: str, position: str):
    """Add a player."""
    ensure_initialized(ctx)

    player_id = await PlayerRepository().create(Player(name=name, position=position))
    echo_success(f"Added player {name} (ID: {player_id})")


@players.command("list")
@click.pass_context
@async_command
async def list_players(ctx: click.Context):
    """List all players."""
    ensure_initialized(ctx)

    all_players = await PlayerRepository().list_all()
    if not all_players:
        echo_info("No players yet. Add one with 'squad-points players add NAME'.")
        return

    click.echo()
    click.echo(
        format_table(
            headers=["ID", "Name", "Position"],
            rows=[[str(p.id), p.name, p.position or "-"] for p in all_players],
        )
    )
