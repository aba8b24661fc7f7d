"""Player routes."""

from fastapi import APIRouter, Depends

from ...db.repositories import PlayerRepository
from ...exceptions import PlayerNotFoundError
from ..deps import get_player_repository
from ..schemas import PlayerCreate

router = APIRouter(prefix="/players", tags=["players"])


@router.post("", status_code=201)
async def create_player(
    body: PlayerCreate,
    repo: PlayerRepository = Depends(get_player_repository),
):
    """Add a player."""
    player_id = await repo.create(body.to_player())
    player = await repo.get(player_id)
    return player.to_dict()


@router.get("")
async def list_players(repo: PlayerRepository = Depends(get_player_repository)):
    """List all players."""
    return [p.to_dict() for p in await repo.list_all()]


@router.get("/{user_id}")
async def get_player(
    user_id: int,
    repo: PlayerRepository = Depends(get_player_repository),
):
    """Get a player by ID."""
    player = await repo.get(user_id)
    if player is None:
        raise PlayerNotFoundError(user_id)
    return player.to_dict()
