"""Leaderboard routes."""

from fastapi import APIRouter, Depends, Query

from ...services.leaderboard import LeaderboardService
from ..deps import get_leaderboard_service

router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])


@router.get("")
async def current_week(service: LeaderboardService = Depends(get_leaderboard_service)):
    """Leaderboard for the current ISO week."""
    week, entries = await service.weekly()
    return {"week": week, "leaderboard": [e.to_dict() for e in entries]}


@router.get("/player/{user_id}")
async def player_history(
    user_id: int,
    weeks: int = Query(8, ge=1, le=104),
    service: LeaderboardService = Depends(get_leaderboard_service),
):
    """A player's weekly rollups, most recent week first."""
    history = await service.player_history(user_id, weeks)
    return {"user_id": user_id, "history": [h.to_dict() for h in history]}


@router.get("/{week}")
async def week_leaderboard(
    week: str,
    service: LeaderboardService = Depends(get_leaderboard_service),
):
    """Leaderboard for a given week (YYYY-Www). Malformed weeks get a 400."""
    week, entries = await service.weekly(week)
    return {"week": week, "leaderboard": [e.to_dict() for e in entries]}
