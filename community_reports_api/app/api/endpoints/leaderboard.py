"""Leaderboard endpoint: locations ranked by report count."""

from typing import List

from fastapi import APIRouter

from community_reports_api.app.schemas.leaderboard import LeaderboardEntry
from community_reports_api.app.services.leaderboard_service import LeaderboardService

router = APIRouter()


@router.get("", response_model=List[LeaderboardEntry])
async def get_leaderboard() -> List[LeaderboardEntry]:
    """Return ``{location, count}`` rows, highest count first."""
    return await LeaderboardService.compute()
