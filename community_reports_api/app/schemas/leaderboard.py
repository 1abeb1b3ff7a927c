"""Pydantic model for leaderboard rows."""

from pydantic import BaseModel


class LeaderboardEntry(BaseModel):
    location: str
    count: int
