"""
Top‑level API router.

Aggregates the entity routers under their collection prefixes.  When a
new entity kind is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import alerts, donations, leaderboard, reports, volunteers

router = APIRouter()

router.include_router(reports.router, prefix="/reports", tags=["reports"])
router.include_router(volunteers.router, prefix="/volunteers", tags=["volunteers"])
router.include_router(alerts.router, prefix="/alerts", tags=["alerts"])
router.include_router(donations.router, prefix="/donations", tags=["donations"])
router.include_router(leaderboard.router, prefix="/leaderboard", tags=["leaderboard"])
