"""Volunteer registration endpoints."""

from typing import Any, Dict, List

from fastapi import APIRouter

from community_reports_api.app.schemas.common import ErrorResponse
from community_reports_api.app.schemas.volunteer import VolunteerCreate, VolunteerCreated
from community_reports_api.app.services.volunteer_service import VolunteerService

router = APIRouter()


@router.post("", response_model=VolunteerCreated, responses={400: {"model": ErrorResponse}})
async def register_volunteer(volunteer_in: VolunteerCreate) -> Dict[str, Any]:
    """Register a volunteer.  ``name`` and ``email`` are required."""
    volunteer = await VolunteerService.create_volunteer(volunteer_in)
    return {"success": True, "volunteer": volunteer}


@router.get("", response_model=List[Dict[str, Any]])
async def list_volunteers() -> List[Dict[str, Any]]:
    return await VolunteerService.list_volunteers()
