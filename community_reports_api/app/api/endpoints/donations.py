"""
Donation endpoints.

The server assigns the id and the ``dateTime`` stamp; clients send
``name``, ``amount`` and optionally ``photoUrl``.
"""

from typing import Any, Dict, List

from fastapi import APIRouter

from community_reports_api.app.schemas.common import ErrorResponse
from community_reports_api.app.schemas.donation import DonationCreate, DonationCreated
from community_reports_api.app.services.donation_service import DonationService

router = APIRouter()


@router.post("", response_model=DonationCreated, responses={400: {"model": ErrorResponse}})
async def record_donation(donation_in: DonationCreate) -> Dict[str, Any]:
    """Record a donation.  ``name`` and ``amount`` are required."""
    donation = await DonationService.create_donation(donation_in)
    return {"success": True, "donation": donation}


@router.get("", response_model=List[Dict[str, Any]])
async def list_donations() -> List[Dict[str, Any]]:
    return await DonationService.list_donations()
