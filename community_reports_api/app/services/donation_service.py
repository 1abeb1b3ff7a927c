"""
Service layer for donations.

Donations record who gave and how much.  The amount is stored exactly
as submitted; the only check is that it is present and truthy, so
``0`` and ``""`` are rejected while ``"ten"`` is accepted.  The server
stamps each donation with the current UTC time.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from community_reports_api.app.core.exceptions import ValidationError
from community_reports_api.app.core.storage import JsonCollection
from community_reports_api.app.schemas.donation import DonationCreate


logger = logging.getLogger(__name__)


def iso_timestamp(moment: datetime | None = None) -> str:
    """Format ``moment`` (default: now) as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class DonationService:
    """Service class for managing donations."""

    collection = JsonCollection("donations")

    @classmethod
    async def create_donation(cls, data: DonationCreate) -> Dict[str, Any]:
        """Validate and store a donation.

        Raises ``ValidationError`` without persisting anything when
        ``name`` or ``amount`` is missing.
        """
        if not data.name or not data.amount:
            logger.warning("Rejected donation without name or amount")
            raise ValidationError("Name and amount are required")
        donation = {
            "id": None,
            "name": data.name,
            "amount": data.amount,
            "photoUrl": data.photoUrl or "",
            "dateTime": iso_timestamp(),
        }
        cls.collection.append(donation)
        logger.info("Recorded donation %s from %s", donation["id"], donation["name"])
        return donation

    @classmethod
    async def list_donations(cls) -> List[Dict[str, Any]]:
        return cls.collection.load()
