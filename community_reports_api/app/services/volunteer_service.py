"""
Service layer for volunteer registrations.

A volunteer needs a non‑empty name and email; phone and skills are
free text defaulting to the empty string.  No de‑duplication is done:
registering twice with the same email yields two records.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from community_reports_api.app.core.exceptions import ValidationError
from community_reports_api.app.core.storage import JsonCollection
from community_reports_api.app.schemas.volunteer import VolunteerCreate


logger = logging.getLogger(__name__)


class VolunteerService:
    """Service class for managing volunteers."""

    collection = JsonCollection("volunteers")

    @classmethod
    async def create_volunteer(cls, data: VolunteerCreate) -> Dict[str, Any]:
        """Validate and store a volunteer registration.

        Raises ``ValidationError`` before touching the collection when
        ``name`` or ``email`` is missing or empty.
        """
        if not data.name or not data.email:
            logger.warning("Rejected volunteer registration without name or email")
            raise ValidationError("Name and email are required")
        volunteer = {
            "id": None,
            "name": data.name,
            "email": data.email,
            "phone": data.phone or "",
            "skills": data.skills or "",
        }
        cls.collection.append(volunteer)
        logger.info("Registered volunteer %s", volunteer["id"])
        return volunteer

    @classmethod
    async def list_volunteers(cls) -> List[Dict[str, Any]]:
        return cls.collection.load()
