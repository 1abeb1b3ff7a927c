"""Service layer for community alerts."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from community_reports_api.app.core.storage import JsonCollection
from community_reports_api.app.schemas.alert import AlertCreate


logger = logging.getLogger(__name__)


class AlertService:
    """Service class for recording and listing alerts."""

    collection = JsonCollection("alerts")

    @classmethod
    async def create_alert(cls, data: AlertCreate) -> Dict[str, Any]:
        """Store an alert as submitted, plus an assigned id."""
        alert = {**data.submitted_fields(), "id": None}
        cls.collection.append(alert)
        logger.info("Created alert %s", alert["id"])
        return alert

    @classmethod
    async def list_alerts(cls) -> List[Dict[str, Any]]:
        return cls.collection.load()
