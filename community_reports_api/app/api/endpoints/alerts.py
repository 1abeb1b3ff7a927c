"""Alert endpoints."""

from typing import Any, Dict, List

from fastapi import APIRouter

from community_reports_api.app.schemas.alert import AlertCreate, AlertCreated
from community_reports_api.app.services.alert_service import AlertService

router = APIRouter()


@router.post("", response_model=AlertCreated)
async def create_alert(alert_in: AlertCreate) -> Dict[str, Any]:
    alert = await AlertService.create_alert(alert_in)
    return {"success": True, "alert": alert}


@router.get("", response_model=List[Dict[str, Any]])
async def list_alerts() -> List[Dict[str, Any]]:
    return await AlertService.list_alerts()
