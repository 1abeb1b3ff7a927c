"""
Report endpoints.

Citizens submit reports and anyone may list them.  Moderators approve
a report or reject it by deleting it.  Errors are raised by
``ReportService`` and rendered by the application's exception handler
as ``{"success": false, "message": ...}``.
"""

from typing import Any, Dict, List

from fastapi import APIRouter

from community_reports_api.app.schemas.common import ErrorResponse, SuccessResponse
from community_reports_api.app.schemas.report import ReportCreate, ReportCreated
from community_reports_api.app.services.report_service import ReportService

router = APIRouter()


@router.post("", response_model=ReportCreated)
async def create_report(report_in: ReportCreate) -> Dict[str, Any]:
    """Submit a report.  It is stored unapproved."""
    report = await ReportService.create_report(report_in)
    return {"success": True, "report": report}


@router.get("", response_model=List[Dict[str, Any]])
async def list_reports() -> List[Dict[str, Any]]:
    """Return every stored report in submission order."""
    return await ReportService.list_reports()


@router.delete(
    "/{report_id}",
    response_model=SuccessResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_report(report_id: int) -> SuccessResponse:
    """Reject a report by removing it.

    Succeeds for unknown ids; 404 only when no report was ever stored.
    A non-integer id is rejected with 400 before reaching the store.
    """
    await ReportService.delete_report(report_id)
    return SuccessResponse()


@router.post(
    "/{report_id}/approve",
    response_model=SuccessResponse,
    responses={404: {"model": ErrorResponse}},
)
async def approve_report(report_id: int) -> SuccessResponse:
    """Approve a report.

    404 for an unknown id or a missing file; a non-integer id is
    rejected with 400.
    """
    await ReportService.approve_report(report_id)
    return SuccessResponse()
