"""
Service layer for incident reports.

Reports are created unapproved, listed in submission order, and
moderated by either approving them (``approved`` becomes ``True``) or
deleting them.  Deleting is idempotent: removing an id that is not in
the collection still succeeds.  Both moderation operations report a
missing collection file as "File not found"; approve additionally
reports an unknown id as "Report not found".
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from community_reports_api.app.core.exceptions import NotFoundError
from community_reports_api.app.core.storage import JsonCollection
from community_reports_api.app.schemas.report import ReportCreate


logger = logging.getLogger(__name__)


class ReportService:
    """Service class for managing citizen reports."""

    collection = JsonCollection("reports")

    @classmethod
    async def create_report(cls, data: ReportCreate) -> Dict[str, Any]:
        """Store a new report and return it.

        The id is assigned by the store and ``approved`` is forced to
        ``False`` whatever the client sent.
        """
        report = {**data.submitted_fields(), "id": None, "approved": False}
        cls.collection.append(report)
        logger.info("Created report %s (location=%s)", report["id"], report.get("location"))
        return report

    @classmethod
    async def list_reports(cls) -> List[Dict[str, Any]]:
        return cls.collection.load()

    @classmethod
    async def delete_report(cls, report_id: int) -> None:
        """Remove every report with ``report_id``.

        Raises ``NotFoundError`` only when the collection file is absent.
        """
        with cls.collection.lock:
            if not cls.collection.exists():
                raise NotFoundError("File not found")
            records = cls.collection.load()
            remaining = [r for r in records if r.get("id") != report_id]
            cls.collection.rewrite(remaining)
        if len(remaining) < len(records):
            logger.info("Deleted report %s", report_id)
        else:
            logger.info("Delete requested for unknown report %s; nothing removed", report_id)

    @classmethod
    async def approve_report(cls, report_id: int) -> None:
        """Mark the first report with ``report_id`` as approved."""
        with cls.collection.lock:
            if not cls.collection.exists():
                raise NotFoundError("File not found")
            records = cls.collection.load()
            report = next((r for r in records if r.get("id") == report_id), None)
            if report is None:
                raise NotFoundError("Report not found")
            report["approved"] = True
            cls.collection.rewrite(records)
        logger.info("Approved report %s", report_id)
