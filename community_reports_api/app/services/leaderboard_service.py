"""
Leaderboard of locations ranked by number of reports.

The leaderboard is derived from the reports collection on every call
and has no state of its own.  Reports without a location are counted
under ``"Unknown"``.  Locations with equal counts keep the order in
which they first appear in the collection.
"""

from __future__ import annotations

from typing import Any, Dict, List

from community_reports_api.app.services.report_service import ReportService


UNKNOWN_LOCATION = "Unknown"


class LeaderboardService:
    """Read‑only aggregation over the reports collection."""

    @classmethod
    async def compute(cls) -> List[Dict[str, Any]]:
        """Return ``[{"location", "count"}]`` sorted by count descending."""
        counts: Dict[str, int] = {}
        for report in ReportService.collection.load():
            location = report.get("location") or UNKNOWN_LOCATION
            if not isinstance(location, str):
                location = str(location)
            counts[location] = counts.get(location, 0) + 1
        # ``sorted`` is stable, so ties stay in first‑seen order.
        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
        return [{"location": location, "count": count} for location, count in ranked]
