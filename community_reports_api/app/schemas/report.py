"""
Pydantic models for incident reports.

A report is submitted by a citizen from the front end.  Only
``location`` matters to the server (the leaderboard groups by it); the
other declared fields document what the front end usually sends.  No
field is type checked: every value, declared or not, is stored
verbatim.
"""

from typing import Any

from pydantic import BaseModel, Field

from .common import OpenRecord


class ReportCreate(OpenRecord):
    """Schema for submitting a report.

    A client supplied ``approved`` flag is accepted but always
    overwritten with ``False`` by the service.
    """

    location: Any = Field(None, examples=["Riverside Park"])
    description: Any = Field(None, examples=["Overflowing drain near the gate"])
    category: Any = Field(None, examples=["flooding"])


class ReportRead(OpenRecord):
    """Schema for a stored report."""

    id: int
    approved: bool = False
    location: Any = None


class ReportCreated(BaseModel):
    success: bool = True
    report: ReportRead
