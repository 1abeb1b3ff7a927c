"""
Pydantic models for volunteer registrations.

``name`` and ``email`` are required, but the check (non‑empty after
submission) lives in ``VolunteerService`` so that a missing field is
reported as a 400 with the service's message rather than a schema
error.  Values are not type checked and are stored as sent.
"""

from typing import Any

from pydantic import BaseModel, Field


class VolunteerCreate(BaseModel):
    """Schema for registering a volunteer."""

    name: Any = Field(None, examples=["Asha Patel"])
    email: Any = Field(None, examples=["asha@example.org"])
    phone: Any = Field(None, examples=["+1 555 0100"])
    skills: Any = Field(None, examples=["first aid, driving"])


class VolunteerRead(BaseModel):
    """Schema for a stored volunteer."""

    id: int
    name: Any
    email: Any
    phone: Any = ""
    skills: Any = ""


class VolunteerCreated(BaseModel):
    success: bool = True
    volunteer: VolunteerRead
