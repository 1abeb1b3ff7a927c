"""
Pydantic models for donations.

Every field is taken as sent (``amount`` may be a number or a
string); only the presence of ``name`` and ``amount`` is checked.
"""

from typing import Any

from pydantic import BaseModel, Field


class DonationCreate(BaseModel):
    """Schema for recording a donation."""

    name: Any = Field(None, examples=["Ravi"])
    amount: Any = Field(None, examples=[250])
    photoUrl: Any = Field(None, examples=["https://example.org/receipt.jpg"])


class DonationRead(BaseModel):
    """Schema for a stored donation."""

    id: int
    name: Any
    amount: Any
    photoUrl: Any = ""
    dateTime: str


class DonationCreated(BaseModel):
    success: bool = True
    donation: DonationRead
