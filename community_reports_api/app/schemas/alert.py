"""Pydantic models for alerts broadcast to the community."""

from typing import Any

from pydantic import BaseModel, Field

from .common import OpenRecord


class AlertCreate(OpenRecord):
    """Schema for recording an alert; any attributes are accepted."""

    title: Any = Field(None, examples=["Road closed"])
    message: Any = Field(None, examples=["Main street is closed until 6 pm"])


class AlertRead(OpenRecord):
    id: int


class AlertCreated(BaseModel):
    success: bool = True
    alert: AlertRead
