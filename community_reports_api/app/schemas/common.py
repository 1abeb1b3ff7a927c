"""Models shared by every entity kind."""

from typing import Any, Dict

from pydantic import BaseModel


class OpenRecord(BaseModel):
    """Base for payloads that accept attributes beyond the declared ones."""

    model_config = {
        "extra": "allow",
    }

    def submitted_fields(self) -> Dict[str, Any]:
        """Return only the attributes the client actually sent.

        Declared fields that were left out keep out of the stored record
        instead of being written as ``null``.
        """
        sent = set(self.model_fields_set) | set(self.model_extra or {})
        return {key: value for key, value in self.model_dump().items() if key in sent}


class SuccessResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
