"""
Application error types.

Services raise these exceptions; ``main.create_app`` registers a
handler that turns any ``AppError`` into a JSON body of the form
``{"success": false, "message": ...}`` with the error's status code.
"""

from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """A required field is missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    """The target collection file or record does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class DataFileCorruptedError(AppError):
    """A collection file exists but does not hold a valid JSON array."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Data file {path} is corrupted: {reason}")
        self.path = path
