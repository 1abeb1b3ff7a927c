"""
Application package initializer.

The project is split into a thin HTTP layer (``api``), request and
response models (``schemas``), business logic (``services``) and
shared infrastructure (``core``: configuration, logging, the JSON
collection store and the error types).  Each entity kind (reports,
volunteers, alerts, donations) owns one service and one router.
"""

from .main import app  # noqa: F401
