"""
Pydantic schema definitions for API payloads.

Each entity kind defines its own request and response models.  Reports
and alerts are open records: they declare the fields the front end is
known to send and keep any additional attributes as submitted.
"""
