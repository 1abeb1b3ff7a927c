"""Shared infrastructure: settings, logging, storage and errors."""
