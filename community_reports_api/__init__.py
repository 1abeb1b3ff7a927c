"""
Top‑level package for the Community Reports API.

This file makes ``community_reports_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``community_reports_api.app.main``.
"""
