"""
API package.

``router.py`` aggregates the per‑entity routers defined in
``endpoints``; ``main.create_app`` mounts it under ``/api``.
"""
