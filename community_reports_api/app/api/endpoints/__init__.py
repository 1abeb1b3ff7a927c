"""
Endpoint subpackage.

Each module defines an APIRouter for one entity kind.  The routers
are aggregated in ``api/router.py``.
"""
