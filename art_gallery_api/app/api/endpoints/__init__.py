"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one domain
(paintings, artists, galleries) plus the service health route.  The
routers are aggregated in ``api/router.py``.
"""
