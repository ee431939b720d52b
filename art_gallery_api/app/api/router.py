"""
Top‑level API router.

Aggregates the domain routers; ``create_app`` mounts it under
``/api``.  Each endpoint module spells out its full collection path
because the painting routes mix the plural ``/paintings`` with the
singular ``/painting/...`` prefix.
"""

from fastapi import APIRouter

from .endpoints import artists, galleries, paintings

router = APIRouter()

router.include_router(paintings.router, tags=["paintings"])
router.include_router(artists.router, tags=["artists"])
router.include_router(galleries.router, tags=["galleries"])
