"""
Application package initializer.

The service is organised into a handful of small layers: ``core``
holds configuration, logging and the dataset loader, ``services``
holds the pure filter functions for each domain (paintings, artists,
galleries) and ``api`` maps URL paths onto those filters.  Routers for
each domain live in ``api/endpoints`` and are aggregated in
``api/router.py``.
"""

from .main import app  # noqa: F401
