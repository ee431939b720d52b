"""
Main entrypoint for the Art Gallery API.

This module assembles the FastAPI application, sets up logging, CORS
and the routers.  The ``create_app`` function builds and configures
the app, which is then instantiated at module import time as ``app``,
e.g.::

    uvicorn art_gallery_api.app.main:app --port 3000

When no datasets are passed to ``create_app`` they are read from the
configured data directory during application startup.  A missing or
malformed file aborts startup, so the server never serves requests
without data.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.endpoints import health
from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.datasets import DatasetLoadError, Datasets, load_datasets
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    datasets: Optional[Datasets] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    datasets : Optional[Datasets]
        Records to serve.  If omitted they are loaded from
        ``settings.data_path()`` on startup.
    settings : Optional[Settings]
        Configuration; defaults to the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_path())

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings

    # Cross-origin requests are allowed from any origin by default.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, tags=["health"])
    app.include_router(api_router, prefix="/api")

    if datasets is not None:
        app.state.datasets = datasets
    else:
        @app.on_event("startup")
        def load_data() -> None:
            try:
                app.state.datasets = load_datasets(
                    settings.data_path(),
                    artists_file=settings.artists_file,
                    galleries_file=settings.galleries_file,
                    paintings_file=settings.paintings_file,
                )
            except DatasetLoadError as exc:
                logger.error("Refusing to start: %s", exc)
                raise

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
