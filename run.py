"""Entry point for serving the Art Gallery API.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``3000``).  The datasets are
loaded during startup from ``DATA_DIR``; a relative directory is
looked up beside the project and then in the current working
directory.  If any file is missing or malformed the server exits
instead of serving.

uvicorn is started with ``log_config=None`` so that its loggers keep
the handlers installed by ``setup_logging``.

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from art_gallery_api.app.core.config import settings
from art_gallery_api.app.main import app

logger = logging.getLogger(__name__)


def main() -> None:
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logger.info("Server running on port %s", settings.port)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
