"""
Logging configuration for the service.

``setup_logging`` attaches one console handler (and optionally a file
handler) to the root logger.  uvicorn's own loggers are stripped of
their handlers and made to propagate, so server start-up lines, access
logs and application messages all share the same format.  Setup happens
once; repeated calls from ``create_app`` are no‑ops.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def route_uvicorn_logs() -> None:
    """Send uvicorn log records to the root handlers."""
    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True


def setup_logging(level: str = "INFO", logfile: Optional[Path] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive; unknown names fall back
        to ``INFO``.
    logfile : Optional[Path]
        Already resolved log file (see ``Settings.log_path``).
    """
    route_uvicorn_logs()

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(logfile, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
