"""
Dependencies and response helpers shared by the endpoint modules.

The datasets and settings are attached to ``app.state`` by
``create_app``; routes receive them through ``Depends`` so that each
application instance serves its own data.
"""

import logging
from typing import Union

from fastapi import Request, status
from fastapi.responses import JSONResponse

from art_gallery_api.app.core.config import Settings
from art_gallery_api.app.core.datasets import Datasets
from art_gallery_api.app.schemas.message import MessageResponse

logger = logging.getLogger(__name__)


def get_datasets(request: Request) -> Datasets:
    return request.app.state.datasets


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def not_found(message: str, settings: Settings) -> Union[MessageResponse, JSONResponse]:
    """Build the ``{"message": ...}`` envelope for an empty result.

    With ``strict_not_found`` disabled (the default) the envelope is a
    regular 200 response; otherwise it is sent with status 404.
    """
    logger.debug("Empty result: %s", message)
    if settings.strict_not_found:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": message})
    return MessageResponse(message=message)
