"""Gallery endpoints."""

from typing import Any, Dict, List, Union

from fastapi import APIRouter, Depends

from art_gallery_api.app.api.deps import get_datasets, get_settings, not_found
from art_gallery_api.app.core.config import Settings
from art_gallery_api.app.core.datasets import Datasets
from art_gallery_api.app.schemas.message import MessageResponse
from art_gallery_api.app.services.gallery_service import GalleryService

router = APIRouter()


@router.get("/galleries", response_model=List[Dict[str, Any]])
async def list_galleries(datasets: Datasets = Depends(get_datasets)) -> List[Dict[str, Any]]:
    """Return every gallery in file order."""
    return list(datasets.galleries)


@router.get("/galleries/{country:path}", response_model=Union[List[Dict[str, Any]], MessageResponse])
async def galleries_by_country(
    country: str,
    datasets: Datasets = Depends(get_datasets),
    settings: Settings = Depends(get_settings),
):
    """Return galleries located in ``country`` (exact, case insensitive)."""
    search = country.lower()
    result = GalleryService.by_country(datasets.galleries, search)
    if not result:
        return not_found(f"No galleries found in '{search}'", settings)
    return result
