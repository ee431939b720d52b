"""Artist endpoints."""

from typing import Any, Dict, List, Union

from fastapi import APIRouter, Depends

from art_gallery_api.app.api.deps import get_datasets, get_settings, not_found
from art_gallery_api.app.core.config import Settings
from art_gallery_api.app.core.datasets import Datasets
from art_gallery_api.app.schemas.message import MessageResponse
from art_gallery_api.app.services.artist_service import ArtistService

router = APIRouter()


@router.get("/artists", response_model=List[Dict[str, Any]])
async def list_artists(datasets: Datasets = Depends(get_datasets)) -> List[Dict[str, Any]]:
    """Return every artist in file order."""
    return list(datasets.artists)


@router.get("/artists/{country:path}", response_model=Union[List[Dict[str, Any]], MessageResponse])
async def artists_by_nationality(
    country: str,
    datasets: Datasets = Depends(get_datasets),
    settings: Settings = Depends(get_settings),
):
    """Return artists whose nationality equals ``country``.

    The match is exact but case insensitive, so ``dutch`` finds artists
    recorded as ``Dutch`` while ``dut`` finds nothing.
    """
    search = country.lower()
    result = ArtistService.by_nationality(datasets.artists, search)
    if not result:
        return not_found(f"No artists found from '{search}'", settings)
    return result
