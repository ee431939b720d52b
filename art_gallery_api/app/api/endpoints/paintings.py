"""
Painting endpoints.

Paths follow the public contract of the service: the full collection
lives at ``/paintings`` while every filtered lookup lives under the
singular ``/painting`` prefix.  Numeric parameters are accepted as
plain strings and parsed leniently, so ``/painting/abc`` answers with
the not-found envelope instead of a validation error.  Text parameters
use the ``path`` converter so that an encoded ``/`` stays part of the
search text.
"""

from typing import Any, Dict, List, Union

from fastapi import APIRouter, Depends

from art_gallery_api.app.api.deps import get_datasets, get_settings, not_found
from art_gallery_api.app.core.config import Settings
from art_gallery_api.app.core.datasets import Datasets
from art_gallery_api.app.schemas.message import MessageResponse
from art_gallery_api.app.services.filters import format_number, parse_int
from art_gallery_api.app.services.painting_service import PaintingService

router = APIRouter()

PaintingList = Union[List[Dict[str, Any]], MessageResponse]


@router.get("/paintings", response_model=List[Dict[str, Any]])
async def list_paintings(datasets: Datasets = Depends(get_datasets)) -> List[Dict[str, Any]]:
    """Return every painting in file order."""
    return list(datasets.paintings)


@router.get("/painting/gallery/{gallery_id}", response_model=PaintingList)
async def paintings_by_gallery(
    gallery_id: str,
    datasets: Datasets = Depends(get_datasets),
    settings: Settings = Depends(get_settings),
):
    """Return the paintings held by the gallery with id ``gallery_id``."""
    parsed = parse_int(gallery_id)
    result = PaintingService.by_gallery(datasets.paintings, parsed)
    if not result:
        return not_found(f"No paintings found for gallery id {format_number(parsed)}", settings)
    return result


@router.get("/painting/artist/{artist_id}", response_model=PaintingList)
async def paintings_by_artist(
    artist_id: str,
    datasets: Datasets = Depends(get_datasets),
    settings: Settings = Depends(get_settings),
):
    """Return the paintings by the artist with id ``artist_id``."""
    parsed = parse_int(artist_id)
    result = PaintingService.by_artist(datasets.paintings, parsed)
    if not result:
        return not_found(f"No paintings found for artist id {format_number(parsed)}", settings)
    return result


@router.get("/painting/year/{min_year}/{max_year}", response_model=PaintingList)
async def paintings_by_year(
    min_year: str,
    max_year: str,
    datasets: Datasets = Depends(get_datasets),
    settings: Settings = Depends(get_settings),
):
    """Return paintings whose ``yearOfWork`` lies in ``[min_year, max_year]``."""
    low = parse_int(min_year)
    high = parse_int(max_year)
    result = PaintingService.by_year_range(datasets.paintings, low, high)
    if not result:
        return not_found(
            f"No paintings found between {format_number(low)} and {format_number(high)}",
            settings,
        )
    return result


@router.get("/painting/title/{text:path}", response_model=PaintingList)
async def paintings_by_title(
    text: str,
    datasets: Datasets = Depends(get_datasets),
    settings: Settings = Depends(get_settings),
):
    """Return paintings whose title contains ``text`` (case insensitive)."""
    search = text.lower()
    result = PaintingService.by_title(datasets.paintings, search)
    if not result:
        return not_found(f"No paintings found containing '{search}' in title", settings)
    return result


@router.get("/painting/color/{name:path}", response_model=PaintingList)
async def paintings_by_color(
    name: str,
    datasets: Datasets = Depends(get_datasets),
    settings: Settings = Depends(get_settings),
):
    """Return paintings with a dominant colour named ``name`` (case insensitive)."""
    color_name = name.lower()
    result = PaintingService.by_color(datasets.paintings, color_name)
    if not result:
        return not_found(f"No paintings found with color '{color_name}'", settings)
    return result


@router.get("/painting/{painting_id}", response_model=Union[Dict[str, Any], MessageResponse])
async def get_painting(
    painting_id: str,
    datasets: Datasets = Depends(get_datasets),
    settings: Settings = Depends(get_settings),
):
    """Return a single painting object, not wrapped in a list."""
    parsed = parse_int(painting_id)
    painting = PaintingService.get_by_id(datasets.paintings, parsed)
    if painting is None:
        return not_found(f"Painting with id {format_number(parsed)} not found", settings)
    return painting
