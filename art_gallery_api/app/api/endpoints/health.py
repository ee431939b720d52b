"""Service health endpoint."""

from fastapi import APIRouter, Depends

from art_gallery_api.app.api.deps import get_datasets, get_settings
from art_gallery_api.app.core.config import Settings
from art_gallery_api.app.core.datasets import Datasets
from art_gallery_api.app.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
async def health(
    datasets: Datasets = Depends(get_datasets),
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    """Report the service name, version and dataset sizes."""
    return HealthResponse(
        service=settings.project_name,
        version=settings.api_version,
        status="healthy",
        counts=datasets.counts(),
    )
