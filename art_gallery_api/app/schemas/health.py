"""Pydantic schemas for the service health payload."""

from pydantic import BaseModel


class DatasetCounts(BaseModel):
    artists: int
    galleries: int
    paintings: int


class HealthResponse(BaseModel):
    """Service name, version and the size of each loaded dataset."""

    service: str
    version: str
    status: str
    counts: DatasetCounts
