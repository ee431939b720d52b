"""Pydantic schema for the not-found envelope."""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Returned in place of data when a query matches nothing."""

    message: str = Field(..., description="Human readable description of the empty result")
