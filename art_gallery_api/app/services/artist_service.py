"""Query operations over the artists dataset."""

from __future__ import annotations

from typing import List, Sequence

from art_gallery_api.app.core.datasets import Record
from art_gallery_api.app.services.filters import equals_ignore_case, select


class ArtistService:
    """Filters for artist records."""

    @staticmethod
    def by_nationality(artists: Sequence[Record], nationality: str) -> List[Record]:
        """Return artists whose ``Nationality`` equals ``nationality``, ignoring case."""
        return select(artists, lambda a: equals_ignore_case(a.get("Nationality"), nationality))
