"""Query operations over the galleries dataset."""

from __future__ import annotations

from typing import List, Sequence

from art_gallery_api.app.core.datasets import Record
from art_gallery_api.app.services.filters import equals_ignore_case, select


class GalleryService:
    """Filters for gallery records."""

    @staticmethod
    def by_country(galleries: Sequence[Record], country: str) -> List[Record]:
        return select(galleries, lambda g: equals_ignore_case(g.get("GalleryCountry"), country))
