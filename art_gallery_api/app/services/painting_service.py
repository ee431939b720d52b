"""
Query operations over the paintings dataset.

Each painting carries denormalized copies of its artist and gallery,
so lookups by artist or gallery id read the nested ``artist.artistID``
and ``gallery.galleryID`` fields directly.  Dominant colours live
under ``details.annotation.dominantColors`` as a list of objects with
a ``name`` key.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from art_gallery_api.app.core.datasets import Record
from art_gallery_api.app.services.filters import (
    contains_ignore_case,
    equals_ignore_case,
    first,
    in_range,
    int_equals,
    nested,
    select,
)


class PaintingService:
    """Filters for painting records."""

    @staticmethod
    def get_by_id(paintings: Sequence[Record], painting_id: Optional[int]) -> Optional[Record]:
        """Return the first painting whose ``paintingID`` equals ``painting_id``."""
        return first(paintings, lambda p: int_equals(p.get("paintingID"), painting_id))

    @staticmethod
    def by_gallery(paintings: Sequence[Record], gallery_id: Optional[int]) -> List[Record]:
        return select(paintings, lambda p: int_equals(nested(p, "gallery", "galleryID"), gallery_id))

    @staticmethod
    def by_artist(paintings: Sequence[Record], artist_id: Optional[int]) -> List[Record]:
        return select(paintings, lambda p: int_equals(nested(p, "artist", "artistID"), artist_id))

    @staticmethod
    def by_year_range(
        paintings: Sequence[Record], min_year: Optional[int], max_year: Optional[int]
    ) -> List[Record]:
        """Return paintings with ``min_year <= yearOfWork <= max_year``.

        Both bounds are inclusive.  A reversed range (``min_year`` greater
        than ``max_year``) matches nothing.
        """
        return select(paintings, lambda p: in_range(p.get("yearOfWork"), min_year, max_year))

    @staticmethod
    def by_title(paintings: Sequence[Record], text: str) -> List[Record]:
        """Return paintings whose title contains ``text``, ignoring case."""
        return select(paintings, lambda p: contains_ignore_case(p.get("title"), text))

    @staticmethod
    def by_color(paintings: Sequence[Record], color_name: str) -> List[Record]:
        """Return paintings with a dominant colour named exactly ``color_name``.

        The comparison ignores case but is not a substring match:
        ``"red"`` does not match ``"Dark Red"``.
        """

        def has_color(painting: Record) -> bool:
            colors = nested(painting, "details", "annotation", "dominantColors", default=[])
            if not isinstance(colors, list):
                return False
            return any(equals_ignore_case(nested(c, "name"), color_name) for c in colors)

        return select(paintings, has_color)
