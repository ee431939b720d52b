"""Tests for the painting, artist and gallery services."""

from art_gallery_api.app.services.artist_service import ArtistService
from art_gallery_api.app.services.gallery_service import GalleryService
from art_gallery_api.app.services.painting_service import PaintingService


def ids(paintings):
    return [p["paintingID"] for p in paintings]


class TestPaintingService:
    def test_get_by_id(self, paintings):
        for painting in paintings:
            assert PaintingService.get_by_id(paintings, painting["paintingID"]) is painting

    def test_get_by_id_absent(self, paintings):
        assert PaintingService.get_by_id(paintings, 9999) is None
        assert PaintingService.get_by_id(paintings, None) is None

    def test_get_by_id_returns_first_duplicate(self, paintings):
        duplicate = dict(paintings[1], paintingID=1, title="Copy")
        records = paintings + [duplicate]
        assert PaintingService.get_by_id(records, 1)["title"] == "The Starry Night"

    def test_by_gallery(self, paintings):
        assert ids(PaintingService.by_gallery(paintings, 3)) == [3, 4]
        assert PaintingService.by_gallery(paintings, 42) == []

    def test_by_artist(self, paintings):
        assert ids(PaintingService.by_artist(paintings, 1)) == [1, 3]
        assert PaintingService.by_artist(paintings, None) == []

    def test_by_year_range_inclusive(self, paintings):
        assert ids(PaintingService.by_year_range(paintings, 1888, 1889)) == [1, 3]
        assert ids(PaintingService.by_year_range(paintings, 1665, 1665)) == [2]

    def test_by_year_range_keeps_original_order(self, paintings):
        assert ids(PaintingService.by_year_range(paintings, 1600, 2000)) == [1, 2, 3, 4]

    def test_by_year_range_reversed_or_nan(self, paintings):
        assert PaintingService.by_year_range(paintings, 1900, 1800) == []
        assert PaintingService.by_year_range(paintings, None, 2000) == []

    def test_by_title_substring_case_insensitive(self, paintings):
        assert ids(PaintingService.by_title(paintings, "starry")) == [1, 3]
        assert ids(PaintingService.by_title(paintings, "PEARL")) == [2]
        assert PaintingService.by_title(paintings, "sunflowers") == []

    def test_by_color_exact_case_insensitive(self, paintings):
        assert ids(PaintingService.by_color(paintings, "navy")) == [1, 3]
        assert ids(PaintingService.by_color(paintings, "DARK RED")) == [4]

    def test_by_color_is_not_substring(self, paintings):
        assert PaintingService.by_color(paintings, "red") == []
        assert PaintingService.by_color(paintings, "blue") == []

    def test_records_without_annotation_do_not_match(self, paintings):
        records = paintings + [{"paintingID": 5, "title": "Sketch", "details": {}}]
        assert ids(PaintingService.by_color(records, "navy")) == [1, 3]
        assert ids(PaintingService.by_gallery(records, 3)) == [3, 4]

    def test_input_not_mutated(self, paintings):
        before = [dict(p) for p in paintings]
        PaintingService.by_title(paintings, "night")
        assert paintings == before


class TestArtistService:
    def test_by_nationality(self, artists):
        result = ArtistService.by_nationality(artists, "dutch")
        assert [a["ArtistID"] for a in result] == [1, 2]

    def test_by_nationality_exact(self, artists):
        assert ArtistService.by_nationality(artists, "dut") == []
        assert ArtistService.by_nationality(artists, "FRENCH")[0]["LastName"] == "Monet"


class TestGalleryService:
    def test_by_country(self, galleries):
        result = GalleryService.by_country(galleries, "netherlands")
        assert [g["GalleryID"] for g in result] == [2]

    def test_by_country_multiword(self, galleries):
        assert len(GalleryService.by_country(galleries, "United States")) == 1

    def test_by_country_none(self, galleries):
        assert GalleryService.by_country(galleries, "spain") == []
