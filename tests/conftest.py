"""Shared fixtures for the test suite."""

import json

import pytest
import requests
from fastapi.testclient import TestClient
from unittest.mock import MagicMock

from art_gallery_api.app.core.config import Settings
from art_gallery_api.app.core.datasets import Datasets
from art_gallery_api.app.main import create_app


def _painting(painting_id, title, year, artist_id, gallery_id, colors):
    return {
        "paintingID": painting_id,
        "title": title,
        "yearOfWork": year,
        "artist": {"artistID": artist_id, "lastName": f"Artist {artist_id}"},
        "gallery": {"galleryID": gallery_id, "galleryName": f"Gallery {gallery_id}"},
        "details": {"annotation": {"dominantColors": [{"name": c, "web": "#000000"} for c in colors]}},
    }


@pytest.fixture
def paintings():
    """Four paintings; 1 and 3 share an artist, 3 and 4 share a gallery."""
    return [
        _painting(1, "The Starry Night", 1889, 1, 1, ["Dark Slate Blue", "Navy"]),
        _painting(2, "Girl with a Pearl Earring", 1665, 2, 2, ["Black", "Goldenrod"]),
        _painting(3, "Starry Night Over the Rhône", 1888, 1, 3, ["Navy"]),
        _painting(4, "Water Lilies", 1906, 3, 3, ["Sea Green", "Dark Red"]),
    ]


@pytest.fixture
def artists():
    return [
        {"ArtistID": 1, "LastName": "van Gogh", "Nationality": "Dutch", "YearOfBirth": 1853},
        {"ArtistID": 2, "LastName": "Vermeer", "Nationality": "Dutch", "YearOfBirth": 1632},
        {"ArtistID": 3, "LastName": "Monet", "Nationality": "French", "YearOfBirth": 1840},
    ]


@pytest.fixture
def galleries():
    return [
        {"GalleryID": 1, "GalleryName": "Museum of Modern Art", "GalleryCountry": "United States"},
        {"GalleryID": 2, "GalleryName": "Mauritshuis", "GalleryCountry": "Netherlands"},
        {"GalleryID": 3, "GalleryName": "Musée d'Orsay", "GalleryCountry": "France"},
    ]


@pytest.fixture
def datasets(artists, galleries, paintings):
    return Datasets.from_records(artists, galleries, paintings)


@pytest.fixture
def settings():
    return Settings(strict_not_found=False)


@pytest.fixture
def client(datasets, settings):
    """TestClient around an app serving the fixture datasets."""
    return TestClient(create_app(datasets=datasets, settings=settings))


@pytest.fixture
def data_dir(tmp_path, artists, galleries, paintings):
    """Directory holding the fixture datasets as JSON files."""
    for name, records in [
        ("artists.json", artists),
        ("galleries.json", galleries),
        ("paintings-nested.json", paintings),
    ]:
        (tmp_path / name).write_text(json.dumps(records), encoding="utf-8")
    return tmp_path


@pytest.fixture
def mock_response():
    """Factory for mock HTTP responses."""
    def _make(status_code=200, json_data=None):
        resp = MagicMock()
        resp.status_code = status_code
        resp.content = b"{}" if json_data is not None else b""
        resp.json.return_value = json_data
        resp.text = json.dumps(json_data) if json_data is not None else ""
        if status_code >= 400:
            resp.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error", response=resp)
        return resp
    return _make
