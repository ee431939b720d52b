"""Art Gallery API client.

A thin wrapper around the HTTP API served by ``art_gallery_api``.  The
client uses the ``requests`` library internally and exposes one method
per route:

* :meth:`list_paintings`, :meth:`get_painting`
* :meth:`paintings_by_gallery`, :meth:`paintings_by_artist`
* :meth:`paintings_by_year`, :meth:`paintings_by_title`,
  :meth:`paintings_by_color`
* :meth:`list_artists`, :meth:`artists_by_nationality`
* :meth:`list_galleries`, :meth:`galleries_by_country`

Every method returns a tuple ``(data, error)``.  On success ``data`` is
the parsed JSON and ``error`` is ``None``.  The server reports empty
results with a ``{"message": ...}`` object, normally with status 200;
the client turns that envelope into an error dictionary so callers
never mistake it for a record.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class GalleryAPIClient:
    """Client for the read-only art gallery API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:3000",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _get(self, path: str) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform a GET request against the API.

        Returns:
            A tuple ``(data, error)``.  ``error`` is a dictionary with keys
            ``status_code`` and ``message`` when the request failed or the
            server answered with the not-found envelope.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending GET request to %s", url)
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        try:
            payload = response.json() if response.content else None
        except ValueError:
            payload = None

        if _is_message(payload):
            return None, {"status_code": response.status_code, "message": payload["message"]}

        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            message = ""
            if isinstance(payload, dict):
                message = payload.get("detail") or str(payload)
            if not message:
                message = response.text or str(exc)
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}

        return payload, None

    def _get_list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._get(path)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    # ------------------------------------------------------------------
    # Paintings
    # ------------------------------------------------------------------
    def list_paintings(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._get_list("/api/paintings")

    def get_painting(self, painting_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single painting by ID."""
        return self._get(f"/api/painting/{_segment(painting_id)}")

    def paintings_by_gallery(self, gallery_id: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._get_list(f"/api/painting/gallery/{_segment(gallery_id)}")

    def paintings_by_artist(self, artist_id: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._get_list(f"/api/painting/artist/{_segment(artist_id)}")

    def paintings_by_year(
        self, min_year: Any, max_year: Any
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve paintings made between ``min_year`` and ``max_year`` inclusive."""
        return self._get_list(f"/api/painting/year/{_segment(min_year)}/{_segment(max_year)}")

    def paintings_by_title(self, text: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._get_list(f"/api/painting/title/{_segment(text)}")

    def paintings_by_color(self, name: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._get_list(f"/api/painting/color/{_segment(name)}")

    # ------------------------------------------------------------------
    # Artists and galleries
    # ------------------------------------------------------------------
    def list_artists(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._get_list("/api/artists")

    def artists_by_nationality(self, nationality: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._get_list(f"/api/artists/{_segment(nationality)}")

    def list_galleries(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._get_list("/api/galleries")

    def galleries_by_country(self, country: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._get_list(f"/api/galleries/{_segment(country)}")


def _segment(value: Any) -> str:
    """Quote a value for use as a single path segment."""
    return quote(str(value), safe="")


def _is_message(payload: Any) -> bool:
    return isinstance(payload, dict) and set(payload) == {"message"}
