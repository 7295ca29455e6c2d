"""
Nominatim (OpenStreetMap) geocoding client.

Turns a free-text place ("Rockville Town Square") into candidate
coordinates for the seeker search.  Requests are throttled through
``RequestThrottle`` to respect Nominatim's one-request-per-second policy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from src.config import settings
from .locks import RequestThrottle

logger = logging.getLogger(__name__)


class GeocodingError(Exception):
    """Raised when the upstream geocoding service fails."""


@dataclass(frozen=True)
class GeocodeResult:
    display_name: str
    lat: float
    lng: float


class NominatimGeocoder:
    def __init__(
        self,
        client: httpx.AsyncClient,
        throttle: Optional[RequestThrottle] = None,
        base_url: str = settings.nominatim_url,
        user_agent: str = settings.geocoder_user_agent,
        max_results: int = settings.geocode_max_results,
    ):
        self.client = client
        self.throttle = throttle
        self.base_url = base_url
        self.user_agent = user_agent
        self.max_results = max_results

    async def search(self, query: str) -> list[GeocodeResult]:
        params = {
            "q": query.strip(),
            "format": "json",
            "limit": str(self.max_results),
            "addressdetails": "1",
        }
        if self.throttle is not None:
            await self.throttle.wait_for_slot()

        try:
            response = await self.client.get(
                self.base_url,
                params=params,
                headers={"User-Agent": self.user_agent},
            )
            response.raise_for_status()
            payload = response.json()
            if not isinstance(payload, list):
                raise TypeError(f"expected a JSON list, got {type(payload).__name__}")
            return [
                GeocodeResult(
                    display_name=item["display_name"],
                    lat=float(item["lat"]),
                    lng=float(item["lon"]),
                )
                for item in payload[: self.max_results]
            ]
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as exc:
            logger.warning("Geocoding request for %r failed: %s", query, exc)
            raise GeocodingError("Geocoding service error") from exc
