import logging

import httpx
from pydantic import ValidationError

from app.exceptions.custom import GeoapifyError
from app.schemas.geoapify import FeatureCollection

logger = logging.getLogger(__name__)

AUTOCOMPLETE_URL = "https://api.geoapify.com/v1/geocode/autocomplete"
SEARCH_URL = "https://api.geoapify.com/v1/geocode/search"
PLACES_URL = "https://api.geoapify.com/v2/places"


def build_circle_filter(lon: float, lat: float, radius_m: int) -> str:
    return f"circle:{lon},{lat},{radius_m}"


class GeoapifyService:
    def __init__(self, client: httpx.AsyncClient, api_key: str):
        self._client = client
        self._api_key = api_key

    async def _get(self, url: str, params: dict[str, str]) -> FeatureCollection:
        params = {**params, "apiKey": self._api_key}

        try:
            resp = await self._client.get(url, params=params)
        except httpx.HTTPError as exc:
            raise GeoapifyError(f"{type(exc).__name__}: {exc}") from exc

        if resp.status_code >= 400:
            raise GeoapifyError(resp.text, status_code=resp.status_code)

        try:
            return FeatureCollection(**resp.json())
        except (ValueError, TypeError, ValidationError) as exc:
            raise GeoapifyError(
                f"Malformed response body: {exc}", status_code=resp.status_code
            ) from exc

    async def autocomplete(self, text: str, limit: int = 5) -> FeatureCollection:
        """City-type autocomplete for a partial place name."""
        data = await self._get(
            AUTOCOMPLETE_URL,
            {"text": text, "type": "city", "limit": str(limit)},
        )
        if not data.features:
            logger.info("No autocomplete results for: %s", text)
        return data

    async def geocode(self, text: str) -> FeatureCollection:
        """Forward geocode a free-text query, restricted to cities."""
        data = await self._get(SEARCH_URL, {"text": text, "type": "city"})
        if not data.features:
            logger.info("No geocode results for: %s", text)
        return data

    async def places(
        self,
        lon: float,
        lat: float,
        radius_m: int,
        categories: list[str],
        limit: int,
    ) -> FeatureCollection:
        """Places of the given categories within a circle around (lon, lat)."""
        return await self._get(
            PLACES_URL,
            {
                "categories": ",".join(categories),
                "filter": build_circle_filter(lon, lat, radius_m),
                "limit": str(limit),
            },
        )
