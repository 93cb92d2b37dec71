from typing import Protocol

from app.schemas.geoapify import FeatureCollection


class UpstreamProvider(Protocol):
    """Geocoding/places backend used by the suggestion and activity services."""

    async def autocomplete(self, text: str, limit: int = 5) -> FeatureCollection: ...

    async def geocode(self, text: str) -> FeatureCollection: ...

    async def places(
        self,
        lon: float,
        lat: float,
        radius_m: int,
        categories: list[str],
        limit: int,
    ) -> FeatureCollection: ...
