from typing import Any

from pydantic import BaseModel


class FeatureProperties(BaseModel):
    name: str | None = None
    city: str | None = None
    country: str | None = None
    lon: float | None = None
    lat: float | None = None
    categories: list[str] = []


class Geometry(BaseModel):
    type: str | None = None
    coordinates: list[Any] = []


class Feature(BaseModel):
    properties: FeatureProperties = FeatureProperties()
    geometry: Geometry | None = None

    def point(self) -> tuple[float, float] | None:
        """Return (lon, lat), preferring properties over the point geometry."""
        if self.properties.lon is not None and self.properties.lat is not None:
            return self.properties.lon, self.properties.lat
        if self.geometry and self.geometry.type == "Point" and len(self.geometry.coordinates) >= 2:
            lon, lat = self.geometry.coordinates[:2]
            return float(lon), float(lat)
        return None


class FeatureCollection(BaseModel):
    features: list[Feature] = []
