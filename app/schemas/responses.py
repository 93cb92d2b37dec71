from pydantic import BaseModel


class CitySuggestion(BaseModel):
    city: str | None
    country: str | None
    lon: float
    lat: float


class Activity(BaseModel):
    title: str
    description: str
    price: int | float
    duration: str
    type: str
    imageUrl: str
    rating: float | None = None
    groupSize: str | None = None
