import random

from app.schemas.geoapify import Feature
from app.schemas.responses import Activity

DEFAULT_TYPE = "tourism"
DEFAULT_TITLE = "Local Attraction"
DEFAULT_DESCRIPTION = "Explore this spot!"
DEFAULT_DURATION = "1-2 hours"
DEFAULT_GROUP_SIZE = "Any"
PLACEHOLDER_IMAGE_URL = "https://images.unsplash.com/photo-1514525253161-7a46d19cd819"

MIN_PRICE = 10
MAX_PRICE = 59
MIN_RATING = 4.0


def activity_type(categories: list[str]) -> str:
    """Top-level category of the first entry, e.g. "leisure.park" -> "leisure"."""
    if not categories:
        return DEFAULT_TYPE
    return categories[0].split(".")[0] or DEFAULT_TYPE


def is_free_park(type_: str, name: str | None) -> bool:
    return type_ == "leisure" and name is not None and "park" in name.lower()


def synthesize_price(
    type_: str, name: str | None, budget: float, rng: random.Random
) -> int | float:
    """Parks are free; everything else gets a made-up price capped at the budget."""
    if is_free_park(type_, name):
        return 0
    return min(rng.randint(MIN_PRICE, MAX_PRICE), budget)


def synthesize_rating(rng: random.Random) -> float:
    return MIN_RATING + rng.random()


def map_place_to_activity(feature: Feature, budget: float, rng: random.Random) -> Activity:
    """Build an Activity from a places feature.

    The places API has no price, rating or duration, so those are synthesized:
    price and rating come from `rng`, the rest are fixed literals.
    """
    props = feature.properties
    type_ = activity_type(props.categories)
    return Activity(
        title=props.name or DEFAULT_TITLE,
        description=", ".join(props.categories) or DEFAULT_DESCRIPTION,
        price=synthesize_price(type_, props.name, budget, rng),
        duration=DEFAULT_DURATION,
        type=type_,
        imageUrl=PLACEHOLDER_IMAGE_URL,
        rating=synthesize_rating(rng),
        groupSize=DEFAULT_GROUP_SIZE,
    )
