import logging
import math
import random

from app.exceptions.custom import CityNotFoundError, GeoapifyError, InvalidSearchError
from app.mappers.activity_mapper import map_place_to_activity
from app.schemas.responses import Activity
from app.schemas.search import SearchParameters
from app.services.upstream import UpstreamProvider

logger = logging.getLogger(__name__)

SEARCH_RADIUS_M = 10_000
PLACE_CATEGORIES = ["tourism", "entertainment", "leisure"]
MAX_PLACES = 20


def build_city_query(city: str, country: str) -> str:
    return f"{city}, {country}"


def parse_search(
    city: str | None,
    country: str | None,
    start_date: str | None,
    end_date: str | None,
    budget: str | None,
) -> SearchParameters:
    """Validate raw query parameters. Every field is required."""
    if not (city and country and start_date and end_date and budget):
        raise InvalidSearchError("Missing required parameters")

    try:
        budget_value = float(budget)
    except ValueError:
        raise InvalidSearchError("Budget must be a number") from None
    if not math.isfinite(budget_value) or budget_value <= 0:
        raise InvalidSearchError("Budget must be a positive number")

    return SearchParameters(
        city=city,
        country=country,
        start_date=start_date,
        end_date=end_date,
        budget=budget_value,
    )


class ActivityService:
    def __init__(self, provider: UpstreamProvider, rng: random.Random | None = None):
        self._provider = provider
        self._rng = rng or random.Random()

    async def find(self, search: SearchParameters) -> list[Activity]:
        """Activities around the searched city, each priced within the budget."""
        query = build_city_query(search.city, search.country)

        geocoded = await self._provider.geocode(query)
        if not geocoded.features:
            raise CityNotFoundError(query)

        point = geocoded.features[0].point()
        if point is None:
            raise GeoapifyError(f"Geocode result for '{query}' has no coordinates")
        lon, lat = point

        places = await self._provider.places(
            lon, lat,
            radius_m=SEARCH_RADIUS_M,
            categories=PLACE_CATEGORIES,
            limit=MAX_PLACES,
        )

        activities = [
            map_place_to_activity(place, search.budget, self._rng)
            for place in places.features
        ]
        within_budget = [a for a in activities if a.price <= search.budget]
        logger.info(
            "Found %d activities for %s (%d within budget %s)",
            len(activities), query, len(within_budget), search.budget,
        )
        return within_budget
