import logging

from app.mappers.suggestion_mapper import map_feature_to_suggestion
from app.schemas.responses import CitySuggestion
from app.services.upstream import UpstreamProvider

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 3
MAX_SUGGESTIONS = 5


class CitySuggestionService:
    def __init__(self, provider: UpstreamProvider):
        self._provider = provider

    async def suggest(self, query: str | None) -> list[CitySuggestion]:
        """Up to MAX_SUGGESTIONS cities for a partial name, in upstream order.

        Queries shorter than MIN_QUERY_LENGTH return [] without an upstream call.
        """
        if not query or len(query) < MIN_QUERY_LENGTH:
            return []

        data = await self._provider.autocomplete(query, limit=MAX_SUGGESTIONS)
        return [map_feature_to_suggestion(f) for f in data.features[:MAX_SUGGESTIONS]]
