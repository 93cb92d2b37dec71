from fastapi import APIRouter

from app.dependencies import CitySuggestionDep
from app.schemas.responses import CitySuggestion

router = APIRouter(prefix="/api")


@router.get("/city-suggestions", response_model=list[CitySuggestion])
async def city_suggestions(
    service: CitySuggestionDep,
    query: str | None = None,
) -> list[CitySuggestion]:
    return await service.suggest(query)
