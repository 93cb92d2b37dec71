from typing import Annotated

from fastapi import APIRouter, Query

from app.dependencies import ActivityDep
from app.schemas.responses import Activity
from app.services.activities import parse_search

router = APIRouter(prefix="/api")


@router.get("/activities", response_model=list[Activity])
async def activities(
    service: ActivityDep,
    city: str | None = None,
    country: str | None = None,
    start_date: Annotated[str | None, Query(alias="startDate")] = None,
    end_date: Annotated[str | None, Query(alias="endDate")] = None,
    budget: str | None = None,
) -> list[Activity]:
    # All optional at the FastAPI layer; parse_search rejects missing ones with 400.
    search = parse_search(city, country, start_date, end_date, budget)
    return await service.find(search)
