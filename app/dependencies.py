from typing import Annotated

from fastapi import Depends, Request

from app.services.activities import ActivityService
from app.services.city_suggestions import CitySuggestionService


def get_city_suggestion_service(request: Request) -> CitySuggestionService:
    return request.app.state.city_suggestion_service


def get_activity_service(request: Request) -> ActivityService:
    return request.app.state.activity_service


CitySuggestionDep = Annotated[CitySuggestionService, Depends(get_city_suggestion_service)]
ActivityDep = Annotated[ActivityService, Depends(get_activity_service)]
