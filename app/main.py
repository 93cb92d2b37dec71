import logging
import random
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings
from app.exceptions.custom import CityNotFoundError, GeoapifyError, InvalidSearchError
from app.exceptions.handlers import (
    city_not_found_handler,
    geoapify_error_handler,
    invalid_search_handler,
)
from app.routers.activities import router as activities_router
from app.routers.city_suggestions import router as city_suggestions_router
from app.services.activities import ActivityService
from app.services.city_suggestions import CitySuggestionService
from app.services.geoapify import GeoapifyService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    # httpx logs full request URLs, which carry the API key.
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=settings.upstream_timeout) as client:
        geoapify = GeoapifyService(client, settings.geoapify_api_key)

        app.state.city_suggestion_service = CitySuggestionService(geoapify)
        app.state.activity_service = ActivityService(
            geoapify, rng=random.Random(settings.random_seed)
        )

        logger.info("Server running on port %d", settings.port)
        yield


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(title="Trip Activities", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.add_exception_handler(GeoapifyError, geoapify_error_handler)
    app.add_exception_handler(CityNotFoundError, city_not_found_handler)
    app.add_exception_handler(InvalidSearchError, invalid_search_handler)

    app.include_router(city_suggestions_router)
    app.include_router(activities_router)
    return app


app = create_app()
