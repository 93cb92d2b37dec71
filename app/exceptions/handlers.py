import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import CityNotFoundError, GeoapifyError, InvalidSearchError

logger = logging.getLogger(__name__)


async def geoapify_error_handler(request: Request, exc: GeoapifyError) -> JSONResponse:
    # Upstream details stay in the log; the caller only gets a generic message.
    logger.error(
        "Geoapify error on %s: %s (status=%s)", request.url.path, exc.message, exc.status_code
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Failed to fetch data from places provider"},
    )


async def city_not_found_handler(_request: Request, exc: CityNotFoundError) -> JSONResponse:
    logger.info("City not found: %s", exc.query)
    return JSONResponse(
        status_code=404,
        content={"detail": "City not found"},
    )


async def invalid_search_handler(_request: Request, exc: InvalidSearchError) -> JSONResponse:
    logger.warning("Invalid search: %s", exc.message)
    return JSONResponse(
        status_code=400,
        content={"detail": exc.message},
    )
