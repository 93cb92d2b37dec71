import httpx
import pytest
import respx
from httpx import Response

from app.exceptions.custom import GeoapifyError
from app.services.geoapify import (
    AUTOCOMPLETE_URL,
    PLACES_URL,
    SEARCH_URL,
    GeoapifyService,
    build_circle_filter,
)
from tests.fakes import collection, feature


def test_build_circle_filter():
    assert build_circle_filter(2.35, 48.85, 10000) == "circle:2.35,48.85,10000"


@respx.mock
async def test_autocomplete_params():
    route = respx.get(AUTOCOMPLETE_URL).mock(
        return_value=Response(200, json=collection(feature(city="Paris", lon=2.35, lat=48.85)))
    )

    async with httpx.AsyncClient() as client:
        service = GeoapifyService(client, "test-key")
        data = await service.autocomplete("São Paulo", limit=5)

    assert len(data.features) == 1
    params = route.calls.last.request.url.params
    assert params["text"] == "São Paulo"
    assert params["type"] == "city"
    assert params["limit"] == "5"
    assert params["apiKey"] == "test-key"
    assert "São" not in str(route.calls.last.request.url)


@respx.mock
async def test_geocode_params():
    route = respx.get(SEARCH_URL).mock(return_value=Response(200, json=collection()))

    async with httpx.AsyncClient() as client:
        service = GeoapifyService(client, "test-key")
        data = await service.geocode("Paris, France")

    assert data.features == []
    params = route.calls.last.request.url.params
    assert params["text"] == "Paris, France"
    assert params["type"] == "city"


@respx.mock
async def test_places_params():
    route = respx.get(PLACES_URL).mock(
        return_value=Response(200, json=collection(feature(name="Louvre", categories=["tourism.sights"])))
    )

    async with httpx.AsyncClient() as client:
        service = GeoapifyService(client, "test-key")
        data = await service.places(
            2.35, 48.85, radius_m=10000, categories=["tourism", "entertainment", "leisure"], limit=20
        )

    assert data.features[0].properties.name == "Louvre"
    params = route.calls.last.request.url.params
    assert params["filter"] == "circle:2.35,48.85,10000"
    assert params["categories"] == "tourism,entertainment,leisure"
    assert params["limit"] == "20"


@respx.mock
async def test_error_status():
    respx.get(SEARCH_URL).mock(return_value=Response(401, text="Invalid apiKey"))

    async with httpx.AsyncClient() as client:
        service = GeoapifyService(client, "bad-key")
        with pytest.raises(GeoapifyError) as exc_info:
            await service.geocode("Paris, France")

    assert exc_info.value.status_code == 401


@respx.mock
async def test_network_error():
    respx.get(AUTOCOMPLETE_URL).mock(side_effect=httpx.ConnectError("boom"))

    async with httpx.AsyncClient() as client:
        service = GeoapifyService(client, "test-key")
        with pytest.raises(GeoapifyError) as exc_info:
            await service.autocomplete("Paris")

    assert exc_info.value.status_code is None


@respx.mock
async def test_non_json_body():
    respx.get(PLACES_URL).mock(return_value=Response(200, text="<html>oops</html>"))

    async with httpx.AsyncClient() as client:
        service = GeoapifyService(client, "test-key")
        with pytest.raises(GeoapifyError):
            await service.places(0.0, 0.0, radius_m=10000, categories=["tourism"], limit=20)


@respx.mock
async def test_unexpected_json_shape():
    respx.get(SEARCH_URL).mock(return_value=Response(200, json={"features": "nope"}))

    async with httpx.AsyncClient() as client:
        service = GeoapifyService(client, "test-key")
        with pytest.raises(GeoapifyError):
            await service.geocode("Paris, France")


@respx.mock
async def test_json_array_body():
    respx.get(SEARCH_URL).mock(return_value=Response(200, json=[1, 2, 3]))

    async with httpx.AsyncClient() as client:
        service = GeoapifyService(client, "test-key")
        with pytest.raises(GeoapifyError):
            await service.geocode("Paris, France")
