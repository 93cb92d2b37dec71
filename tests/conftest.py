import httpx
import pytest
from httpx import ASGITransport

from app.config import Settings
from app.main import create_app, lifespan


@pytest.fixture
def settings():
    return Settings(_env_file=None, geoapify_api_key="test-key", random_seed=1234)


@pytest.fixture
async def client(settings):
    app = create_app(settings)

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
