"""Fixtures for API unit tests: AsyncClient over the ASGI app."""

import pytest
from httpx import ASGITransport, AsyncClient

from app.config.settings import AppSettings, get_settings
from app.main import app


@pytest.fixture
def small_batch_settings():
    """App with max_batch_size overridden to 2."""
    app.dependency_overrides[get_settings] = lambda: AppSettings(max_batch_size=2)
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client():
    """Async HTTP client for testing."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
