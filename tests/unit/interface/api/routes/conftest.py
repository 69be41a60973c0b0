"""Fixtures for API route tests."""

import httpx
import pytest
import pytest_asyncio

from gallery.interface.api.app import create_app
from tests.di import build_test_container


@pytest_asyncio.fixture
async def container():
    """All-mock container shared by the app and the test for seeding."""
    container = build_test_container()
    yield container
    await container.close()


@pytest_asyncio.fixture
async def api_client(container):
    """HTTP client bound to the ASGI app."""
    app = create_app(container)
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://testserver"
    ) as client:
        yield client


@pytest.fixture
def fallback_disabled(monkeypatch):
    """Turn off the profile fallback before settings are first loaded."""
    monkeypatch.setenv("IDENTITY__ALLOW_PROFILE_FALLBACK", "false")
