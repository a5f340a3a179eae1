"""
Shared test fixtures.

The app has no infrastructure to replace, so the only fixture that matters
is the HTTP client:
- HTTP server → httpx.AsyncClient with ASGI transport (no network)
- Settings    → overridden with small limits so edge cases are cheap to hit
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.main import create_app
from api.dependencies import get_settings
from config.settings import Settings

TEST_MAX_TIME_UNIT = 100
TEST_MAX_PROCESSES = 5


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        MAX_TIME_UNIT=TEST_MAX_TIME_UNIT,
        MAX_PROCESSES=TEST_MAX_PROCESSES,
        SITE_OWNER="Test Owner",
    )


@pytest_asyncio.fixture
async def client(test_settings):
    """
    Create a test HTTP client that talks directly to the FastAPI app.

    dependency_overrides tells FastAPI: "instead of the real get_settings,
    use this one." ASGITransport means requests go directly to the app
    in-process, no HTTP server or network involved.
    """
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: test_settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
