"""Shared fixtures."""

from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from catalog.api.deps import get_variant_service
from catalog.main import app
from catalog.services.variant_service import VariantService


@pytest.fixture
def service() -> AsyncMock:
    """Variant service double injected into the routes."""
    return AsyncMock(spec=VariantService)


@pytest_asyncio.fixture
async def client(service: AsyncMock) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app with the service dependency overridden."""
    app.dependency_overrides[get_variant_service] = lambda: service
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
