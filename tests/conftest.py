"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from pathlib import Path

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.entities.profile import Profile
from infrastructure.storage.in_memory_profile_store import InMemoryProfileStore


@pytest.fixture
def profile() -> Profile:
    """The canonical test profile."""
    return Profile(username="foobar", first_name="Foo", last_name="Bar")


@pytest.fixture
def store() -> InMemoryProfileStore:
    """A fresh, empty in-memory store."""
    return InMemoryProfileStore()


@pytest.fixture
async def client(store: InMemoryProfileStore) -> AsyncGenerator[AsyncClient, None]:
    """
    Create test client backed by the ``store`` fixture.

    Each test gets its own app and store, so profiles never leak between tests.
    """
    from api.dependencies import get_profile_service
    from domain.services.profile_service import ProfileService
    from main import create_app

    app = create_app()

    def override_get_profile_service() -> ProfileService:
        return ProfileService(store)

    app.dependency_overrides[get_profile_service] = override_get_profile_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
