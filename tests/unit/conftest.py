"""Shared fixtures for unit tests."""

from unittest.mock import AsyncMock

import pytest


@pytest.fixture
def mock_store() -> AsyncMock:
    """Store double with every lookup missing by default."""
    store = AsyncMock()
    store.get.return_value = None
    store.delete.return_value = False
    return store
