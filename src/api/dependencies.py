"""Dependency injection factories for the API."""

from functools import lru_cache

from domain.repositories.profile_store import IProfileStore
from domain.services.profile_service import ProfileService
from infrastructure.storage.in_memory_profile_store import InMemoryProfileStore


@lru_cache
def get_profile_store() -> IProfileStore:
    """Get the process-wide profile store."""
    return InMemoryProfileStore()


@lru_cache
def get_profile_service() -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(get_profile_store())
