"""Profile service layer with business logic."""

import structlog

from core.exceptions import (
    InvalidProfileError,
    ProfileAlreadyExistsError,
    ProfileNotFoundError,
)
from domain.entities.profile import Profile, is_blank
from domain.repositories.profile_store import IProfileStore

logger = structlog.get_logger()


class ProfileService:
    """Service layer deciding conflict and not-found outcomes for profiles.

    Shape is validated before any store lookup, so an invalid request never
    reaches the existence check.
    """

    def __init__(self, store: IProfileStore) -> None:
        self._store = store

    async def get(self, username: str) -> Profile:
        """Get a profile by username."""
        profile = await self._store.get(username)
        if profile is None:
            raise ProfileNotFoundError(username)
        return profile

    async def create(self, profile: Profile) -> Profile:
        """Store a new profile. Fails if the username is already taken."""
        blank = profile.blank_fields()
        if blank:
            raise InvalidProfileError(blank)

        if await self._store.get(profile.username) is not None:
            raise ProfileAlreadyExistsError(profile.username)

        await self._store.upsert(profile)
        logger.info("profile_created", username=profile.username)
        return profile

    async def update(self, username: str, first_name: str, last_name: str) -> Profile:
        """Replace the names of an existing profile."""
        blank = [
            name
            for name, value in (("first_name", first_name), ("last_name", last_name))
            if is_blank(value)
        ]
        if blank:
            raise InvalidProfileError(blank)

        existing = await self._store.get(username)
        if existing is None:
            raise ProfileNotFoundError(username)

        updated = existing.with_names(first_name, last_name)
        await self._store.upsert(updated)
        logger.info("profile_updated", username=username)
        return updated

    async def delete(self, username: str) -> None:
        """Delete an existing profile."""
        if not await self._store.delete(username):
            raise ProfileNotFoundError(username)
        logger.info("profile_deleted", username=username)
