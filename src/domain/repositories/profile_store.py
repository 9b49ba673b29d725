"""Profile store protocol."""

from typing import Protocol

from domain.entities.profile import Profile


class IProfileStore(Protocol):
    """Storage interface for Profile entities, keyed by username."""

    async def get(self, username: str) -> Profile | None:
        """Get a profile by username, or None if absent."""
        ...

    async def upsert(self, profile: Profile) -> None:
        """Insert a profile or replace the one with the same username."""
        ...

    async def delete(self, username: str) -> bool:
        """Delete a profile and return whether one was removed."""
        ...
