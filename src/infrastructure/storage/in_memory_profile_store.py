"""In-memory implementation of the profile store."""

import threading

from core.exceptions import InvalidProfileError
from domain.entities.profile import Profile


class InMemoryProfileStore:
    """Dictionary-backed profile store living for the process lifetime.

    Every operation takes the same lock, so readers never see a half-applied
    write regardless of whether callers share an event loop or run in
    separate threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._profiles: dict[str, Profile] = {}

    async def get(self, username: str) -> Profile | None:
        with self._lock:
            return self._profiles.get(username)

    async def upsert(self, profile: Profile) -> None:
        if profile is None:
            raise InvalidProfileError(["profile"])
        blank = profile.blank_fields()
        if blank:
            raise InvalidProfileError(blank)
        with self._lock:
            self._profiles[profile.username] = profile

    async def delete(self, username: str) -> bool:
        with self._lock:
            return self._profiles.pop(username, None) is not None
