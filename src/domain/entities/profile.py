"""Profile domain entity."""

from dataclasses import dataclass, replace


def is_blank(value: str | None) -> bool:
    """True for None, empty or whitespace-only strings."""
    return value is None or not value.strip()


@dataclass(frozen=True, slots=True)
class Profile:
    """Domain entity for a user profile, keyed by username."""

    username: str
    first_name: str
    last_name: str

    def blank_fields(self) -> list[str]:
        """Names of required fields that are missing or blank."""
        return [
            name
            for name in ("username", "first_name", "last_name")
            if is_blank(getattr(self, name))
        ]

    def with_names(self, first_name: str, last_name: str) -> "Profile":
        """Return a copy carrying new names under the same username."""
        return replace(self, first_name=first_name, last_name=last_name)
