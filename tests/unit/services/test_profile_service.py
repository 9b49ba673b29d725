"""Unit tests for ProfileService."""

from unittest.mock import AsyncMock

import pytest

from core.exceptions import (
    InvalidProfileError,
    ProfileAlreadyExistsError,
    ProfileNotFoundError,
)
from domain.entities.profile import Profile
from domain.services.profile_service import ProfileService


@pytest.fixture
def service(mock_store: AsyncMock) -> ProfileService:
    return ProfileService(mock_store)


# --- get ---


class TestGet:
    @pytest.mark.asyncio
    async def test_returns_profile(
        self, service: ProfileService, mock_store: AsyncMock, profile: Profile
    ):
        mock_store.get.return_value = profile

        result = await service.get("foobar")

        assert result == profile
        mock_store.get.assert_called_once_with("foobar")

    @pytest.mark.asyncio
    async def test_raises_not_found(self, service: ProfileService):
        with pytest.raises(ProfileNotFoundError) as exc_info:
            await service.get("ghost")

        assert exc_info.value.status_code == 404
        assert exc_info.value.details == {"username": "ghost"}


# --- create ---


class TestCreate:
    @pytest.mark.asyncio
    async def test_creates_profile(
        self, service: ProfileService, mock_store: AsyncMock, profile: Profile
    ):
        result = await service.create(profile)

        assert result == profile
        mock_store.upsert.assert_called_once_with(profile)

    @pytest.mark.asyncio
    async def test_raises_conflict_when_username_taken(
        self, service: ProfileService, mock_store: AsyncMock, profile: Profile
    ):
        mock_store.get.return_value = profile

        with pytest.raises(ProfileAlreadyExistsError) as exc_info:
            await service.create(profile.with_names("Other", "Name"))

        assert exc_info.value.status_code == 409
        mock_store.upsert.assert_not_called()

    @pytest.mark.asyncio
    async def test_validates_before_existence_check(
        self, service: ProfileService, mock_store: AsyncMock
    ):
        with pytest.raises(InvalidProfileError) as exc_info:
            await service.create(Profile(username="", first_name="Foo", last_name="Bar"))

        assert exc_info.value.status_code == 400
        mock_store.get.assert_not_called()
        mock_store.upsert.assert_not_called()


# --- update ---


class TestUpdate:
    @pytest.mark.asyncio
    async def test_replaces_names(
        self, service: ProfileService, mock_store: AsyncMock, profile: Profile
    ):
        mock_store.get.return_value = profile

        result = await service.update("foobar", "b", "c")

        expected = Profile(username="foobar", first_name="b", last_name="c")
        assert result == expected
        mock_store.upsert.assert_called_once_with(expected)

    @pytest.mark.asyncio
    async def test_raises_not_found(self, service: ProfileService, mock_store: AsyncMock):
        with pytest.raises(ProfileNotFoundError):
            await service.update("ghost", "b", "c")

        mock_store.upsert.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("first_name", "last_name", "fields"),
        [
            ("", "c", ["first_name"]),
            ("b", "  ", ["last_name"]),
            (None, None, ["first_name", "last_name"]),
        ],
    )
    async def test_blank_names_rejected_even_if_profile_exists(
        self,
        service: ProfileService,
        mock_store: AsyncMock,
        profile: Profile,
        first_name,
        last_name,
        fields,
    ):
        mock_store.get.return_value = profile

        with pytest.raises(InvalidProfileError) as exc_info:
            await service.update("foobar", first_name, last_name)

        assert exc_info.value.details == {"fields": fields}
        mock_store.get.assert_not_called()
        mock_store.upsert.assert_not_called()


# --- delete ---


class TestDelete:
    @pytest.mark.asyncio
    async def test_deletes_profile(self, service: ProfileService, mock_store: AsyncMock):
        mock_store.delete.return_value = True

        await service.delete("foobar")

        mock_store.delete.assert_called_once_with("foobar")

    @pytest.mark.asyncio
    async def test_raises_not_found(self, service: ProfileService):
        with pytest.raises(ProfileNotFoundError):
            await service.delete("ghost")
