"""Profile API routes."""

from urllib.parse import quote

from fastapi import APIRouter, Depends, Request, Response, status

from api.dependencies import get_profile_service
from api.schemas.common import ErrorResponse
from api.schemas.profile import ProfileCreate, ProfileResponse, ProfileUpdate
from core.config import settings
from core.rate_limit import limiter
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/Profile", tags=["profiles"])


def profile_location(username: str) -> str:
    """Path of a profile, with the username percent-encoded as one segment."""
    return f"{router.prefix}/{quote(username, safe='')}"


@router.get(
    "/{username:path}",
    response_model=ProfileResponse,
    summary="Get a profile",
    responses={
        200: {"description": "Profile found"},
        404: {"model": ErrorResponse, "description": "Profile not found"},
    },
)
@limiter.limit(settings.rate_limit_read)  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    username: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Get the profile stored under a username."""
    profile = await service.get(username)
    return ProfileResponse.from_entity(profile)


@router.post(
    "",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a profile",
    responses={
        201: {"description": "Profile created successfully"},
        400: {"model": ErrorResponse, "description": "Missing or blank field"},
        409: {"model": ErrorResponse, "description": "Username already exists"},
    },
)
@limiter.limit(settings.rate_limit_write)  # type: ignore[untyped-decorator]
async def create_profile(
    request: Request,
    response: Response,
    body: ProfileCreate,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Create a new profile. Usernames must be unique."""
    profile = await service.create(body.to_entity())
    response.headers["Location"] = profile_location(profile.username)
    return ProfileResponse.from_entity(profile)


@router.put(
    "/{username:path}",
    response_model=ProfileResponse,
    summary="Update a profile",
    responses={
        200: {"description": "Profile updated successfully"},
        400: {"model": ErrorResponse, "description": "Missing or blank field"},
        404: {"model": ErrorResponse, "description": "Profile not found"},
    },
)
@limiter.limit(settings.rate_limit_write)  # type: ignore[untyped-decorator]
async def update_profile(
    request: Request,
    username: str,
    body: ProfileUpdate,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Replace the first and last name of an existing profile."""
    profile = await service.update(
        username=username,
        first_name=body.first_name,
        last_name=body.last_name,
    )
    return ProfileResponse.from_entity(profile)


@router.delete(
    "/{username:path}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a profile",
    responses={
        204: {"description": "Profile deleted successfully"},
        404: {"model": ErrorResponse, "description": "Profile not found"},
    },
)
@limiter.limit(settings.rate_limit_write)  # type: ignore[untyped-decorator]
async def delete_profile(
    request: Request,
    username: str,
    service: ProfileService = Depends(get_profile_service),
) -> None:
    """Delete a profile."""
    await service.delete(username)
    return None
