"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_PROFILE = "INVALID_PROFILE"

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"

    # Conflict errors (409)
    PROFILE_ALREADY_EXISTS = "PROFILE_ALREADY_EXISTS"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class InvalidProfileError(AppException):
    """Profile is missing a required field or has a blank one."""

    def __init__(self, fields: list[str]) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_PROFILE,
            message=f"Invalid profile, blank or missing: {', '.join(fields)}",
            status_code=400,
            details={"fields": fields},
        )


class ProfileNotFoundError(AppException):
    """Profile not found."""

    def __init__(self, username: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"Profile not found: {username}",
            status_code=404,
            details={"username": username},
        )


class ProfileAlreadyExistsError(AppException):
    """A profile with this username is already stored."""

    def __init__(self, username: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_ALREADY_EXISTS,
            message=f"Profile already exists: {username}",
            status_code=409,
            details={"username": username},
        )


class RateLimitExceededError(AppException):
    """Client exceeded the request rate for a route."""

    def __init__(self, limit: str) -> None:
        super().__init__(
            error_code=ErrorCode.RATE_LIMIT_EXCEEDED,
            message=f"Rate limit exceeded: {limit}",
            status_code=429,
            details={"limit": limit},
        )
