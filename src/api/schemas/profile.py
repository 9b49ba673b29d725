"""Pydantic schemas for Profile API."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from domain.entities.profile import Profile, is_blank


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel)


class ProfileUpdate(_CamelModel):
    """Schema for replacing the names of a Profile."""

    first_name: str = Field(..., description="Given name, must not be blank")
    last_name: str = Field(..., description="Family name, must not be blank")

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if is_blank(v):
            raise ValueError("must not be blank")
        return v


class ProfileCreate(ProfileUpdate):
    """Schema for creating a Profile."""

    username: str = Field(..., description="Unique key of the profile")

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        if is_blank(v):
            raise ValueError("must not be blank")
        return v

    def to_entity(self) -> Profile:
        return Profile(
            username=self.username,
            first_name=self.first_name,
            last_name=self.last_name,
        )


class ProfileResponse(_CamelModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "username": "foobar",
                "firstName": "Foo",
                "lastName": "Bar",
            }
        },
    )

    username: str
    first_name: str
    last_name: str

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileResponse":
        return cls(
            username=profile.username,
            first_name=profile.first_name,
            last_name=profile.last_name,
        )
