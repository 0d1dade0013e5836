"""
Stack Exchange profile response mapping.

The /me endpoint wraps the profile in an ``items`` list; only the first
item describes the logged-in user.
"""

from pydantic import BaseModel, Field, StrictInt, ValidationError, field_validator

from stackexchange_oauth.core.exceptions import DecodeError, EmptyProfileError


class StackExchangeProfile(BaseModel):
    """One entry of the ``items`` list, restricted to the fields we use."""

    user_id: StrictInt = 0
    email: str = ""
    about_me: str = ""
    display_name: str = ""
    first_name: str = ""
    last_name: str = ""
    link: str = ""
    profile_image: str = ""
    location: str = ""

    @field_validator(
        "email",
        "about_me",
        "display_name",
        "first_name",
        "last_name",
        "link",
        "profile_image",
        "location",
        mode="before",
    )
    @classmethod
    def null_to_empty(cls, v):
        """Treat explicit nulls like absent fields."""
        if v is None:
            return ""
        return v

    @field_validator("user_id", mode="before")
    @classmethod
    def null_to_zero(cls, v):
        if v is None:
            return 0
        return v


class ProfileResponse(BaseModel):
    """Envelope returned by the Stack Exchange API."""

    items: list[StackExchangeProfile] = Field(default_factory=list)

    @field_validator("items", mode="before")
    @classmethod
    def null_items(cls, v):
        """A null list is empty; null entries decode to all-default profiles."""
        if v is None:
            return []
        if isinstance(v, list):
            return [{} if item is None else item for item in v]
        return v


class ProfileFields(BaseModel):
    """Profile-derived fields of a CanonicalUser."""

    name: str = ""
    first_name: str = ""
    last_name: str = ""
    nick_name: str = ""
    email: str = ""
    description: str = ""
    avatar_url: str = ""
    user_id: str = ""
    location: str = ""


def map_profile(data: bytes | str) -> ProfileFields:
    """
    Map a raw /me response body to canonical profile fields.

    Args:
        data: JSON response body

    Returns:
        ProfileFields built from the first item

    Raises:
        DecodeError: Body is not valid JSON or has unexpected types
        EmptyProfileError: Response contains no items
    """
    try:
        response = ProfileResponse.model_validate_json(data)
    except ValidationError as e:
        raise DecodeError(f"Failed to parse profile response: {e}") from e

    if not response.items:
        raise EmptyProfileError("Profile response contains no items")

    profile = response.items[0]
    return ProfileFields(
        name=profile.display_name,
        first_name=profile.first_name,
        last_name=profile.last_name,
        nick_name=profile.display_name,
        email=profile.email,
        description=profile.about_me,
        avatar_url=profile.profile_image,
        user_id=str(profile.user_id),
        location=profile.location,
    )
