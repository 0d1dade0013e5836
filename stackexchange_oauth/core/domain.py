"""
Canonical user model shared by all login providers.

Providers map their proprietary profile responses into this shape so the
host application can treat every provider the same way.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class CanonicalUser(BaseModel):
    """
    Provider-agnostic user profile.

    Produced fresh on every profile fetch and never persisted here.
    """

    provider: str = Field(description="Name of the provider that produced the user")
    access_token: str = Field(default="", description="OAuth2 access token")
    expires_at: datetime | None = Field(
        default=None, description="Access token expiry, if known"
    )
    name: str = ""
    first_name: str = ""
    last_name: str = ""
    nick_name: str = ""
    email: str = ""
    description: str = ""
    avatar_url: str = ""
    user_id: str = Field(default="", description="Provider user ID as a string")
    location: str = ""
    raw_data: dict[str, Any] = Field(
        default_factory=dict, description="Decoded profile response"
    )
