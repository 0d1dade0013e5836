"""
Stack Exchange login session.

Serialized as JSON using the AuthURL/AccessToken/ExpiresAt field names,
so sessions stored by other implementations of this provider still load.
"""

import logging
from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from stackexchange_oauth.core.exceptions import (
    DecodeError,
    IncompleteSessionError,
    TokenExchangeError,
)

if TYPE_CHECKING:
    from stackexchange_oauth.providers.stackexchange.provider import (
        StackExchangeProvider,
    )


logger = logging.getLogger(__name__)


class StackExchangeSession(BaseModel):
    """
    Per-login state.

    Created by StackExchangeProvider.begin_auth() with only auth_url set.
    The access token and expiry are filled in once the code exchange
    completes, either through authorize() or by the caller.
    """

    auth_url: str = Field(default="", alias="AuthURL")
    access_token: str = Field(default="", alias="AccessToken")
    expires_at: datetime | None = Field(default=None, alias="ExpiresAt")

    model_config = ConfigDict(populate_by_name=True)

    def get_auth_url(self) -> str:
        """
        Return the authorization URL for this login.

        Raises:
            IncompleteSessionError: If begin_auth() never set one
        """
        if not self.auth_url:
            raise IncompleteSessionError("an AuthURL has not been set")
        return self.auth_url

    def authorize(
        self, provider: "StackExchangeProvider", params: Mapping[str, str]
    ) -> str:
        """
        Exchange the callback code for an access token.

        Args:
            provider: Provider that started this login
            params: Callback query parameters (must contain ``code``)

        Returns:
            The new access token

        Raises:
            TokenExchangeError: Missing code or no token in the response
            DecodeError: Token expiry is not a number
        """
        code = params.get("code")
        if not code:
            raise TokenExchangeError(
                f"{provider.name} callback did not include an authorization code"
            )

        token = provider.config.exchange(code, provider_name=provider.name)
        access_token = token.get("access_token")
        if not access_token:
            raise TokenExchangeError("Invalid token received from provider")

        expires_at = _token_expiry(token)
        self.access_token = access_token
        self.expires_at = expires_at
        logger.debug(f"Authorized {provider.name} session")
        return access_token

    def marshal(self) -> str:
        """Serialize the session to JSON."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def unmarshal(cls, data: str | bytes) -> "StackExchangeSession":
        """
        Restore a session from marshal() output.

        Raises:
            DecodeError: If ``data`` is not a valid serialized session
        """
        try:
            return cls.model_validate_json(data)
        except ValidationError as e:
            raise DecodeError(f"Invalid session data: {e}") from e

    def __str__(self) -> str:
        return self.marshal()


def _token_expiry(token: Mapping[str, Any]) -> datetime | None:
    # Stack Exchange reports lifetime as "expires"; authlib adds "expires_at"
    # when the response uses the standard "expires_in".
    try:
        if token.get("expires_at"):
            return datetime.fromtimestamp(int(token["expires_at"]), UTC)
        lifetime = token.get("expires") or token.get("expires_in")
        if lifetime:
            return datetime.now(UTC) + timedelta(seconds=int(lifetime))
    except (TypeError, ValueError, OverflowError) as e:
        raise DecodeError(f"Invalid token expiry: {e}") from e
    return None
