"""
Stack Exchange login provider.

Implements the AuthProvider capability set: builds the authorization URL,
fetches the logged-in user's profile from the Stack Exchange API and maps
it to a CanonicalUser.
"""

import hashlib
import hmac
import logging
from typing import Any
from urllib.parse import quote_plus

import httpx

from stackexchange_oauth.core.domain import CanonicalUser
from stackexchange_oauth.core.exceptions import (
    DecodeError,
    IncompleteSessionError,
    ProviderNotConfiguredError,
    StackExchangeAuthError,
    TransportError,
    UnexpectedStatusError,
    UnsupportedOperationError,
)
from stackexchange_oauth.infrastructure.http_client import client_with_fallback
from stackexchange_oauth.oauth.config import StackExchangeSettings, get_settings
from stackexchange_oauth.providers.stackexchange.config import (
    PROFILE_ENDPOINT,
    build_config,
)
from stackexchange_oauth.providers.stackexchange.profile import map_profile
from stackexchange_oauth.providers.stackexchange.session import StackExchangeSession


logger = logging.getLogger(__name__)


class StackExchangeProvider:
    """
    OAuth2 login provider for Stack Exchange.

    Created once at startup and safe to share between threads; only
    set_name() and the http_client attribute change after construction.
    """

    def __init__(
        self,
        client_key: str,
        secret: str,
        client_access_key: str,
        callback_url: str,
        *scopes: str,
        http_client: httpx.Client | None = None,
    ):
        self.client_key = client_key
        self.secret = secret
        self.client_access_key = client_access_key
        self.callback_url = callback_url
        self.http_client = http_client
        self._provider_name = "stackexchange"
        self.config = build_config(client_key, secret, callback_url, scopes)

    @classmethod
    def from_settings(
        cls,
        settings: StackExchangeSettings | None = None,
        http_client: httpx.Client | None = None,
    ) -> "StackExchangeProvider":
        """
        Create a provider from environment settings.

        Raises:
            ProviderNotConfiguredError: Key, secret or access key is missing
        """
        if settings is None:
            settings = get_settings()
        if not settings.is_configured():
            logger.warning("Stack Exchange login not configured (missing credentials)")
            raise ProviderNotConfiguredError(
                "STACKEXCHANGE_KEY, STACKEXCHANGE_SECRET and "
                "STACKEXCHANGE_ACCESS_KEY must all be set"
            )
        return cls(
            settings.client_key or "",
            settings.secret or "",
            settings.client_access_key or "",
            settings.callback_url,
            *settings.scopes,
            http_client=http_client,
        )

    @property
    def name(self) -> str:
        """Name used to retrieve this provider from a registry."""
        return self._provider_name

    def set_name(self, name: str) -> None:
        """Rename the provider (needed for multiple providers of one type)."""
        self._provider_name = name

    def client(self) -> httpx.Client:
        """HTTP client for API calls: the injected one or the default."""
        return client_with_fallback(self.http_client)

    def begin_auth(self, state: str) -> StackExchangeSession:
        """Start a login; the session holds the Stack Exchange authorization URL."""
        logger.debug(f"Building authorization URL for {self.name}")
        return StackExchangeSession(auth_url=self.config.auth_code_url(state))

    def unmarshal_session(self, data: str | bytes) -> StackExchangeSession:
        """Restore a session stored with StackExchangeSession.marshal()."""
        return StackExchangeSession.unmarshal(data)

    def fetch_user(self, session: StackExchangeSession) -> CanonicalUser:
        """
        Fetch the logged-in user's profile.

        Args:
            session: Session holding an access token

        Returns:
            CanonicalUser with profile fields and the raw response

        Raises:
            IncompleteSessionError: Session has no access token (no request made)
            TransportError: Request failed at the network level
            UnexpectedStatusError: Response status was not 200
            DecodeError: Response body was not a JSON object
            EmptyProfileError: Response contained no profile items
        """
        user = CanonicalUser(
            provider=self.name,
            access_token=session.access_token,
            expires_at=session.expires_at,
        )

        if not user.access_token:
            raise IncompleteSessionError(
                f"{self.name} cannot get user information without accessToken",
                user=user,
            )

        # Parameter order matters to the upstream signature check.
        url = (
            f"{PROFILE_ENDPOINT}"
            f"&access_token={quote_plus(session.access_token)}"
            f"&key={self.client_access_key}"
            f"&appsecret_proof={appsecret_proof(self.secret, session.access_token)}"
        )

        logger.debug(f"Fetching user profile from {self.name}")
        try:
            response = self.client().get(url)
        except httpx.RequestError as e:
            raise TransportError(
                f"Network error fetching {self.name} user information: {e}", user=user
            ) from e

        if response.status_code != httpx.codes.OK:
            raise UnexpectedStatusError(self.name, response.status_code, user=user)

        try:
            raw_data = response.json()
        except ValueError as e:
            raise DecodeError(
                f"{self.name} returned invalid JSON: {e}", user=user
            ) from e
        if not isinstance(raw_data, dict):
            raise DecodeError(f"{self.name} returned a non-object JSON body", user=user)
        user.raw_data = raw_data

        try:
            fields = map_profile(response.content)
        except StackExchangeAuthError as e:
            e.user = user
            raise

        return user.model_copy(update=fields.model_dump())

    def refresh_token(self, refresh_token: str) -> dict[str, Any]:
        """Stack Exchange does not issue refresh tokens."""
        raise UnsupportedOperationError(
            f"Refresh token is not provided by {self.name}"
        )

    def refresh_token_available(self) -> bool:
        """Stack Exchange does not issue refresh tokens."""
        return False


def appsecret_proof(secret: str, access_token: str) -> str:
    """Hex HMAC-SHA256 of the access token keyed by the client secret."""
    return hmac.new(
        secret.encode(), access_token.encode(), hashlib.sha256
    ).hexdigest()
