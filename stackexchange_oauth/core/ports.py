"""
Port definitions (interfaces) for login providers.

A host application keeps several providers in a registry and talks to them
only through these protocols. Concrete providers implement them
structurally; no base class is required.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from stackexchange_oauth.core.domain import CanonicalUser


@runtime_checkable
class AuthSession(Protocol):
    """Per-login state handed back and forth between the host and a provider."""

    def get_auth_url(self) -> str:
        """Return the URL the user should be redirected to."""
        ...

    def authorize(self, provider: "AuthProvider", params: Mapping[str, str]) -> str:
        """Exchange the callback parameters for an access token."""
        ...

    def marshal(self) -> str:
        """Serialize the session for storage between requests."""
        ...


@runtime_checkable
class AuthProvider(Protocol):
    """
    Capability set expected by a multi-provider registry.

    Implemented by each login provider (e.g. StackExchangeProvider).
    """

    @property
    def name(self) -> str:
        """Name the provider is registered under."""
        ...

    def set_name(self, name: str) -> None:
        """Rename the provider (needed for multiple instances of one type)."""
        ...

    def begin_auth(self, state: str) -> AuthSession:
        """Start a login and return a session holding the authorization URL."""
        ...

    def unmarshal_session(self, data: str) -> AuthSession:
        """Restore a session produced by ``AuthSession.marshal``."""
        ...

    def fetch_user(self, session: AuthSession) -> CanonicalUser:
        """Fetch and normalize the profile of the logged-in user."""
        ...

    def refresh_token(self, refresh_token: str) -> dict[str, Any]:
        """Obtain a new token from a refresh token."""
        ...

    def refresh_token_available(self) -> bool:
        """Whether ``refresh_token`` is supported."""
        ...
