"""
Exceptions raised by the Stack Exchange login integration.

Every failure is raised to the caller; nothing here is retried or logged
internally. Errors raised while fetching a user carry the partially
populated user on the ``user`` attribute.
"""

from typing import Any


class StackExchangeAuthError(Exception):
    """Base exception for all integration errors."""

    def __init__(self, message: str, *, user: Any = None):
        super().__init__(message)
        self.user = user


class IncompleteSessionError(StackExchangeAuthError):
    """
    Raised when a session is missing data required for the operation.

    Typically the access token has not been set yet, so no profile request
    is attempted.
    """

    pass


class TransportError(StackExchangeAuthError):
    """Raised when the HTTP request could not be completed."""

    pass


class UnexpectedStatusError(StackExchangeAuthError):
    """Raised when the provider answers with a non-200 status."""

    def __init__(
        self,
        provider: str,
        status_code: int,
        *,
        action: str = "fetch user information",
        endpoint: str | None = None,
        user: Any = None,
    ):
        super().__init__(
            f"{provider} responded with a {status_code} trying to {action}", user=user
        )
        self.provider = provider
        self.status_code = status_code
        self.endpoint = endpoint


class DecodeError(StackExchangeAuthError):
    """Raised when a response body or serialized session is malformed."""

    pass


class EmptyProfileError(StackExchangeAuthError):
    """Raised when the profile response contains no items."""

    pass


class UnsupportedOperationError(StackExchangeAuthError):
    """Raised for operations the provider does not support (token refresh)."""

    pass


class TokenExchangeError(StackExchangeAuthError):
    """Raised when an authorization code cannot be exchanged for a token."""

    pass


class UnknownProviderError(StackExchangeAuthError):
    """Raised when looking up a provider that was never registered."""

    pass


class ProviderNotConfiguredError(StackExchangeAuthError):
    """Raised when building a provider from settings without credentials."""

    pass
