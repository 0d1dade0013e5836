"""
OAuth2 client configuration.

Thin wrapper over authlib: renders authorization-code request URLs and
exchanges codes for tokens. Providers derive one OAuth2Config at
construction and never mutate it.
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx
from authlib.integrations.base_client import OAuthError
from authlib.integrations.httpx_client import OAuth2Client
from authlib.oauth2.rfc6749.parameters import prepare_grant_uri

from stackexchange_oauth.core.exceptions import (
    DecodeError,
    TokenExchangeError,
    TransportError,
    UnexpectedStatusError,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OAuth2Config:
    """OAuth2 client credentials, endpoints and requested scopes."""

    client_id: str
    client_secret: str
    redirect_url: str
    auth_endpoint: str
    token_endpoint: str
    scopes: tuple[str, ...] = ()

    def auth_code_url(self, state: str) -> str:
        """
        Build the authorization-code request URL.

        Args:
            state: Anti-CSRF value echoed back on the callback

        Returns:
            URL to redirect the user to
        """
        return prepare_grant_uri(
            self.auth_endpoint,
            self.client_id,
            "code",
            redirect_uri=self.redirect_url,
            scope=list(self.scopes),
            state=state,
        )

    def exchange(self, code: str, provider_name: str = "provider") -> dict[str, Any]:
        """
        Exchange an authorization code for a token.

        Args:
            code: Code received on the OAuth callback
            provider_name: Provider name used in error messages

        Returns:
            Token response (access_token and, if sent, expiry fields)

        Raises:
            TransportError: Network failure
            UnexpectedStatusError: Error status without an OAuth error body
            TokenExchangeError: Token endpoint returned an OAuth error
            DecodeError: Successful response was not JSON
        """
        logger.debug(f"Exchanging authorization code at {self.token_endpoint}")
        try:
            with OAuth2Client(
                client_id=self.client_id,
                client_secret=self.client_secret,
                redirect_uri=self.redirect_url,
                token_endpoint_auth_method="client_secret_post",
            ) as client:
                client.register_compliance_hook(
                    "access_token_response", _raise_for_non_json_error
                )
                token = client.fetch_token(self.token_endpoint, code=code)
        except OAuthError as e:
            raise TokenExchangeError(
                f"{provider_name} token exchange failed: {e}"
            ) from e
        except httpx.HTTPStatusError as e:
            raise UnexpectedStatusError(
                provider_name,
                e.response.status_code,
                action="exchange the authorization code",
                endpoint=self.token_endpoint,
            ) from e
        except httpx.RequestError as e:
            raise TransportError(
                f"Network error during {provider_name} token exchange: {e}"
            ) from e
        except ValueError as e:
            raise DecodeError(f"Invalid {provider_name} token response: {e}") from e

        return dict(token)


def _raise_for_non_json_error(response: httpx.Response) -> httpx.Response:
    # OAuth error bodies (JSON with "error") are left for authlib to raise.
    if response.is_error:
        try:
            response.json()
        except ValueError:
            response.raise_for_status()
    return response
