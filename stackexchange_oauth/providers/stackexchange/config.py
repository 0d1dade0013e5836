"""
Stack Exchange OAuth2 endpoints and client configuration.
"""

from collections.abc import Iterable

from stackexchange_oauth.oauth.client import OAuth2Config


AUTH_URL = "https://stackexchange.com/oauth"
TOKEN_URL = "https://stackexchange.com/oauth/access_token/json"
PROFILE_ENDPOINT = "https://api.stackexchange.com/me?site=stackoverflow"

# Always requested; the profile response has no email without it.
DEFAULT_SCOPE = "private_info"


def build_config(
    client_id: str,
    client_secret: str,
    redirect_url: str,
    scopes: Iterable[str] = (),
) -> OAuth2Config:
    """
    Derive the OAuth2 client configuration for a Stack Exchange app.

    The default scope comes first and appears exactly once. Other scopes are
    appended in the order given; repeats among them are kept as-is.

    Args:
        client_id: Stack Exchange client ID
        client_secret: Stack Exchange client secret
        redirect_url: OAuth callback URL
        scopes: Additional scopes requested by the caller

    Returns:
        OAuth2Config with the Stack Exchange endpoints
    """
    requested = [DEFAULT_SCOPE]
    requested.extend(scope for scope in scopes if scope != DEFAULT_SCOPE)

    return OAuth2Config(
        client_id=client_id,
        client_secret=client_secret,
        redirect_url=redirect_url,
        auth_endpoint=AUTH_URL,
        token_endpoint=TOKEN_URL,
        scopes=tuple(requested),
    )
