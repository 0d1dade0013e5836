"""
Shared test configuration and fixtures.
"""

import pytest

from stackexchange_oauth.infrastructure.http_client import reset_default_client
from stackexchange_oauth.oauth.config import get_settings
from stackexchange_oauth.oauth.registry import clear_providers
from stackexchange_oauth.providers.stackexchange.provider import StackExchangeProvider


@pytest.fixture(autouse=True)
def reset_global_state():
    """
    Reset process-wide state after each test.

    Clears the provider registry, the default HTTP client and the cached
    settings so tests cannot leak configuration into each other.
    """
    yield
    clear_providers()
    reset_default_client()
    get_settings.cache_clear()


@pytest.fixture
def provider():
    """Provider with fixed test credentials and no injected client."""
    return StackExchangeProvider("test-key", "test-secret", "test-access-key", "/foo")


@pytest.fixture
def sample_profile_body():
    """Sample /me response from the Stack Exchange API."""
    return {
        "items": [
            {
                "user_id": 42,
                "email": "a@b.com",
                "about_me": "bio",
                "display_name": "Ada",
                "first_name": "Ada",
                "last_name": "L",
                "link": "http://x",
                "profile_image": "http://p",
                "location": "NY",
            }
        ]
    }
