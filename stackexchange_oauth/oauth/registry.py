"""
Provider registry.

Keeps the login providers a host application has enabled, keyed by the
name each provider reports. Registering two instances of the same provider
type requires renaming one of them with set_name() first.
"""

import logging

from stackexchange_oauth.core.exceptions import UnknownProviderError
from stackexchange_oauth.core.ports import AuthProvider


logger = logging.getLogger(__name__)

_providers: dict[str, AuthProvider] = {}


def use_providers(*providers: AuthProvider) -> None:
    """
    Register providers under their current names.

    A provider registered under an existing name replaces the earlier one.
    """
    for provider in providers:
        _providers[provider.name] = provider
        logger.info(f"Registered login provider: {provider.name}")


def get_provider(name: str) -> AuthProvider:
    """
    Look up a registered provider.

    Raises:
        UnknownProviderError: If no provider is registered under ``name``
    """
    provider = _providers.get(name)
    if provider is None:
        raise UnknownProviderError(f"no provider for {name} exists")
    return provider


def get_providers() -> dict[str, AuthProvider]:
    """Return a copy of all registered providers."""
    return dict(_providers)


def clear_providers() -> None:
    """
    Remove all registered providers.

    Useful for testing with different configurations.
    """
    _providers.clear()
