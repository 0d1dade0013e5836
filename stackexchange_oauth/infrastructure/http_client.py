"""
Process-wide default HTTP client.

Providers use an injected httpx.Client when one is given and fall back to
this shared client otherwise. The default is created lazily on first use
and can be replaced or reset explicitly (useful for tests).
"""

import logging
import threading

import httpx


logger = logging.getLogger(__name__)

_default_client: httpx.Client | None = None
_lock = threading.Lock()


def get_default_client() -> httpx.Client:
    """
    Get the default HTTP client singleton.

    Creates the client on first access.
    """
    global _default_client
    with _lock:
        if _default_client is None:
            _default_client = httpx.Client()
            logger.debug("Created default HTTP client")
        return _default_client


def set_default_client(client: httpx.Client) -> None:
    """Use the given client for every provider without its own client."""
    global _default_client
    with _lock:
        _default_client = client


def reset_default_client() -> None:
    """
    Close and forget the default client.

    The next call to get_default_client() creates a fresh one.
    """
    global _default_client
    with _lock:
        if _default_client is not None:
            _default_client.close()
        _default_client = None


def client_with_fallback(client: httpx.Client | None) -> httpx.Client:
    """Return ``client`` if given, else the default client."""
    if client is not None:
        return client
    return get_default_client()
