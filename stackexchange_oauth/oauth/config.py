"""
Stack Exchange login settings.

Loaded from environment variables. A provider can be built directly from
these settings with StackExchangeProvider.from_settings().
"""

import os
import re
from dataclasses import dataclass, field
from functools import lru_cache


@dataclass
class StackExchangeSettings:
    """
    Stack Exchange application credentials.

    The client access key ("key" in the Stack Exchange app settings) is
    distinct from the client secret and is sent with every API request.
    """

    client_key: str | None
    secret: str | None
    client_access_key: str | None
    callback_url: str = ""
    scopes: list[str] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> "StackExchangeSettings":
        """Load settings from environment variables."""
        return cls(
            client_key=os.getenv("STACKEXCHANGE_KEY"),
            secret=os.getenv("STACKEXCHANGE_SECRET"),
            client_access_key=os.getenv("STACKEXCHANGE_ACCESS_KEY"),
            callback_url=os.getenv("STACKEXCHANGE_CALLBACK_URL", ""),
            scopes=parse_scopes(os.getenv("STACKEXCHANGE_SCOPES", "")),
        )

    def is_configured(self) -> bool:
        """Check if all credentials needed for a login are present."""
        return bool(self.client_key and self.secret and self.client_access_key)


def parse_scopes(value: str) -> list[str]:
    """Split a comma or whitespace separated scope list."""
    return [scope for scope in re.split(r"[,\s]+", value) if scope]


@lru_cache()
def get_settings() -> StackExchangeSettings:
    """Get settings singleton."""
    return StackExchangeSettings.from_env()
