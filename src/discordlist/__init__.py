"""
discordlist

Async client for the discordlist.gg bot listing API. The documented surface
lives here; the undocumented endpoints are an opt-in extension in
``discordlist.undocumented``.
"""

__version__ = "0.1.0"
__repository__ = "https://github.com/discordlist/discordlist-py"

from .client import DiscordlistClient
from .exceptions import (
    ApiError,
    DecodeError,
    DiscordlistError,
    RequestTimeoutError,
    TransportError,
    TransportInitError,
)

__all__ = [
    "__version__",
    "DiscordlistClient",
    "DiscordlistError",
    "TransportInitError",
    "TransportError",
    "RequestTimeoutError",
    "ApiError",
    "DecodeError",
]
