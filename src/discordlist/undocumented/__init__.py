"""
Undocumented discordlist.gg endpoints.

Bot and user lookup, command registration and search. These are not part
of the service's published API and may change without notice, so they are
only available through ``UndocumentedClient``.
"""

from .bitflags import BitFlags
from .client import UndocumentedClient
from .models import Bot, Command, SearchHit, SearchResults, User
from .search import (
    SearchFeatures,
    SearchFilter,
    SearchFilterMode,
    SearchOptions,
    SearchOrder,
    SearchSort,
)

__all__ = [
    "UndocumentedClient",
    "BitFlags",
    "Bot",
    "Command",
    "User",
    "SearchHit",
    "SearchResults",
    "SearchFeatures",
    "SearchFilter",
    "SearchFilterMode",
    "SearchOptions",
    "SearchOrder",
    "SearchSort",
]
