"""
Search query builder.

SearchOptions and SearchFilter are frozen values. Each ``with_*`` call
returns a new, validated copy with one field replaced, so a base query can
be shared and branched freely.
"""

from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .bitflags import BitFlags, flags_annotation


class SearchFeatures(BitFlags):
    """Listing features a search can be filtered by."""

    PREFIX = 1 << 0
    LANGUAGE = 1 << 1
    COMMANDS = 1 << 2
    DASHBOARD = 1 << 3
    SLASH_COMMANDS = 1 << 4
    PAID_FEATURES = 1 << 5
    DOCUMENTATION = 1 << 6
    INTERACTIVE_BUTTONS = 1 << 7


SearchFeaturesField = flags_annotation(SearchFeatures)


class SearchSort(str, Enum):
    RELEVANCY = "relevancy"
    VOTES = "votes"
    AGE = "age"
    TRENDING = "trending"
    POPULARITY = "popularity"
    PREMIUM = "premium"


class SearchOrder(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


class SearchFilterMode(str, Enum):
    """How multiple tags are combined."""

    UNION = "union"
    INTERSECTION = "intersection"


class _SearchValue(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def _replace(self, **changes: Any):
        values = {name: getattr(self, name) for name in type(self).model_fields}
        values.update(changes)
        return type(self)(**values)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class SearchFilter(_SearchValue):
    tags: Tuple[str, ...] = ()
    features: SearchFeaturesField = Field(default_factory=SearchFeatures.empty)
    premium: bool = False
    filter_mode: SearchFilterMode = Field(
        default=SearchFilterMode.INTERSECTION, alias="filterMode"
    )

    def with_tags(self, tags: Iterable[str]) -> "SearchFilter":
        return self._replace(tags=tuple(tags))

    def with_features(self, features: SearchFeatures) -> "SearchFilter":
        return self._replace(features=features)

    def with_premium(self, premium: bool) -> "SearchFilter":
        return self._replace(premium=premium)

    def with_filter_mode(self, filter_mode: SearchFilterMode) -> "SearchFilter":
        return self._replace(filter_mode=filter_mode)


class SearchOptions(_SearchValue):
    """
    Parameters of a bot search.

    ``query`` stays unset until the search is sent; the client substitutes
    the wildcard ``"*"`` on its own copy. ``limit`` and ``offset`` are not
    range-checked here, the service rejects values it does not accept.
    """

    query: Optional[str] = None
    limit: int = 21
    offset: int = 0
    filter: SearchFilter = Field(default_factory=SearchFilter)
    sort: SearchSort = SearchSort.TRENDING
    order: SearchOrder = SearchOrder.DESCENDING

    def with_query(self, query: str) -> "SearchOptions":
        return self._replace(query=query)

    def with_limit(self, limit: int) -> "SearchOptions":
        return self._replace(limit=limit)

    def with_offset(self, offset: int) -> "SearchOptions":
        return self._replace(offset=offset)

    def with_filter(self, filter: SearchFilter) -> "SearchOptions":
        return self._replace(filter=filter)

    def with_sort(self, sort: SearchSort) -> "SearchOptions":
        return self._replace(sort=sort)

    def with_order(self, order: SearchOrder) -> "SearchOptions":
        return self._replace(order=order)
