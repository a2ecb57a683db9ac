"""Search criteria and result page value objects."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Mapping, Optional, Tuple


class Ruleset(str, Enum):
    ANY = "any"
    OSU = "osu"
    TAIKO = "taiko"
    CATCH = "catch"
    MANIA = "mania"


class SearchCategory(str, Enum):
    ANY = "any"
    LEADERBOARD = "leaderboard"
    RANKED = "ranked"
    QUALIFIED = "qualified"
    LOVED = "loved"
    FAVOURITES = "favourites"
    PENDING = "pending"
    GRAVEYARD = "graveyard"
    MINE = "mine"


class SortCriteria(str, Enum):
    TITLE = "title"
    ARTIST = "artist"
    DIFFICULTY = "difficulty"
    RANKED = "ranked"
    RATING = "rating"
    PLAYS = "plays"
    FAVOURITES = "favourites"
    RELEVANCE = "relevance"


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"

    def toggled(self) -> "SortDirection":
        if self is SortDirection.DESCENDING:
            return SortDirection.ASCENDING
        return SortDirection.DESCENDING


class ChangeSource(Enum):
    """Where a criteria change came from; selects the debounce delay."""

    QUERY = "query"
    FILTER = "filter"


@dataclass(frozen=True)
class SearchCriteria:
    """Value object describing one search."""

    query: str = ""
    ruleset: Ruleset = Ruleset.ANY
    category: SearchCategory = SearchCategory.LEADERBOARD
    sort: SortCriteria = SortCriteria.RANKED
    direction: SortDirection = SortDirection.DESCENDING

    def with_changes(self, **changes: Any) -> "SearchCriteria":
        return replace(self, **changes)

    def with_query(self, query: str) -> "SearchCriteria":
        """
        Return criteria for a new query text.

        Changing the text also resets the sort: browsing (empty query) sorts
        by ranked date, searching sorts by relevance, both descending.

        Args:
            query: New free-text query

        Returns:
            New SearchCriteria instance
        """
        sort = SortCriteria.RELEVANCE if query else SortCriteria.RANKED
        return replace(
            self,
            query=query,
            sort=sort,
            direction=SortDirection.DESCENDING,
        )

    def to_request(self) -> dict:
        return {
            "query": self.query,
            "ruleset": self.ruleset.value,
            "category": self.category.value,
            "sort": self.sort.value,
            "direction": self.direction.value,
        }


@dataclass(frozen=True)
class ResultItem:
    """One entry of a result list, opaque apart from its identity key."""

    key: str
    payload: Mapping[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResultItem":
        return cls(key=str(data["id"]), payload=dict(data))


@dataclass(frozen=True)
class PageResponse:
    """What a page source returns for one (criteria, cursor) request."""

    items: Tuple[ResultItem, ...]
    has_more: Optional[bool] = None
    total_count: Optional[int] = None


@dataclass(frozen=True)
class ResultPage:
    """A page delivered by a pagination session."""

    items: Tuple[ResultItem, ...]
    is_first: bool
    cursor: int = 0
