"""In-memory page source, used for offline runs of the listing window."""

import asyncio
from typing import Any, Iterable, List, Mapping

from listing.domain import (
    PageResponse,
    ResultItem,
    Ruleset,
    SearchCategory,
    SearchCriteria,
    SortCriteria,
    SortDirection,
)

UNFILTERED_CATEGORIES = (SearchCategory.ANY, SearchCategory.LEADERBOARD)


class MemoryPageSource:
    """Serves pages out of a fixed list of item dicts.

    Items need an "id"; "ruleset" and "status" keys take part in filtering
    when present, and the sort field name is used as the sort key.
    """

    def __init__(
        self,
        items: Iterable[Mapping[str, Any]],
        page_size: int = 50,
        latency_ms: int = 0,
    ):
        self.items = [ResultItem.from_dict(item) for item in items]
        self.page_size = page_size
        self.latency_ms = latency_ms
        self.requests: List[tuple] = []

    async def fetch_page(self, criteria: SearchCriteria, cursor: int) -> PageResponse:
        self.requests.append((criteria, cursor))
        if self.latency_ms:
            await asyncio.sleep(self.latency_ms / 1000)

        matches = self._matching(criteria)
        start = cursor * self.page_size
        page = matches[start:start + self.page_size]
        return PageResponse(
            items=tuple(page),
            has_more=start + len(page) < len(matches),
            total_count=len(matches),
        )

    def _matching(self, criteria: SearchCriteria) -> List[ResultItem]:
        query = criteria.query.lower()
        matches = []
        for item in self.items:
            payload = item.payload
            if query and not any(
                isinstance(value, str) and query in value.lower()
                for value in payload.values()
            ):
                continue
            if (
                criteria.ruleset is not Ruleset.ANY
                and payload.get("ruleset", criteria.ruleset.value) != criteria.ruleset.value
            ):
                continue
            if (
                criteria.category not in UNFILTERED_CATEGORIES
                and payload.get("status", criteria.category.value) != criteria.category.value
            ):
                continue
            matches.append(item)

        if criteria.sort is SortCriteria.RELEVANCE:
            return matches

        field = criteria.sort.value
        present = [m for m in matches if m.payload.get(field) is not None]
        missing = [m for m in matches if m.payload.get(field) is None]
        present.sort(
            key=lambda item: item.payload[field],
            reverse=criteria.direction is SortDirection.DESCENDING,
        )
        # Missing values stay last in both directions
        return present + missing
