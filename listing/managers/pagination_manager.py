"""Pagination state management for infinite scroll."""

import logging
from functools import partial
from typing import Callable, Optional

from listing.core.protocols import PageSource, Scheduler
from listing.domain import PageResponse, ResultPage, SearchCriteria

logger = logging.getLogger("Listing.PaginationManager")


class PaginationSession:
    """Pages through the results of one SearchCriteria.

    A session is replaced, never reused, when the criteria change. Once
    invalidated it issues no further requests and drops any response that
    is still in flight.
    """

    def __init__(
        self,
        criteria: SearchCriteria,
        page_source: PageSource,
        scheduler: Scheduler,
        on_page: Callable[["PaginationSession", ResultPage], None],
        on_failure: Callable[["PaginationSession", BaseException], None],
        page_size: int = 50,
    ):
        self.criteria = criteria
        self.page_source = page_source
        self.scheduler = scheduler
        self.on_page = on_page
        self.on_failure = on_failure
        self.page_size = page_size

        self.cursor = 0
        self.loading = False
        self.exhausted = False
        self.failed = False
        self.last_error: Optional[BaseException] = None
        self.items_received = 0
        self.total_count: Optional[int] = None
        self.current = True

    @property
    def is_past_first_page(self) -> bool:
        return self.cursor > 0

    def can_fetch_next_page(self) -> bool:
        return self.current and not self.loading and not self.exhausted

    def fetch_next_page(self) -> bool:
        """Request the page at the cursor.

        Returns:
            bool: True if a fetch was dispatched
        """
        if not self.can_fetch_next_page():
            return False

        self.loading = True
        self.failed = False
        cursor = self.cursor
        logger.debug(f"Fetching page {cursor} for {self.criteria}")
        self.scheduler.spawn(
            self.page_source.fetch_page(self.criteria, cursor),
            partial(self._on_fetch_done, cursor),
        )
        return True

    def invalidate(self) -> None:
        self.current = False

    def _on_fetch_done(
        self,
        cursor: int,
        response: Optional[PageResponse],
        error: Optional[BaseException],
    ) -> None:
        if not self.current:
            logger.debug(f"Discarding page {cursor} of superseded session")
            return

        self.loading = False

        if error is not None:
            self.failed = True
            self.last_error = error
            self.on_failure(self, error)
            return

        items = tuple(response.items)
        self._finish_loading(len(items), response)
        self.on_page(self, ResultPage(items=items, is_first=cursor == 0, cursor=cursor))

    def _finish_loading(self, items_loaded: int, response: PageResponse) -> None:
        self.cursor += 1
        self.items_received += items_loaded
        if response.total_count is not None:
            self.total_count = response.total_count
        self.exhausted = (
            items_loaded < self.page_size or response.has_more is False
        )
