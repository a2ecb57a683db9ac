"""Search manager - Drives debounced searches and infinite-scroll paging."""

import logging
from typing import Callable, List, Optional

from listing.config import SearchSettings
from listing.core.protocols import PageSource, ResultView, Scheduler
from listing.domain import (
    ChangeSource,
    ResultItem,
    ResultPage,
    Ruleset,
    SearchCategory,
    SearchCriteria,
    SortCriteria,
    SortDirection,
)
from listing.managers.debounce_manager import QueryDebouncer
from listing.managers.pagination_manager import PaginationSession
from listing.managers.result_list_manager import ResultListManager
from listing.managers.scroll_trigger_manager import ScrollMetrics, ScrollTrigger

logger = logging.getLogger("Listing.SearchManager")


class SearchManager:
    """Owns the current search session and everything feeding it.

    Every entry point is expected to run on the scheduler's loop. The
    current session is replaced on each new search; completions from older
    sessions are recognised by identity and dropped.
    """

    def __init__(
        self,
        page_source: PageSource,
        view: ResultView,
        scheduler: Scheduler,
        settings: Optional[SearchSettings] = None,
        criteria: Optional[SearchCriteria] = None,
        on_error: Optional[Callable[[str], None]] = None,
        on_featured: Optional[Callable[[Optional[ResultItem]], None]] = None,
    ):
        """Initialize SearchManager.

        Args:
            page_source: Data source returning pages for (criteria, cursor)
            view: Rendering collaborator
            scheduler: Loop used for timers and fetches
            settings: Debounce, page size and scroll settings
            criteria: Initial criteria
            on_error: Callback to show error notifications
            on_featured: Callback receiving the first item of each new result list
        """
        settings = settings or SearchSettings()
        self.page_source = page_source
        self.scheduler = scheduler
        self.page_size = settings.page_size
        self.on_error = on_error
        self.on_featured = on_featured

        self.criteria = criteria or SearchCriteria()
        self.results = ResultListManager(view)
        self.debouncer = QueryDebouncer(
            scheduler,
            self._update_search,
            query_delay_ms=settings.query_debounce_ms,
            filter_delay_ms=settings.filter_debounce_ms,
        )
        self.trigger = ScrollTrigger(
            scheduler,
            threshold=settings.scroll_threshold,
            cooldown_ms=settings.page_cooldown_ms,
        )

        # Search state
        self.session: Optional[PaginationSession] = None
        self.visible = True
        self.disposed = False
        self._search_pending = False

    # Inbound events

    def set_query(self, query: str) -> None:
        if query == self.criteria.query:
            return
        self._change_criteria(self.criteria.with_query(query), ChangeSource.QUERY)

    def set_ruleset(self, ruleset: Ruleset) -> None:
        self._set_filter(ruleset=ruleset)

    def set_category(self, category: SearchCategory) -> None:
        self._set_filter(category=category)

    def set_sort(self, sort: SortCriteria) -> None:
        self._set_filter(sort=sort)

    def set_sort_direction(self, direction: SortDirection) -> None:
        self._set_filter(direction=direction)

    def toggle_sort_direction(self) -> None:
        self.set_sort_direction(self.criteria.direction.toggled())

    def on_tick(self, metrics: ScrollMetrics) -> None:
        """Probe the viewport once per refresh tick."""
        if self.disposed or self.session is None:
            return
        if self.trigger.probe(metrics):
            self.load_more()

    def load_more(self) -> bool:
        """Request the next page of the current session if allowed.

        Returns:
            bool: True if a fetch was dispatched
        """
        session = self.session
        if session is None or not session.can_fetch_next_page():
            return False
        if self.trigger.cooling_down:
            return False
        return session.fetch_next_page()

    def set_visible(self, visible: bool) -> None:
        self.visible = visible
        if visible and self._search_pending:
            self._update_search()

    def start(self) -> None:
        """Run the first search for the initial criteria."""
        self.refresh()

    def refresh(self) -> None:
        """Restart the current criteria without waiting for a debounce."""
        if self.disposed:
            return
        self.debouncer.cancel()
        self._update_search()

    def dispose(self) -> None:
        if self.disposed:
            return
        self.disposed = True
        self.debouncer.cancel()
        if self.session:
            self.session.invalidate()
        self.trigger.reset()
        self.results.dispose()
        logger.debug("Search manager disposed")

    # State accessors

    def is_loading(self) -> bool:
        return self.session is not None and self.session.loading

    def is_exhausted(self) -> bool:
        return self.session is not None and self.session.exhausted

    def get_query(self) -> str:
        return self.criteria.query

    def get_results(self) -> List[ResultItem]:
        return self.results.items

    # Internals

    def _set_filter(self, **changes) -> None:
        criteria = self.criteria.with_changes(**changes)
        if criteria == self.criteria:
            return
        self._change_criteria(criteria, ChangeSource.FILTER)

    def _change_criteria(self, criteria: SearchCriteria, source: ChangeSource) -> None:
        if self.disposed:
            return
        self.criteria = criteria
        if self.session:
            self.session.invalidate()
        self.trigger.reset()
        self.debouncer.notify(source)

    def _update_search(self) -> None:
        if self.disposed:
            return

        if not self.visible:
            logger.debug("View hidden, deferring search until shown")
            self._search_pending = True
            return

        self._search_pending = False
        logger.info(f"Searching for: {self.criteria}")

        self.results.show_loading()

        if self.session:
            self.session.invalidate()
        self.session = PaginationSession(
            self.criteria,
            self.page_source,
            self.scheduler,
            on_page=self._on_page,
            on_failure=self._on_failure,
            page_size=self.page_size,
        )

        self.trigger.reset()
        self.load_more()

    def _on_page(self, session: PaginationSession, page: ResultPage) -> None:
        if session is not self.session:
            logger.debug("Ignoring page from a superseded session")
            return

        logger.info(
            f"Received {len(page.items)} items for page {page.cursor} "
            f"({session.items_received} total)"
        )
        self.results.handle_page(page)
        self.trigger.start_cooldown()

        if page.is_first and self.on_featured:
            self.on_featured(self.results.featured)

    def _on_failure(self, session: PaginationSession, error: BaseException) -> None:
        if session is not self.session:
            return

        logger.error(f"Error fetching page {session.cursor}: {error}")
        self.results.handle_failure(error)
        self.trigger.hold_until_scrolled_away()
        if self.on_error:
            self.on_error(f"Search error: {error}")
