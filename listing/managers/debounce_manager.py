"""Debounce manager - Collapses bursts of criteria changes into one search."""

import logging
from typing import Callable, Optional

from listing.core.protocols import Scheduler, TimerHandle
from listing.domain import ChangeSource

logger = logging.getLogger("Listing.DebounceManager")


class QueryDebouncer:
    """Keeps at most one pending "search changed" signal.

    Text input waits longer than filter/sort changes before firing.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        on_fire: Callable[[], None],
        query_delay_ms: int = 500,
        filter_delay_ms: int = 100,
    ):
        """Initialize QueryDebouncer.

        Args:
            scheduler: Scheduler owning the timer
            on_fire: Callback run once the input has settled
            query_delay_ms: Delay after free-text changes
            filter_delay_ms: Delay after ruleset/category/sort changes
        """
        self.scheduler = scheduler
        self.on_fire = on_fire
        self.query_delay_ms = query_delay_ms
        self.filter_delay_ms = filter_delay_ms
        self.timer: Optional[TimerHandle] = None

    def delay_for(self, source: ChangeSource) -> int:
        if source is ChangeSource.QUERY:
            return self.query_delay_ms
        return self.filter_delay_ms

    def notify(self, source: ChangeSource) -> None:
        """Reset the pending timer for a new change."""
        self.cancel()
        delay = self.delay_for(source)
        logger.debug(f"Search change from {source.value}, firing in {delay}ms")
        self.timer = self.scheduler.call_later(delay, self._fire)

    def cancel(self) -> None:
        if self.timer:
            self.timer.cancel()
            self.timer = None

    @property
    def pending(self) -> bool:
        return self.timer is not None

    def _fire(self) -> None:
        self.timer = None  # Clear timer reference
        self.on_fire()
