"""Scroll trigger manager - Detects when the next page should be loaded."""

import logging
from dataclasses import dataclass
from typing import Optional

from listing.core.protocols import Scheduler, TimerHandle

logger = logging.getLogger("Listing.ScrollTriggerManager")


@dataclass(frozen=True)
class ScrollMetrics:
    """Snapshot of a scrollable viewport."""

    offset: float
    viewport_size: float
    content_size: float

    @property
    def scrollable_extent(self) -> float:
        return max(0.0, self.content_size - self.viewport_size)

    def is_scrolled_to_end(self, distance: float) -> bool:
        return self.scrollable_extent - self.offset <= distance


class ScrollTrigger:
    """Decides, once per refresh tick, whether to request another page."""

    def __init__(
        self,
        scheduler: Scheduler,
        threshold: int = 500,
        cooldown_ms: int = 1000,
    ):
        """Initialize ScrollTrigger.

        Args:
            scheduler: Scheduler owning the cool-down timer
            threshold: Distance from the end of content that counts as "near"
            cooldown_ms: Quiet period after a page is delivered
        """
        self.scheduler = scheduler
        self.threshold = threshold
        self.cooldown_ms = cooldown_ms
        self._cooldown: Optional[TimerHandle] = None
        self._held = False

    @property
    def cooling_down(self) -> bool:
        return self._cooldown is not None

    @property
    def held(self) -> bool:
        return self._held

    def should_load_next_page(self, metrics: ScrollMetrics) -> bool:
        return metrics.scrollable_extent > 0 and metrics.is_scrolled_to_end(
            self.threshold
        )

    def probe(self, metrics: ScrollMetrics) -> bool:
        near_end = self.should_load_next_page(metrics)

        if self._held:
            if not near_end:
                logger.debug("Scrolled away from the end, releasing hold")
                self._held = False
            return False

        return near_end and not self.cooling_down

    def start_cooldown(self) -> None:
        self.cancel_cooldown()
        self._cooldown = self.scheduler.call_later(
            self.cooldown_ms, self._end_cooldown
        )

    def cancel_cooldown(self) -> None:
        if self._cooldown:
            self._cooldown.cancel()
            self._cooldown = None

    def hold_until_scrolled_away(self) -> None:
        self._held = True

    def reset(self) -> None:
        self.cancel_cooldown()
        self._held = False

    def _end_cooldown(self) -> None:
        self._cooldown = None
