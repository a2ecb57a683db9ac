"""GLib main-loop scheduler for the GTK front end."""

import asyncio
import logging
import threading
from typing import Any, Awaitable, Callable, Optional

import gi

gi.require_version("GLib", "2.0")
from gi.repository import GLib

from listing.core.protocols import FetchDone

logger = logging.getLogger("Listing.GLibScheduler")


class GLibTimer:
    """Cancellable handle for a GLib timeout source."""

    def __init__(self):
        self.source_id: Optional[int] = None

    def cancel(self) -> None:
        if self.source_id:
            GLib.source_remove(self.source_id)
            self.source_id = None


class GLibScheduler:
    """Schedules timers on the GLib main loop.

    Fetches run on a background thread with their own asyncio loop; the
    result is handed back to the main loop with GLib.idle_add so every
    state transition happens on the UI thread.
    """

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> GLibTimer:
        timer = GLibTimer()

        def fire():
            timer.source_id = None
            callback()
            return False  # Don't repeat

        timer.source_id = GLib.timeout_add(delay_ms, fire)
        return timer

    def spawn(self, awaitable: Awaitable[Any], on_done: FetchDone) -> None:
        def run():
            loop = asyncio.new_event_loop()
            asyncio.set_event_loop(loop)
            try:
                result = loop.run_until_complete(awaitable)
            except Exception as e:
                logger.error(f"Fetch failed: {e}")
                GLib.idle_add(self._deliver, on_done, None, e)
            else:
                GLib.idle_add(self._deliver, on_done, result, None)
            finally:
                loop.close()

        threading.Thread(target=run, daemon=True).start()

    @staticmethod
    def _deliver(on_done: FetchDone, result: Any, error: Optional[BaseException]) -> bool:
        on_done(result, error)
        return False  # Don't repeat
