"""Asyncio-backed scheduler for timers and page fetches."""

import asyncio
import logging
from functools import partial
from typing import Any, Awaitable, Callable, Optional, Set

from listing.core.protocols import FetchDone

logger = logging.getLogger("Listing.Scheduler")


class AsyncioScheduler:
    """Runs controller timers and fetches on a single asyncio event loop.

    Fetch completions are delivered through task done-callbacks, which the
    loop runs in scheduling order alongside timer callbacks.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop
        self._tasks: Set[asyncio.Future] = set()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(
        self, delay_ms: int, callback: Callable[[], None]
    ) -> asyncio.TimerHandle:
        return self.loop.call_later(delay_ms / 1000, callback)

    def spawn(self, awaitable: Awaitable[Any], on_done: FetchDone) -> None:
        task = asyncio.ensure_future(awaitable, loop=self.loop)
        self._tasks.add(task)
        task.add_done_callback(partial(self._deliver, on_done))

    def _deliver(self, on_done: FetchDone, task: asyncio.Future) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            logger.debug("Fetch task cancelled, not delivering")
            return
        error = task.exception()
        if error is not None:
            on_done(None, error)
        else:
            on_done(task.result(), None)

    @property
    def pending_tasks(self) -> int:
        return len(self._tasks)

    def shutdown(self) -> None:
        """Cancel fetches that are still outstanding."""
        for task in list(self._tasks):
            task.cancel()
        self._tasks.clear()
