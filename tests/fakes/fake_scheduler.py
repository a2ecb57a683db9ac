"""Fake scheduler with a virtual clock and manually resolved fetches."""
from typing import Any, Awaitable, Callable, List, Optional


class FakeTimer:
    """Timer handle driven by FakeScheduler.advance()."""

    def __init__(self, due: int, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def active(self) -> bool:
        return not self.cancelled and not self.fired

    def cancel(self) -> None:
        self.cancelled = True


class PendingFetch:
    """A spawned fetch waiting for the test to resolve it."""

    def __init__(self, awaitable: Awaitable[Any], on_done: Callable):
        self.awaitable = awaitable
        self.on_done = on_done
        self.done = False

    def run(self) -> None:
        """
        Drive the coroutine to completion and deliver its outcome.

        Fake page sources never suspend, so a single send() finishes them.
        """
        self.done = True
        try:
            self.awaitable.send(None)
        except StopIteration as stop:
            self.on_done(stop.value, None)
        except Exception as e:
            self.on_done(None, e)
        else:
            raise RuntimeError("Fake fetch suspended; fake sources must not await")


class FakeScheduler:
    """In-memory scheduler for deterministic controller tests."""

    def __init__(self):
        self.now = 0
        self.timers: List[FakeTimer] = []
        self.fetches: List[PendingFetch] = []

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(self.now + delay_ms, callback)
        self.timers.append(timer)
        return timer

    def spawn(self, awaitable: Awaitable[Any], on_done: Callable) -> None:
        self.fetches.append(PendingFetch(awaitable, on_done))

    def advance(self, ms: int) -> None:
        """Move the clock forward, firing due timers in order."""
        target = self.now + ms
        while True:
            due = [t for t in self.timers if t.active and t.due <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.due)
            self.now = timer.due
            timer.fired = True
            timer.callback()
        self.now = target

    @property
    def active_timers(self) -> List[FakeTimer]:
        return [t for t in self.timers if t.active]

    @property
    def outstanding(self) -> List[PendingFetch]:
        return [f for f in self.fetches if not f.done]

    def complete(self, index: int = 0) -> None:
        self.outstanding[index].run()

    def complete_all(self) -> None:
        while self.outstanding:
            self.complete(0)

    def last_fetch(self) -> Optional[PendingFetch]:
        return self.fetches[-1] if self.fetches else None
