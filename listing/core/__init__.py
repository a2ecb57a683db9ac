"""Core interfaces and scheduling."""

from .protocols import PageSource, ResultView, Scheduler, TimerHandle
from .scheduler import AsyncioScheduler

__all__ = [
    "AsyncioScheduler",
    "PageSource",
    "ResultView",
    "Scheduler",
    "TimerHandle",
]
