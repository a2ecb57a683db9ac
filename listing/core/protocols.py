"""Protocol definitions for dependency injection."""

from typing import Any, Awaitable, Callable, Optional, Protocol, Sequence

from listing.domain import PageResponse, ResultItem, SearchCriteria


class PageSource(Protocol):
    page_size: int

    async def fetch_page(
        self, criteria: SearchCriteria, cursor: int
    ) -> PageResponse: ...


class ResultView(Protocol):
    def show_loading_indicator(self) -> None: ...

    def hide_loading_indicator(self) -> None: ...

    def replace_content(self, items: Sequence[ResultItem]) -> None: ...

    def append_content(self, items: Sequence[ResultItem]) -> None: ...

    def show_empty_state(self) -> None: ...


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


FetchDone = Callable[[Any, Optional[BaseException]], None]


class Scheduler(Protocol):
    def call_later(
        self, delay_ms: int, callback: Callable[[], None]
    ) -> TimerHandle: ...

    def spawn(self, awaitable: Awaitable[Any], on_done: FetchDone) -> None: ...
