"""Dependency injection container."""

from dataclasses import dataclass, field
from typing import Any, Optional

from listing.config import AppSettings
from listing.core.protocols import PageSource, ResultView, Scheduler
from listing.core.scheduler import AsyncioScheduler
from listing.managers.search_manager import SearchManager
from listing.services import WebSocketPageSource


@dataclass
class AppContainer:
    settings: AppSettings

    _page_source: Optional[PageSource] = field(
        default=None, init=False, repr=False
    )
    _scheduler: Optional[Scheduler] = field(
        default=None, init=False, repr=False
    )

    @property
    def page_source(self) -> PageSource:
        if self._page_source is None:
            self._page_source = WebSocketPageSource(
                uri=self.settings.source.websocket_uri,
                page_size=self.settings.search.page_size,
                max_size=self.settings.source.max_message_size,
            )
        return self._page_source

    @property
    def scheduler(self) -> Scheduler:
        if self._scheduler is None:
            self._scheduler = AsyncioScheduler()
        return self._scheduler

    def search_manager(self, view: ResultView, **callbacks: Any) -> SearchManager:
        return SearchManager(
            page_source=self.page_source,
            view=view,
            scheduler=self.scheduler,
            settings=self.settings.search,
            **callbacks,
        )

    @classmethod
    def create(
        cls,
        settings: Optional[AppSettings] = None,
        page_source: Optional[PageSource] = None,
        scheduler: Optional[Scheduler] = None,
    ) -> "AppContainer":
        container = cls(settings=settings or AppSettings.load())
        container._page_source = page_source
        container._scheduler = scheduler
        return container
