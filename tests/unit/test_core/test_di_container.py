"""Tests for dependency injection container."""

from pathlib import Path


def test_container_create_with_defaults(tmp_path: Path, monkeypatch):
    from listing.core.di_container import AppContainer

    monkeypatch.chdir(tmp_path)
    container = AppContainer.create()

    assert container.settings is not None
    assert container.settings.search.page_size == 50


def test_container_page_source_lazy_initialization():
    from listing.config import AppSettings, SearchSettings, SourceSettings, WindowSettings
    from listing.core.di_container import AppContainer
    from listing.services import WebSocketPageSource

    settings = AppSettings(
        search=SearchSettings(page_size=25),
        source=SourceSettings(websocket_uri="ws://example.org:9000"),
        window=WindowSettings(),
    )
    container = AppContainer.create(settings=settings)
    assert container._page_source is None

    page_source = container.page_source

    assert isinstance(page_source, WebSocketPageSource)
    assert page_source.uri == "ws://example.org:9000"
    assert page_source.page_size == 25
    assert container.page_source is page_source


def test_container_scheduler_singleton():
    from listing.config import AppSettings
    from listing.core.di_container import AppContainer
    from listing.core.scheduler import AsyncioScheduler

    container = AppContainer.create(settings=AppSettings.default())

    scheduler = container.scheduler

    assert isinstance(scheduler, AsyncioScheduler)
    assert container.scheduler is scheduler


def test_container_search_manager_uses_injected_parts(page_source, scheduler, view):
    from listing.config import AppSettings
    from listing.core.di_container import AppContainer

    errors = []
    container = AppContainer.create(
        settings=AppSettings.default(), page_source=page_source, scheduler=scheduler
    )

    manager = container.search_manager(view, on_error=errors.append)

    assert manager.page_source is page_source
    assert manager.scheduler is scheduler
    assert manager.on_error == errors.append
    assert manager.page_size == 50
