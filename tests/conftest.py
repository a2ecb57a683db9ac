"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from fakes.fake_page_source import FakePageSource
from fakes.fake_scheduler import FakeScheduler
from fakes.recording_view import RecordingResultView


@pytest.fixture
def gtk():
    """Gtk 4 module, skipping the test when GTK or a display is unavailable."""
    gi = pytest.importorskip("gi")
    try:
        gi.require_version("Gtk", "4.0")
    except ValueError:
        pytest.skip("GTK 4 is not installed")
    Gtk = pytest.importorskip("gi.repository.Gtk")
    from gi.repository import Gdk

    if Gdk.Display.get_default() is None:
        pytest.skip("No display available")
    return Gtk


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def page_source() -> FakePageSource:
    return FakePageSource(page_size=50)


@pytest.fixture
def view() -> RecordingResultView:
    return RecordingResultView()


@pytest.fixture
def search_settings():
    from listing.config import SearchSettings

    return SearchSettings(
        query_debounce_ms=500,
        filter_debounce_ms=100,
        page_size=50,
        scroll_threshold=500,
        page_cooldown_ms=1000,
    )


@pytest.fixture
def make_manager(page_source, view, scheduler, search_settings):
    from listing.managers.search_manager import SearchManager

    def factory(**kwargs) -> SearchManager:
        return SearchManager(
            page_source=page_source,
            view=view,
            scheduler=scheduler,
            settings=kwargs.pop("settings", search_settings),
            **kwargs,
        )

    return factory
