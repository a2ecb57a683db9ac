"""Listing window - search box, filters and an infinite-scroll result list."""

import logging
from typing import Optional

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Adw, GLib, Gtk

from listing.components.filter_bar import FilterBar
from listing.components.result_list_view import GtkResultView
from listing.components.search_bar import SearchBar
from listing.core.di_container import AppContainer
from listing.domain import ResultItem
from listing.managers.scroll_trigger_manager import ScrollMetrics

logger = logging.getLogger("Listing.UI")


class ListingWindow(Adw.ApplicationWindow):
    def __init__(self, app: Adw.Application, container: AppContainer):
        super().__init__(application=app)
        self.container = container

        window_settings = container.settings.window
        self.set_default_size(
            window_settings.default_width, window_settings.default_height
        )

        self.result_view = GtkResultView()
        self.search_manager = container.search_manager(
            self.result_view,
            on_error=self.show_notification,
            on_featured=self._on_featured,
        )

        self.window_title = Adw.WindowTitle(title="Listing", subtitle="")
        header = Adw.HeaderBar()
        header.set_title_widget(self.window_title)

        self.search_bar = SearchBar(
            on_query_changed=self._on_query_changed,
            on_activate=self.search_manager.refresh,
        )
        self.filter_bar = FilterBar(self.search_manager)

        self.scrolled = Gtk.ScrolledWindow()
        self.scrolled.set_vexpand(True)
        self.scrolled.set_policy(Gtk.PolicyType.NEVER, Gtk.PolicyType.AUTOMATIC)
        self.scrolled.set_child(self.result_view.widget)

        content = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)
        content.append(header)
        content.append(self.search_bar.build())
        content.append(self.filter_bar.build())
        content.append(self.scrolled)

        self.toast_overlay = Adw.ToastOverlay()
        self.toast_overlay.set_child(content)
        self.set_content(self.toast_overlay)

        self._tick_id: Optional[int] = self.scrolled.add_tick_callback(self._on_tick)
        self.connect("map", lambda _w: self.search_manager.set_visible(True))
        self.connect("unmap", lambda _w: self.search_manager.set_visible(False))
        self.connect("close-request", self._on_close_request)

        self.search_manager.start()

    def _on_query_changed(self, query: str) -> None:
        self.search_manager.set_query(query)
        # Query changes reset the sort; keep the controls in step
        self.filter_bar.sync(self.search_manager.criteria)

    def _on_tick(self, widget: Gtk.Widget, frame_clock) -> bool:
        vadj = self.scrolled.get_vadjustment()
        self.search_manager.on_tick(
            ScrollMetrics(
                offset=vadj.get_value(),
                viewport_size=vadj.get_page_size(),
                content_size=vadj.get_upper(),
            )
        )
        return GLib.SOURCE_CONTINUE

    def _on_featured(self, item: Optional[ResultItem]) -> None:
        if item is None:
            self.window_title.set_subtitle("")
        else:
            self.window_title.set_subtitle(str(item.payload.get("title", item.key)))
        self.scrolled.get_vadjustment().set_value(0)

    def show_notification(self, message: str) -> None:
        logger.debug(f"Showing notification: {message}")
        self.toast_overlay.add_toast(Adw.Toast(title=message))

    def _on_close_request(self, window) -> bool:
        if self._tick_id is not None:
            self.scrolled.remove_tick_callback(self._tick_id)
            self._tick_id = None
        self.search_manager.dispose()
        return False
