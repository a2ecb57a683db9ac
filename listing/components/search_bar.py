"""Search bar component."""

from typing import Callable, Optional

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk


class SearchBar:
    """Text entry feeding every keystroke to the search manager.

    Debouncing happens in the manager, so the entry reports changes
    immediately rather than using the SearchEntry's own delay.
    """

    def __init__(
        self,
        on_query_changed: Callable[[str], None],
        on_activate: Optional[Callable[[], None]] = None,
        placeholder: str = "Type in keywords...",
    ):
        self.on_query_changed = on_query_changed
        self.on_activate = on_activate
        self.placeholder = placeholder
        self.search_entry: Optional[Gtk.SearchEntry] = None

    def build(self) -> Gtk.Widget:
        container = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=6)
        container.set_margin_start(8)
        container.set_margin_end(8)
        container.set_margin_top(8)
        container.set_margin_bottom(4)

        search_entry = Gtk.SearchEntry()
        search_entry.set_hexpand(True)
        search_entry.set_placeholder_text(self.placeholder)
        search_entry.connect("changed", self._on_changed)
        search_entry.connect("activate", self._on_activate)
        container.append(search_entry)

        self.search_entry = search_entry
        return container

    def _on_changed(self, entry: Gtk.SearchEntry) -> None:
        self.on_query_changed(entry.get_text().strip())

    def _on_activate(self, entry: Gtk.SearchEntry) -> None:
        if self.on_activate:
            self.on_activate()
