"""GTK result list view - renders pages handed over by the search manager."""

import itertools
import logging
from typing import Callable, Optional, Sequence

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import GLib, Gtk

from listing.domain import ResultItem

logger = logging.getLogger("Listing.ResultListView")


def default_row(item: ResultItem) -> Gtk.Widget:
    """Two-line row showing title and artist, falling back to the key."""
    box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=2)
    box.set_margin_top(6)
    box.set_margin_bottom(6)
    box.set_margin_start(10)
    box.set_margin_end(10)

    title = Gtk.Label(label=str(item.payload.get("title", item.key)))
    title.set_halign(Gtk.Align.START)
    title.add_css_class("heading")
    box.append(title)

    artist = item.payload.get("artist")
    if artist:
        subtitle = Gtk.Label(label=str(artist))
        subtitle.set_halign(Gtk.Align.START)
        subtitle.add_css_class("dim-label")
        box.append(subtitle)

    return box


class GtkResultView:
    """Result view backed by a crossfading Gtk.Stack.

    Each replacement adds a new page to the stack and makes it visible, so
    the outgoing list fades out while the incoming one fades in. The old
    page is removed once the transition has finished.
    """

    def __init__(
        self,
        row_factory: Callable[[ResultItem], Gtk.Widget] = default_row,
        transition_ms: int = 200,
    ):
        self.row_factory = row_factory
        self.transition_ms = transition_ms
        self.current_list: Optional[Gtk.ListBox] = None
        self._names = itertools.count()

        self.stack = Gtk.Stack()
        self.stack.set_transition_type(Gtk.StackTransitionType.CROSSFADE)
        self.stack.set_transition_duration(transition_ms)
        self.stack.set_vhomogeneous(False)
        self.stack.set_interpolate_size(True)

        self.spinner = Gtk.Spinner()
        self.spinner.set_halign(Gtk.Align.CENTER)
        self.spinner.set_valign(Gtk.Align.START)
        self.spinner.set_margin_top(24)
        self.spinner.set_size_request(32, 32)
        self.spinner.set_visible(False)

        self.widget = Gtk.Overlay()
        self.widget.set_child(self.stack)
        self.widget.add_overlay(self.spinner)

    def show_loading_indicator(self) -> None:
        self.spinner.set_visible(True)
        self.spinner.start()
        self.stack.set_opacity(0.5)

    def hide_loading_indicator(self) -> None:
        self.spinner.stop()
        self.spinner.set_visible(False)
        self.stack.set_opacity(1.0)

    def replace_content(self, items: Sequence[ResultItem]) -> None:
        listbox = Gtk.ListBox()
        listbox.set_selection_mode(Gtk.SelectionMode.NONE)
        listbox.add_css_class("boxed-list")
        listbox.set_margin_top(15)
        listbox.set_margin_bottom(15)
        listbox.set_margin_start(20)
        listbox.set_margin_end(20)
        for item in items:
            listbox.append(self.row_factory(item))

        self._show(listbox)
        self.current_list = listbox

    def append_content(self, items: Sequence[ResultItem]) -> None:
        if self.current_list is None:
            return
        for item in items:
            self.current_list.append(self.row_factory(item))

    def show_empty_state(self) -> None:
        empty_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=12)
        empty_box.set_valign(Gtk.Align.CENTER)
        empty_box.set_margin_top(60)
        empty_box.set_margin_bottom(60)

        icon = Gtk.Image.new_from_icon_name("system-search-symbolic")
        icon.set_pixel_size(64)
        icon.add_css_class("dim-label")
        empty_box.append(icon)

        empty_label = Gtk.Label(label="... nope, nothing found.")
        empty_label.add_css_class("title-2")
        empty_box.append(empty_label)

        self._show(empty_box)
        self.current_list = None

    def _show(self, content: Gtk.Widget) -> None:
        outgoing = self.stack.get_visible_child()
        self.stack.add_named(content, f"content-{next(self._names)}")
        self.stack.set_visible_child(content)

        if outgoing is not None:
            GLib.timeout_add(self.transition_ms, self._remove, outgoing)

    def _remove(self, child: Gtk.Widget) -> bool:
        if child.get_parent() is self.stack:
            self.stack.remove(child)
        return False  # Don't repeat
