"""Filter bar - ruleset, category and sort controls."""

import logging
from typing import List, Optional, Type

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

from listing.domain import (
    Ruleset,
    SearchCategory,
    SearchCriteria,
    SortCriteria,
    SortDirection,
)
from listing.managers.search_manager import SearchManager

logger = logging.getLogger("Listing.FilterBar")


def _label(value) -> str:
    return value.value.replace("_", " ").title()


class FilterBar:
    """Drop-downs for the structured filters plus a sort direction toggle."""

    def __init__(self, search_manager: SearchManager):
        self.search_manager = search_manager
        self.ruleset_dropdown: Optional[Gtk.DropDown] = None
        self.category_dropdown: Optional[Gtk.DropDown] = None
        self.sort_dropdown: Optional[Gtk.DropDown] = None
        self.direction_button: Optional[Gtk.Button] = None
        self._syncing = False

    def build(self) -> Gtk.Widget:
        filter_bar = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=6)
        filter_bar.set_margin_top(4)
        filter_bar.set_margin_bottom(6)
        filter_bar.set_margin_start(8)
        filter_bar.set_margin_end(8)
        filter_bar.add_css_class("toolbar")

        self.ruleset_dropdown = self._dropdown(Ruleset, self._on_ruleset_selected)
        self.category_dropdown = self._dropdown(
            SearchCategory, self._on_category_selected
        )
        self.sort_dropdown = self._dropdown(SortCriteria, self._on_sort_selected)
        self.sort_dropdown.set_hexpand(False)

        filter_bar.append(self.ruleset_dropdown)
        filter_bar.append(self.category_dropdown)

        spacer = Gtk.Box()
        spacer.set_hexpand(True)
        filter_bar.append(spacer)

        filter_bar.append(self.sort_dropdown)

        self.direction_button = Gtk.Button()
        self.direction_button.add_css_class("flat")
        self.direction_button.connect("clicked", self._on_direction_clicked)
        filter_bar.append(self.direction_button)

        self.sync(self.search_manager.criteria)
        return filter_bar

    def _dropdown(self, enum_type: Type, handler) -> Gtk.DropDown:
        values: List = list(enum_type)
        dropdown = Gtk.DropDown.new_from_strings([_label(v) for v in values])
        dropdown.connect(
            "notify::selected",
            lambda widget, _param: self._on_selected(widget, values, handler),
        )
        return dropdown

    def _on_selected(self, dropdown: Gtk.DropDown, values: List, handler) -> None:
        if self._syncing:
            return
        index = dropdown.get_selected()
        if 0 <= index < len(values):
            logger.debug(f"Filter selected: {values[index]}")
            handler(values[index])

    def _on_ruleset_selected(self, ruleset: Ruleset) -> None:
        self.search_manager.set_ruleset(ruleset)

    def _on_category_selected(self, category: SearchCategory) -> None:
        self.search_manager.set_category(category)

    def _on_sort_selected(self, sort: SortCriteria) -> None:
        self.search_manager.set_sort(sort)

    def _on_direction_clicked(self, button: Gtk.Button) -> None:
        self.search_manager.toggle_sort_direction()
        self._update_direction_button(self.search_manager.criteria.direction)

    def sync(self, criteria: SearchCriteria) -> None:
        """Reflect criteria changed elsewhere, e.g. the query sort reset."""
        self._syncing = True
        try:
            self.ruleset_dropdown.set_selected(list(Ruleset).index(criteria.ruleset))
            self.category_dropdown.set_selected(
                list(SearchCategory).index(criteria.category)
            )
            self.sort_dropdown.set_selected(list(SortCriteria).index(criteria.sort))
        finally:
            self._syncing = False
        self._update_direction_button(criteria.direction)

    def _update_direction_button(self, direction: SortDirection) -> None:
        if direction is SortDirection.DESCENDING:
            self.direction_button.set_icon_name("view-sort-descending-symbolic")
            self.direction_button.set_tooltip_text("Descending")
        else:
            self.direction_button.set_icon_name("view-sort-ascending-symbolic")
            self.direction_button.set_tooltip_text("Ascending")
