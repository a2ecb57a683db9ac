"""Result list manager - Decides between replacing, appending and empty state."""

import logging
from typing import List, Optional, Sequence, Set

from listing.core.protocols import ResultView
from listing.domain import ResultItem, ResultPage

logger = logging.getLogger("Listing.ResultListManager")


class ResultListManager:
    """Keeps the displayed result list in step with delivered pages."""

    def __init__(self, view: ResultView):
        self.view = view
        self._items: List[ResultItem] = []
        self._keys: Set[str] = set()
        self.has_content = False
        self.showing_empty_state = False

    @property
    def items(self) -> List[ResultItem]:
        return self._items.copy()

    @property
    def featured(self) -> Optional[ResultItem]:
        """First displayed item, if any."""
        return self._items[0] if self._items else None

    def show_loading(self) -> None:
        self.view.show_loading_indicator()

    def handle_page(self, page: ResultPage) -> None:
        if page.is_first:
            self._replace(page.items)
        else:
            self._append(page.items)

    def handle_failure(self, error: BaseException) -> None:
        self.view.hide_loading_indicator()

    def dispose(self) -> None:
        self._clear()
        self.showing_empty_state = False

    def _replace(self, items: Sequence[ResultItem]) -> None:
        self.view.hide_loading_indicator()
        self._clear()

        if not items:
            self.showing_empty_state = True
            self.view.show_empty_state()
            return

        self.showing_empty_state = False
        self.has_content = True
        self.view.replace_content(self._track(items))

    def _append(self, items: Sequence[ResultItem]) -> None:
        if not self.has_content:
            logger.debug("No list displayed, dropping continuation page")
            return

        new_items = self._track(items)
        if len(new_items) < len(items):
            logger.debug(
                f"Dropped {len(items) - len(new_items)} already displayed items"
            )
        if new_items:
            self.view.append_content(new_items)

    def _track(self, items: Sequence[ResultItem]) -> List[ResultItem]:
        added = []
        for item in items:
            if item.key in self._keys:
                continue
            self._keys.add(item.key)
            self._items.append(item)
            added.append(item)
        return added

    def _clear(self) -> None:
        self._items = []
        self._keys = set()
        self.has_content = False
