"""Manager classes for search state."""

from .debounce_manager import QueryDebouncer
from .pagination_manager import PaginationSession
from .result_list_manager import ResultListManager
from .scroll_trigger_manager import ScrollMetrics, ScrollTrigger
from .search_manager import SearchManager

__all__ = [
    "QueryDebouncer",
    "PaginationSession",
    "ResultListManager",
    "ScrollMetrics",
    "ScrollTrigger",
    "SearchManager",
]
