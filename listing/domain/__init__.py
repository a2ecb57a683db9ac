"""Domain value objects."""

from .criteria import (
    ChangeSource,
    PageResponse,
    ResultItem,
    ResultPage,
    Ruleset,
    SearchCategory,
    SearchCriteria,
    SortCriteria,
    SortDirection,
)

__all__ = [
    "ChangeSource",
    "PageResponse",
    "ResultItem",
    "ResultPage",
    "Ruleset",
    "SearchCategory",
    "SearchCriteria",
    "SortCriteria",
    "SortDirection",
]
