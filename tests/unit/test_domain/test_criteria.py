"""Tests for search criteria value objects."""

import pytest


def test_criteria_defaults():
    from listing.domain import (
        Ruleset,
        SearchCategory,
        SearchCriteria,
        SortCriteria,
        SortDirection,
    )

    criteria = SearchCriteria()

    assert criteria.query == ""
    assert criteria.ruleset is Ruleset.ANY
    assert criteria.category is SearchCategory.LEADERBOARD
    assert criteria.sort is SortCriteria.RANKED
    assert criteria.direction is SortDirection.DESCENDING


def test_criteria_equality_by_value():
    from listing.domain import Ruleset, SearchCriteria

    assert SearchCriteria(query="abc") == SearchCriteria(query="abc")
    assert SearchCriteria(ruleset=Ruleset.MANIA) != SearchCriteria()


def test_criteria_immutable():
    from listing.domain import SearchCriteria

    criteria = SearchCriteria()

    with pytest.raises(AttributeError):
        criteria.query = "changed"


def test_with_changes_returns_new_instance():
    from listing.domain import SearchCategory, SearchCriteria

    criteria = SearchCriteria()
    changed = criteria.with_changes(category=SearchCategory.LOVED)

    assert changed is not criteria
    assert changed.category is SearchCategory.LOVED
    assert criteria.category is SearchCategory.LEADERBOARD


def test_with_query_sorts_by_relevance():
    from listing.domain import SearchCriteria, SortCriteria, SortDirection

    criteria = SearchCriteria(sort=SortCriteria.PLAYS, direction=SortDirection.ASCENDING)

    searched = criteria.with_query("camellia")

    assert searched.query == "camellia"
    assert searched.sort is SortCriteria.RELEVANCE
    assert searched.direction is SortDirection.DESCENDING


def test_with_empty_query_sorts_by_ranked():
    from listing.domain import SearchCriteria, SortCriteria

    criteria = SearchCriteria(query="abc", sort=SortCriteria.RELEVANCE)

    assert criteria.with_query("").sort is SortCriteria.RANKED


def test_with_query_keeps_filters():
    from listing.domain import Ruleset, SearchCategory, SearchCriteria

    criteria = SearchCriteria(ruleset=Ruleset.TAIKO, category=SearchCategory.RANKED)

    searched = criteria.with_query("drum")

    assert searched.ruleset is Ruleset.TAIKO
    assert searched.category is SearchCategory.RANKED


def test_sort_direction_toggled():
    from listing.domain import SortDirection

    assert SortDirection.DESCENDING.toggled() is SortDirection.ASCENDING
    assert SortDirection.ASCENDING.toggled() is SortDirection.DESCENDING


def test_to_request_uses_enum_values():
    from listing.domain import Ruleset, SearchCriteria

    request = SearchCriteria(query="q", ruleset=Ruleset.CATCH).to_request()

    assert request == {
        "query": "q",
        "ruleset": "catch",
        "category": "leaderboard",
        "sort": "ranked",
        "direction": "desc",
    }


def test_result_item_identity_ignores_payload():
    from listing.domain import ResultItem

    first = ResultItem(key="1", payload={"title": "a"})
    second = ResultItem(key="1", payload={"title": "b"})

    assert first == second
    assert hash(first) == hash(second)


def test_result_item_from_dict():
    from listing.domain import ResultItem

    item = ResultItem.from_dict({"id": 42, "title": "Song"})

    assert item.key == "42"
    assert item.payload["title"] == "Song"


def test_result_item_from_dict_requires_id():
    from listing.domain import ResultItem

    with pytest.raises(KeyError):
        ResultItem.from_dict({"title": "Song"})
