# tests/test_catalogue_store.py

from __future__ import annotations

import pytest

from catalogue.models import CategoryIcon, TaskRecord, category_key, category_label
from catalogue.psx_tasks import PSX_TASKS
from catalogue.store import CatalogueStore, get_default_store


def test_list_categories_first_occurrence_order(small_store: CatalogueStore) -> None:
    assert small_store.list_categories() == ["A. Data", "B. Stats", "C. Plots"]
    # deterministic and idempotent
    assert small_store.list_categories() == small_store.list_categories()


def test_list_categories_is_a_copy(small_store: CatalogueStore) -> None:
    cats = small_store.list_categories()
    cats.append("Z. Extra")
    assert "Z. Extra" not in small_store.list_categories()


def test_filter_empty_query_returns_category_in_order(small_store: CatalogueStore) -> None:
    tasks = small_store.filter("A. Data", "")
    assert [t.id for t in tasks] == [10, 42]


def test_filter_matches_title_or_description_case_insensitive(small_store: CatalogueStore) -> None:
    assert [t.id for t in small_store.filter("B. Stats", "returns")] == [3]
    assert [t.id for t in small_store.filter("B. Stats", "ROLLING")] == [8]
    assert [t.id for t in small_store.filter("B. Stats", "volatility")] == [8]


def test_filter_requires_category_match(small_store: CatalogueStore) -> None:
    # "prices" appears in A and C; only the active category counts
    assert [t.id for t in small_store.filter("C. Plots", "prices")] == [7]


def test_filter_every_result_satisfies_predicate(small_store: CatalogueStore) -> None:
    for category in small_store.list_categories():
        for query in ["", "a", "rows", "xyz", "Daily"]:
            result = small_store.filter(category, query)
            expected = [
                t for t in small_store
                if t.category == category
                and (query.lower() in t.title.lower() or query.lower() in t.description.lower())
            ]
            assert result == expected


def test_filter_unknown_category_or_query_is_empty(small_store: CatalogueStore) -> None:
    assert small_store.filter("Nope", "") == []
    assert small_store.filter("A. Data", "no such text") == []


def test_duplicate_ids_rejected() -> None:
    with pytest.raises(ValueError):
        CatalogueStore(
            [
                TaskRecord(1, "A. X", "t1", "d1", "c1"),
                TaskRecord(1, "A. X", "t2", "d2", "c2"),
            ]
        )


def test_get_and_counts(small_store: CatalogueStore) -> None:
    assert small_store.get(42).title == "Clean data"
    assert small_store.get(1) is None
    assert small_store.count_by_category() == {"A. Data": 2, "B. Stats": 2, "C. Plots": 1}


def test_category_label_and_key() -> None:
    assert category_key("F. Machine Learning & Predictive Analytics") == "F"
    assert category_label("F. Machine Learning & Predictive Analytics") == (
        "Machine Learning & Predictive Analytics"
    )
    assert category_label("Misc") == "Misc"
    assert category_key("Misc") == "Misc"


def test_category_icons_use_explicit_mapping() -> None:
    store = get_default_store()
    assert store.category_icon("A. Data Collection & Cleaning") is CategoryIcon.DATABASE
    assert store.category_icon("C. Visualization Tasks") is CategoryIcon.BAR_CHART
    assert store.category_icon("F. Machine Learning & Predictive Analytics") is CategoryIcon.BRAIN
    assert store.category_icon("I. Reporting") is CategoryIcon.FILE_CODE
    # no substring guessing for unknown identifiers
    assert store.category_icon("Z. Reporting Extras") is CategoryIcon.LINE_CHART


def test_psx_catalogue_shape() -> None:
    store = get_default_store()
    assert len(store) == len(PSX_TASKS) == 16
    assert store.list_categories() == [
        "A. Data Collection & Cleaning",
        "B. Descriptive Analytics",
        "C. Visualization Tasks",
        "D. Statistical Analytics",
        "E. Technical Indicators",
        "F. Machine Learning & Predictive Analytics",
        "G. Portfolio Analytics & Finance",
        "I. Reporting",
    ]
    # ids are opaque and not contiguous
    assert [t.id for t in store][:5] == [1, 2, 4, 7, 8]


def test_psx_volatility_search() -> None:
    result = get_default_store().filter("B. Descriptive Analytics", "volatility")
    assert [t.title for t in result] == ["Calculate volatility per script"]


def test_records_are_immutable() -> None:
    record = get_default_store().get(1)
    with pytest.raises(AttributeError):
        record.title = "changed"  # type: ignore[misc]
