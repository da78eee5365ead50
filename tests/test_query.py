"""Tests for the list query engine."""

from __future__ import annotations

import math

import pytest

from backoffice.models import SORT_OLDEST, FilterState, Record
from backoffice.query import parse_sort_key, query, sort_records, tab_counts


def _ids(records: list[Record]) -> list[str]:
    return [record.id for record in records]


def test_first_page_shows_most_recent_records(records, spec) -> None:
    view = query(records, FilterState(), 5, spec)
    assert view.total_pages == 4
    assert view.total_filtered_count == 16
    assert view.current_page == 1
    assert _ids(view.visible_records) == ["R16", "R15", "R14", "R13", "R12"]


def test_dropdown_change_resets_page_and_narrows_view(records, spec) -> None:
    state = FilterState(current_page=3).update(dropdown_filter="cancelled")
    assert state.current_page == 1

    view = query(records, state, 5, spec)
    assert view.total_pages == 1
    assert view.current_page == 1
    assert _ids(view.visible_records) == ["R11", "R07", "R03"]


def test_oldest_sort_reverses_order(records, spec) -> None:
    view = query(records, FilterState(sort_order=SORT_OLDEST), 5, spec)
    assert _ids(view.visible_records) == ["R01", "R02", "R03", "R04", "R05"]


def test_tab_filters_by_status(records, spec) -> None:
    view = query(records, FilterState(active_tab="completed"), 20, spec)
    assert view.total_filtered_count == 13
    assert all(record.status == "completed" for record in view.visible_records)


def test_tab_without_matches_gives_single_empty_page(records, spec) -> None:
    view = query(records, FilterState(active_tab="pending"), 5, spec)
    assert view.visible_records == []
    assert view.total_filtered_count == 0
    assert view.total_pages == 1


def test_search_is_case_insensitive_over_id_and_fields(records, spec) -> None:
    by_field = query(records, FilterState(search_query="CUSTOMER 1"), 20, spec)
    assert sorted(_ids(by_field.visible_records)) == ["R01", "R10", "R11", "R12", "R13", "R14", "R15", "R16"]

    by_id = query(records, FilterState(search_query="r07"), 20, spec)
    assert _ids(by_id.visible_records) == ["R07"]


def test_whitespace_search_matches_everything(records, spec) -> None:
    view = query(records, FilterState(search_query="   "), 20, spec)
    assert view.total_filtered_count == 16


def test_unknown_dropdown_value_behaves_as_all(records, spec) -> None:
    view = query(records, FilterState(dropdown_filter="no-such-status"), 20, spec)
    assert view.total_filtered_count == 16


def test_filters_combine_with_and(records, spec) -> None:
    state = FilterState(active_tab="cancelled", search_query="customer 1")
    view = query(records, state, 20, spec)
    assert _ids(view.visible_records) == ["R11"]


@pytest.mark.parametrize("page", [0, -2, 5, 99])
def test_out_of_range_page_snaps_to_first(records, spec, page: int) -> None:
    view = query(records, FilterState(current_page=page), 5, spec)
    assert view.current_page == 1
    assert _ids(view.visible_records) == ["R16", "R15", "R14", "R13", "R12"]


def test_last_page_holds_remainder(records, spec) -> None:
    view = query(records, FilterState(current_page=4), 5, spec)
    assert _ids(view.visible_records) == ["R01"]


def test_empty_input_never_raises(spec) -> None:
    for source in (None, []):
        view = query(source, FilterState(current_page=3), 5, spec)
        assert view.visible_records == []
        assert view.total_pages == 1
        assert view.current_page == 1


def test_pages_partition_the_filtered_list(records, spec) -> None:
    full = query(records, FilterState(), 100, spec).visible_records
    stitched: list[Record] = []
    for page in range(1, 5):
        stitched.extend(query(records, FilterState(current_page=page), 5, spec).visible_records)
    assert stitched == full


def test_query_is_idempotent_and_pure(records, spec) -> None:
    snapshot = list(records)
    state = FilterState(search_query="customer", current_page=2)
    first = query(records, state, 5, spec)
    second = query(records, state, 5, spec)
    assert first == second
    assert records == snapshot


def test_non_positive_page_size_is_treated_as_one(records, spec) -> None:
    view = query(records, FilterState(), 0, spec)
    assert view.total_pages == 16
    assert len(view.visible_records) == 1


def test_equal_keys_keep_source_order_in_both_directions() -> None:
    tied = [Record(id=name, status="completed", sort_key="2024-05-01") for name in ("a", "b", "c")]
    assert _ids(sort_records(tied, "newest")) == ["a", "b", "c"]
    assert _ids(sort_records(tied, SORT_OLDEST)) == ["a", "b", "c"]


def test_unparseable_keys_sort_as_oldest() -> None:
    items = [
        Record(id="bad", status="completed", sort_key="not a date"),
        Record(id="new", status="completed", sort_key="2024-02-01"),
        Record(id="none", status="completed", sort_key=None),
        Record(id="old", status="completed", sort_key="2023-02-01"),
    ]
    assert _ids(sort_records(items, "newest")) == ["new", "old", "bad", "none"]
    assert _ids(sort_records(items, SORT_OLDEST)) == ["bad", "none", "old", "new"]


def test_parse_sort_key_formats() -> None:
    assert parse_sort_key("$1,250.50") == 1250.5
    assert parse_sort_key(42) == 42.0
    assert parse_sort_key("12 Aug 2025") > parse_sort_key("11 Aug 2025")
    assert parse_sort_key("15/02/2024 14:30:00") > parse_sort_key("15/02/2024 10:15:00")
    assert parse_sort_key("2024-02-15T10:00:00Z") > parse_sort_key("2024-02-14")
    assert parse_sort_key("nonsense") == -math.inf
    assert parse_sort_key(None) == -math.inf
    assert parse_sort_key(float("nan")) == -math.inf
    assert parse_sort_key(True) == -math.inf


def test_tab_counts_cover_every_tab(records, spec) -> None:
    assert tab_counts(records, spec) == {"all": 16, "completed": 13, "cancelled": 3, "pending": 0}
