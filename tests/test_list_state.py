"""Tests for the per-screen list controller."""

from __future__ import annotations

import pytest

from backoffice.list_state import ListController
from backoffice.models import ELLIPSIS, FetchQuery, ListSpec, Record, RecordPage, ViewKind
from backoffice.source import LOAD_READY, StaticRecordSource


@pytest.fixture
def controller(records, spec) -> ListController:
    ctl = ListController(spec, StaticRecordSource(records))
    ctl.refresh()
    return ctl


def test_refresh_populates_first_page(controller: ListController) -> None:
    assert controller.load_state.status == LOAD_READY
    assert controller.view.total_pages == 4
    assert controller.selected_index == 0
    assert controller.selected_record().id == "R16"


@pytest.mark.parametrize(
    "mutate",
    [
        lambda ctl: ctl.set_tab("completed"),
        lambda ctl: ctl.set_dropdown_filter("completed"),
        lambda ctl: ctl.set_search_query("customer"),
        lambda ctl: ctl.set_sort_order("oldest"),
        lambda ctl: ctl.cycle_tab(1),
        lambda ctl: ctl.cycle_dropdown(),
        lambda ctl: ctl.toggle_sort(),
    ],
)
def test_filter_mutators_reset_to_first_page(controller: ListController, mutate) -> None:
    assert controller.go_to_page(3)
    mutate(controller)
    assert controller.filters.current_page == 1
    assert controller.view.current_page == 1


def test_next_on_last_page_is_a_no_op(controller: ListController) -> None:
    assert controller.go_to_page(4)
    assert not controller.next_page()
    assert controller.filters.current_page == 4
    assert not controller.go_to_page(5)
    assert not controller.go_to_page(0)
    assert controller.filters.current_page == 4


def test_previous_and_next_page(controller: ListController) -> None:
    assert not controller.previous_page()
    assert controller.next_page()
    assert controller.view.current_page == 2
    assert controller.previous_page()
    assert controller.view.current_page == 1


def test_cycle_tab_wraps(controller: ListController) -> None:
    controller.cycle_tab(-1)
    assert controller.filters.active_tab == "pending"
    controller.cycle_tab(1)
    assert controller.filters.active_tab == "all"


def test_cycle_dropdown_includes_all(controller: ListController, spec: ListSpec) -> None:
    seen = []
    for _ in range(len(spec.dropdown_options) + 1):
        controller.cycle_dropdown()
        seen.append(controller.filters.dropdown_filter)
    assert seen == [*spec.dropdown_options, "all"]


def test_empty_filter_result_clears_selection(controller: ListController) -> None:
    controller.set_tab("pending")
    assert controller.view.visible_records == []
    assert controller.selected_index is None
    assert controller.selected_record() is None


def test_move_selection_wraps(controller: ListController) -> None:
    controller.move_selection(-1)
    assert controller.selected_index == 4
    controller.move_selection(1)
    assert controller.selected_index == 0


def test_status_update_refreshes_counts_and_keeps_detail(controller: ListController) -> None:
    record = controller.selected_record()
    controller.push_view(ViewKind.DETAIL, record)

    controller.update_status(record.id, "cancelled")

    assert controller.tab_counts()["cancelled"] == 4
    assert controller.current_entry.kind is ViewKind.DETAIL


def test_vanished_record_returns_to_list(records, spec) -> None:
    source = StaticRecordSource(records)
    controller = ListController(spec, source)
    controller.refresh()
    record = controller.selected_record()
    controller.push_view(ViewKind.DETAIL, record)
    controller.push_view(ViewKind.SUB_DETAIL, Record(id=f"{record.id}/1", status="", parent_id=record.id))

    source.remove(record.id)
    controller.refresh()

    assert controller.navigator.is_at_list()


def test_navigation_closes_open_menu(controller: ListController) -> None:
    controller.menu.open("row-actions")
    controller.push_view(ViewKind.DETAIL, controller.selected_record())
    assert not controller.menu.is_open()


def test_window_uses_terminal_width(controller: ListController) -> None:
    assert controller.window(140) == [1, 2, 3, 4]
    assert controller.window(60) == [1, 2, 3, 4]
    assert ELLIPSIS not in controller.window()


def test_page_size_must_be_positive(records, spec) -> None:
    with pytest.raises(ValueError):
        ListController(spec, StaticRecordSource(records), page_size=0)


class PagedSource:
    paginates = True

    def __init__(self) -> None:
        self.queries: list[FetchQuery] = []

    def fetch(self, query: FetchQuery) -> RecordPage:
        self.queries.append(query)
        rows = [Record(id=f"P{query.page}-{n}", status="pending") for n in range(query.page_size)]
        return RecordPage(records=rows, total=57, total_pages=12, page=query.page)

    def update_status(self, record_id: str, status: str) -> None:
        return None


def test_server_paginated_view_uses_page_totals(spec: ListSpec) -> None:
    source = PagedSource()
    controller = ListController(spec, source)
    controller.refresh()

    assert controller.view.total_pages == 12
    assert controller.view.total_filtered_count == 57
    assert controller.tab_counts() == {}
    assert controller.go_to_page(7)
    assert controller.fetch_query().page == 7

    controller.refresh()
    assert source.queries[-1].page == 7
    assert controller.view.current_page == 7
    assert controller.window(140) == [1, ELLIPSIS, 6, 7, 8, ELLIPSIS, 12]


def test_server_paginated_detail_survives_paging(spec: ListSpec) -> None:
    controller = ListController(spec, PagedSource())
    controller.refresh()
    record = controller.selected_record()
    controller.push_view(ViewKind.DETAIL, record)

    assert controller.go_to_page(2)
    controller.refresh()

    assert controller.records[0].id == "P2-0"
    assert controller.current_entry.kind is ViewKind.DETAIL
    assert controller.current_entry.record == record


def test_server_paginated_unknown_record_stays_on_list(spec: ListSpec) -> None:
    controller = ListController(spec, PagedSource())
    controller.refresh()
    controller.push_view(ViewKind.DETAIL, Record(id="P9-0", status="pending"))

    assert controller.navigator.is_at_list()
