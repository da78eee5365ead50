"""Tests for drill-down view navigation."""

from __future__ import annotations

import pytest

from backoffice.models import LIST_ENTRY, Record, ViewKind
from backoffice.navigator import ViewStackNavigator


def _record(record_id: str, parent_id: str | None = None) -> Record:
    return Record(id=record_id, status="pending", parent_id=parent_id)


@pytest.fixture
def alive() -> set[str]:
    return {"X", "Z", "W", "V"}


@pytest.fixture
def nav(alive: set[str]) -> ViewStackNavigator:
    return ViewStackNavigator(record_exists=lambda record: (record.parent_id or record.id) in alive)


def test_starts_at_list(nav: ViewStackNavigator) -> None:
    assert nav.current() == LIST_ENTRY
    assert nav.is_at_list()
    assert nav.depth() == 0


def test_back_from_sub_detail_returns_to_detail(nav: ViewStackNavigator) -> None:
    order = _record("X")
    nav.push(ViewKind.DETAIL, order, "order")
    nav.push(ViewKind.SUB_DETAIL, _record("X/1", parent_id="X"), "product")

    entry = nav.pop()
    assert entry.kind is ViewKind.DETAIL
    assert entry.record == order
    assert nav.pop() == LIST_ENTRY


def test_pop_at_list_stays_at_list(nav: ViewStackNavigator) -> None:
    assert nav.pop() == LIST_ENTRY
    assert nav.close() == LIST_ENTRY


def test_replace_at_swaps_top_without_growing(nav: ViewStackNavigator) -> None:
    order = _record("X")
    nav.push(ViewKind.DETAIL, order, "order")
    nav.push(ViewKind.SUB_DETAIL, order, "summary")
    entry = nav.replace_at(ViewKind.ACTION_FORM, order, "invoice")

    assert nav.depth() == 2
    assert entry.panel == "invoice"
    assert nav.pop().panel == "order"


def test_replace_at_on_empty_stack_pushes(nav: ViewStackNavigator) -> None:
    nav.replace_at(ViewKind.DETAIL, _record("X"))
    assert nav.depth() == 1


def test_push_onto_full_stack_replaces_top(nav: ViewStackNavigator) -> None:
    for record_id in ("X", "Z", "W"):
        nav.push(ViewKind.DETAIL, _record(record_id))
    nav.push(ViewKind.DETAIL, _record("V"))

    assert nav.depth() == 3
    assert [entry.record.id for entry in nav.entries()[1:]] == ["X", "Z", "V"]


def test_push_of_vanished_record_falls_back_to_list(nav: ViewStackNavigator) -> None:
    nav.push(ViewKind.DETAIL, _record("X"))
    entry = nav.push(ViewKind.DETAIL, _record("gone"))
    assert entry == LIST_ENTRY
    assert nav.is_at_list()


def test_push_list_kind_resets(nav: ViewStackNavigator) -> None:
    nav.push(ViewKind.DETAIL, _record("X"))
    assert nav.push(ViewKind.LIST, None) == LIST_ENTRY
    assert nav.depth() == 0


def test_revalidate_drops_to_list_when_record_vanishes(nav: ViewStackNavigator, alive: set[str]) -> None:
    nav.push(ViewKind.DETAIL, _record("X"))
    nav.push(ViewKind.SUB_DETAIL, _record("X/2", parent_id="X"), "product")
    assert nav.revalidate().kind is ViewKind.SUB_DETAIL

    alive.discard("X")
    assert nav.revalidate() == LIST_ENTRY


def test_without_liveness_check_everything_is_alive() -> None:
    nav = ViewStackNavigator()
    nav.push(ViewKind.DETAIL, _record("anything"))
    assert nav.revalidate().kind is ViewKind.DETAIL


def test_max_depth_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ViewStackNavigator(max_depth=0)
