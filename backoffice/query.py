"""Filter predicates, sort comparator and the list query engine."""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any, Iterable

from backoffice.models import SORT_OLDEST, DerivedView, FilterState, ListSpec, Record

_ALL = "all"
_OLDEST_POSSIBLE = float("-inf")
_SECONDS_PER_DAY = 86400

# Date layouts emitted by the platform's lists.
_DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%d %b %Y",
    "%d %B %Y",
    "%d/%m/%Y",
    "%d/%m/%Y %H:%M",
    "%d/%m/%Y %H:%M:%S",
    "%b %d, %Y",
)


def matches_tab(record: Record, state: FilterState) -> bool:
    return state.active_tab == _ALL or record.status == state.active_tab


def matches_dropdown(record: Record, state: FilterState, spec: ListSpec) -> bool:
    """Check the dropdown axis; unknown values behave as no filter."""
    selected = state.dropdown_filter
    if selected == _ALL or spec.dropdown_field is None:
        return True
    if selected not in spec.dropdown_options:
        return True
    return record.value(spec.dropdown_field) == selected


def matches_search(record: Record, state: FilterState, spec: ListSpec) -> bool:
    """Case-insensitive substring match over the id and the screen's search fields."""
    needle = (state.search_query or "").strip().lower()
    if not needle:
        return True
    for name in ("id", *spec.search_fields):
        value = record.value(name)
        if value is None:
            continue
        if needle in str(value).lower():
            return True
    return False


def record_visible(record: Record, state: FilterState, spec: ListSpec) -> bool:
    return (
        matches_tab(record, state)
        and matches_dropdown(record, state, spec)
        and matches_search(record, state, spec)
    )


def _parse_amount(raw: str) -> float | None:
    cleaned = raw.replace("$", "").replace(",", "").strip()
    if not cleaned:
        return None
    try:
        return float(cleaned)
    except ValueError:
        return None


def _datetime_key(moment: datetime) -> float:
    seconds = moment.hour * 3600 + moment.minute * 60 + moment.second
    return float(moment.toordinal() * _SECONDS_PER_DAY + seconds)


def _parse_date(raw: str) -> float | None:
    for fmt in _DATE_FORMATS:
        try:
            return _datetime_key(datetime.strptime(raw, fmt))
        except ValueError:
            continue
    try:
        return _datetime_key(datetime.fromisoformat(raw.replace("Z", "+00:00")))
    except ValueError:
        return None


def parse_sort_key(value: Any) -> float:
    """Map a date, timestamp or amount to a comparable number.

    Anything that cannot be parsed sorts as the oldest possible value.
    """
    if value is None or isinstance(value, bool):
        return _OLDEST_POSSIBLE
    if isinstance(value, (int, float)):
        number = float(value)
        return _OLDEST_POSSIBLE if math.isnan(number) else number
    if isinstance(value, datetime):
        return _datetime_key(value)
    if isinstance(value, date):
        return float(value.toordinal() * _SECONDS_PER_DAY)
    if not isinstance(value, str):
        return _OLDEST_POSSIBLE

    raw = value.strip()
    if not raw:
        return _OLDEST_POSSIBLE
    amount = _parse_amount(raw)
    if amount is not None and not math.isnan(amount):
        return amount
    parsed = _parse_date(raw)
    if parsed is None:
        return _OLDEST_POSSIBLE
    return parsed


def sort_records(records: Iterable[Record], sort_order: str) -> list[Record]:
    """Stable sort by sort key; ties keep source order in both directions."""
    descending = sort_order != SORT_OLDEST
    return sorted(records, key=lambda record: parse_sort_key(record.sort_key), reverse=descending)


def total_pages_for(count: int, page_size: int) -> int:
    page_size = max(1, page_size)
    return max(1, math.ceil(count / page_size))


def query(all_records: Iterable[Record] | None, state: FilterState, page_size: int, spec: ListSpec) -> DerivedView:
    """Filter, sort and slice one page of records."""
    page_size = max(1, page_size)
    source = list(all_records or [])

    filtered = [record for record in source if record_visible(record, state, spec)]
    ordered = sort_records(filtered, state.sort_order)

    total_count = len(ordered)
    total_pages = total_pages_for(total_count, page_size)

    current_page = state.current_page
    if not isinstance(current_page, int) or current_page < 1 or current_page > total_pages:
        current_page = 1

    start = (current_page - 1) * page_size
    return DerivedView(
        visible_records=ordered[start : start + page_size],
        total_filtered_count=total_count,
        total_pages=total_pages,
        current_page=current_page,
    )


def tab_counts(all_records: Iterable[Record], spec: ListSpec) -> dict[str, int]:
    """Badge counts per tab over the unfiltered collection."""
    records = list(all_records)
    counts = {_ALL: len(records)}
    for tab in spec.tabs:
        if tab == _ALL:
            continue
        counts[tab] = sum(1 for record in records if record.status == tab)
    return counts
