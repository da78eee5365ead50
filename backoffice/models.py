"""Domain models for the back-office list engine."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

ELLIPSIS = "ellipsis"
"""Marker placed in a page window where page numbers are skipped."""

SORT_NEWEST = "newest"
SORT_OLDEST = "oldest"

PageWindow = list[int | str]


@dataclass(frozen=True)
class Record:
    """One listable entity (order, bid, transaction, withdrawal, wallet)."""

    id: str
    status: str
    sort_key: Any = None
    fields: dict[str, Any] = field(default_factory=dict)
    parent_id: str | None = None

    def value(self, name: str) -> Any:
        """Look up an attribute by name, checking id/status before free fields."""
        if name == "id":
            return self.id
        if name == "status":
            return self.status
        return self.fields.get(name)

    def with_status(self, status: str) -> Record:
        return replace(self, status=status)


@dataclass(frozen=True)
class ListSpec:
    """Per-screen configuration of the list engine."""

    name: str
    title: str
    tabs: tuple[str, ...]
    search_fields: tuple[str, ...]
    page_size: int
    dropdown_field: str | None = None
    dropdown_options: tuple[str, ...] = ()
    columns: tuple[str, ...] = ()


@dataclass(frozen=True)
class FilterState:
    """Tab, dropdown, search, sort and page selection of one list screen."""

    active_tab: str = "all"
    dropdown_filter: str = "all"
    search_query: str = ""
    sort_order: str = SORT_NEWEST
    current_page: int = 1

    def update(self, **changes: Any) -> FilterState:
        """Return a copy with changes applied; any non-page change resets to page 1."""
        if set(changes) - {"current_page"}:
            changes["current_page"] = 1
        return replace(self, **changes)


@dataclass(frozen=True)
class DerivedView:
    """Visible slice of a record collection for one FilterState."""

    visible_records: list[Record]
    total_filtered_count: int
    total_pages: int
    current_page: int = 1


EMPTY_VIEW = DerivedView(visible_records=[], total_filtered_count=0, total_pages=1, current_page=1)


@dataclass(frozen=True)
class FetchQuery:
    """Filter inputs handed to a Data Source."""

    filters: FilterState
    page: int
    page_size: int


@dataclass(frozen=True)
class RecordPage:
    """One response of a Data Source: records plus pagination totals."""

    records: list[Record]
    total: int
    total_pages: int
    page: int = 1


class ViewKind(Enum):
    LIST = "list"
    DETAIL = "detail"
    SUB_DETAIL = "sub_detail"
    ACTION_FORM = "action_form"


@dataclass(frozen=True)
class ViewEntry:
    """What is currently on screen: a view kind, its panel and bound record."""

    kind: ViewKind
    record: Record | None = None
    panel: str | None = None


LIST_ENTRY = ViewEntry(ViewKind.LIST)
