"""Per-screen list controller: filter state, derived view and navigation."""

from __future__ import annotations

import logging

from backoffice.menu import MenuState, Subscribe
from backoffice.models import (
    EMPTY_VIEW,
    SORT_NEWEST,
    SORT_OLDEST,
    DerivedView,
    FetchQuery,
    FilterState,
    ListSpec,
    PageWindow,
    Record,
    RecordPage,
    ViewEntry,
    ViewKind,
)
from backoffice.navigator import ViewStackNavigator
from backoffice.pagination import window_for_width
from backoffice.query import query, tab_counts
from backoffice.source import LOAD_READY, LoadState, RecordLoader, RecordSource

logger = logging.getLogger(__name__)


class ListController:
    """Own one screen's FilterState and derive everything the screen renders.

    Every mutator except the page ones sends the screen back to page 1.
    Sources that paginate server-side supply rows and totals directly; for
    in-memory sources the query engine filters, sorts and slices locally.
    """

    def __init__(
        self,
        spec: ListSpec,
        source: RecordSource,
        page_size: int | None = None,
        subscribe: Subscribe | None = None,
    ) -> None:
        page_size = spec.page_size if page_size is None else page_size
        if page_size < 1:
            raise ValueError("page_size must be at least 1")

        self.spec = spec
        self.source = source
        self.page_size = page_size
        self.filters = FilterState()
        self.loader = RecordLoader(source)
        self.navigator = ViewStackNavigator(record_exists=self._record_exists)
        self.menu = MenuState(subscribe)
        self.selected_index: int | None = None
        self._seen_ids: set[str] = set()

    # -- data -------------------------------------------------------------

    @property
    def load_state(self) -> LoadState:
        return self.loader.state

    @property
    def records(self) -> list[Record]:
        page = self.loader.state.page
        if page is None:
            return []
        return list(page.records)

    def fetch_query(self) -> FetchQuery:
        page = self.filters.current_page if self.source.paginates else 1
        return FetchQuery(filters=self.filters, page=page, page_size=self.page_size)

    def begin_refresh(self) -> tuple[int, FetchQuery]:
        fetch_query = self.fetch_query()
        return self.loader.begin(fetch_query), fetch_query

    def apply_page(self, ticket: int, page: RecordPage) -> bool:
        if not self.loader.complete(ticket, page):
            return False
        self._after_data_change()
        return True

    def apply_failure(self, ticket: int, error: Exception | str) -> bool:
        return self.loader.fail(ticket, error)

    def refresh(self) -> LoadState:
        """Fetch synchronously and apply the result."""
        state = self.loader.load(self.fetch_query())
        if state.status == LOAD_READY:
            self._after_data_change()
        return state

    def retry(self) -> LoadState | None:
        state = self.loader.retry()
        if state is not None and state.status == LOAD_READY:
            self._after_data_change()
        return state

    def update_status(self, record_id: str, status: str) -> None:
        """Apply a row action to the source and re-read local data."""
        self.source.update_status(record_id, status)
        logger.info("%s %s -> %s", self.spec.name, record_id, status)
        if not self.source.paginates:
            self.refresh()

    def _after_data_change(self) -> None:
        if self.source.paginates:
            self._seen_ids.update(record.id for record in self.records)
        self._sync_page()
        self.navigator.revalidate()
        self._clamp_selection()

    def _record_exists(self, record: Record) -> bool:
        target = record.parent_id or record.id
        if self.source.paginates:
            # Only one page is loaded at a time; a record on another page still exists.
            return target in self._seen_ids
        return any(candidate.id == target for candidate in self.records)

    # -- derived ----------------------------------------------------------

    @property
    def view(self) -> DerivedView:
        page = self.loader.state.page
        if page is None:
            return EMPTY_VIEW
        if self.source.paginates:
            total_pages = max(1, page.total_pages)
            return DerivedView(
                visible_records=list(page.records)[: self.page_size],
                total_filtered_count=page.total,
                total_pages=total_pages,
                current_page=min(max(1, page.page), total_pages),
            )
        return query(page.records, self.filters, self.page_size, self.spec)

    def window(self, width: int = 0) -> PageWindow:
        view = self.view
        return window_for_width(view.current_page, view.total_pages, width)

    def tab_counts(self) -> dict[str, int]:
        if self.source.paginates:
            return {}
        return tab_counts(self.records, self.spec)

    @property
    def current_entry(self) -> ViewEntry:
        return self.navigator.current()

    # -- filter mutators --------------------------------------------------

    def _set_filters(self, filters: FilterState) -> None:
        self.filters = filters
        self.menu.close()
        self._sync_page()
        self.selected_index = 0 if self.view.visible_records else None

    def set_tab(self, tab: str) -> None:
        self._set_filters(self.filters.update(active_tab=tab))

    def set_dropdown_filter(self, value: str) -> None:
        self._set_filters(self.filters.update(dropdown_filter=value))

    def set_search_query(self, text: str) -> None:
        self._set_filters(self.filters.update(search_query=text))

    def set_sort_order(self, order: str) -> None:
        self._set_filters(self.filters.update(sort_order=order))

    def cycle_tab(self, delta: int) -> None:
        tabs = list(self.spec.tabs) or ["all"]
        idx = tabs.index(self.filters.active_tab) if self.filters.active_tab in tabs else 0
        self.set_tab(tabs[(idx + delta) % len(tabs)])

    def cycle_dropdown(self, delta: int = 1) -> None:
        options = ["all", *self.spec.dropdown_options]
        current = self.filters.dropdown_filter
        idx = options.index(current) if current in options else 0
        self.set_dropdown_filter(options[(idx + delta) % len(options)])

    def toggle_sort(self) -> None:
        order = SORT_OLDEST if self.filters.sort_order == SORT_NEWEST else SORT_NEWEST
        self.set_sort_order(order)

    # -- page mutators ----------------------------------------------------

    def go_to_page(self, page: int) -> bool:
        """Move to a page; out-of-range requests are ignored."""
        view = self.view
        if page < 1 or page > view.total_pages or page == view.current_page:
            return False
        self.filters = self.filters.update(current_page=page)
        self.menu.close()
        self.selected_index = 0
        self._clamp_selection()
        return True

    def next_page(self) -> bool:
        return self.go_to_page(self.view.current_page + 1)

    def previous_page(self) -> bool:
        return self.go_to_page(self.view.current_page - 1)

    def _sync_page(self) -> None:
        if self.source.paginates:
            return
        effective = self.view.current_page
        if effective != self.filters.current_page:
            self.filters = self.filters.update(current_page=effective)

    # -- row selection ----------------------------------------------------

    def move_selection(self, delta: int) -> None:
        rows = self.view.visible_records
        if not rows:
            self.selected_index = None
            return
        if self.selected_index is None:
            self.selected_index = 0 if delta > 0 else len(rows) - 1
        else:
            self.selected_index = (self.selected_index + delta) % len(rows)

    def selected_record(self) -> Record | None:
        rows = self.view.visible_records
        if self.selected_index is None or not (0 <= self.selected_index < len(rows)):
            return None
        return rows[self.selected_index]

    def _clamp_selection(self) -> None:
        rows = self.view.visible_records
        if not rows:
            self.selected_index = None
        elif self.selected_index is None:
            self.selected_index = 0
        elif self.selected_index >= len(rows):
            self.selected_index = len(rows) - 1

    # -- navigation -------------------------------------------------------

    def push_view(self, kind: ViewKind, record: Record | None, panel: str | None = None) -> ViewEntry:
        self.menu.close()
        return self.navigator.push(kind, record, panel)

    def replace_view(self, kind: ViewKind, record: Record | None, panel: str | None = None) -> ViewEntry:
        self.menu.close()
        return self.navigator.replace_at(kind, record, panel)

    def pop_view(self) -> ViewEntry:
        self.menu.close()
        return self.navigator.pop()
