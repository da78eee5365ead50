"""Main Textual app class."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Click, Key
from textual.reactive import reactive
from textual.widgets import Header, Static

from backoffice.action_menu_modal import ActionMenuModal
from backoffice.constant import REFUND_STATUS, SCREEN_ORDER
from backoffice.data import build_sources, row_actions_for, spec_for
from backoffice.invoice import derive_invoice, product_lines
from backoffice.list_state import ListController
from backoffice.logger import get_logger
from backoffice.models import FetchQuery, Record, RecordPage, ViewKind
from backoffice.printer import check_printer_dependencies, print_invoice
from backoffice.reason_modal import ReasonModal
from backoffice.rendering import (
    PANEL_INVOICE,
    PANEL_ORDER,
    PANEL_PRODUCT,
    PANEL_REFUND,
    PANEL_SUMMARY,
    format_page_window,
    format_panel,
    format_row_label,
    format_tabs,
)
from backoffice.source import LOAD_ERROR, LOAD_LOADING, DataSourceError, RecordSource

_ROW_MENU_ID = "row-actions"
_REASON_ACTIONS = {"approve", "reject", "hold"}


class BackOfficeApp(App):
    """A Textual app for browsing and acting on the platform's record lists."""

    TITLE = "Back Office"
    SUB_TITLE = "Orders"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #list-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #detail-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 4;
    }

    #tabs-bar {
        margin-bottom: 1;
    }

    #list-rows {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #pager {
        margin-top: 1;
    }

    #detail-body {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    input_state = reactive("normal")
    list_name = reactive("orders")

    BINDINGS = [
        Binding("tab", "cycle_tab(1)", "Next tab", priority=True),
        Binding("shift+tab", "cycle_tab(-1)", "Previous tab", priority=True),
        ("left", "change_page(-1)", "Previous page"),
        ("right", "change_page(1)", "Next page"),
        ("up", "move_selection(-1)", "Previous row"),
        ("down", "move_selection(1)", "Next row"),
        ("enter", "confirm", "Open / confirm"),
        ("backspace", "backspace", "Back / delete char"),
        ("escape", "escape", "Back / exit search"),
        ("ctrl+c", "escape", "Exit search"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, sources: dict[str, RecordSource] | None = None) -> None:
        super().__init__()
        self._debug_logger = get_logger(__name__)
        self._outside_listeners: list[Callable[[], None]] = []
        sources = sources if sources is not None else build_sources()
        self.controllers: dict[str, ListController] = {
            name: ListController(spec_for(name), sources[name], subscribe=self._subscribe_outside)
            for name in SCREEN_ORDER
        }
        self.system_status = ""
        self._log_debug("app_init")

    def _log_debug(self, message: str) -> None:
        self._debug_logger.debug(message)

    @property
    def controller(self) -> ListController:
        return self.controllers[self.list_name]

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="list-pane"):
                yield Static(classes="pane-title", id="list-title")
                yield Static(id="tabs-bar")
                yield Static("(no records)", id="list-rows")
                yield Static(id="pager")
            with Vertical(id="detail-pane"):
                yield Static("Details", classes="pane-title", id="detail-title")
                yield Static(id="detail-body")
        yield Static(id="status-bar")

    def on_mount(self) -> None:
        _, msg = check_printer_dependencies()
        self.system_status = msg
        self._log_debug(f"on_mount printer_status={msg!r}")
        for name in SCREEN_ORDER:
            self._reload(name)
        self._refresh_all()

    # -- outside interaction ------------------------------------------------

    def _subscribe_outside(self, callback: Callable[[], None]) -> Callable[[], None]:
        self._outside_listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._outside_listeners:
                self._outside_listeners.remove(callback)

        return unsubscribe

    def _dispatch_outside(self) -> None:
        for callback in list(self._outside_listeners):
            callback()

    def on_click(self, event: Click) -> None:
        if self._modal_active():
            return
        self._dispatch_outside()

    def _modal_active(self) -> bool:
        return isinstance(self.screen, (ActionMenuModal, ReasonModal))

    # -- data loading -------------------------------------------------------

    def _reload(self, name: str) -> None:
        controller = self.controllers[name]
        if not controller.source.paginates:
            controller.refresh()
            return
        ticket, fetch_query = controller.begin_refresh()
        self._log_debug(f"fetch_begin screen={name} ticket={ticket} page={fetch_query.page}")
        self.run_worker(partial(self._fetch_in_thread, name, ticket, fetch_query), thread=True)

    def _fetch_in_thread(self, name: str, ticket: int, fetch_query: FetchQuery) -> None:
        controller = self.controllers[name]
        try:
            page = controller.source.fetch(fetch_query)
        except DataSourceError as exc:
            self.call_from_thread(self._apply_failure, name, ticket, exc)
            return
        self.call_from_thread(self._apply_page, name, ticket, page)

    def _apply_page(self, name: str, ticket: int, page: RecordPage) -> None:
        accepted = self.controllers[name].apply_page(ticket, page)
        self._log_debug(f"fetch_done screen={name} ticket={ticket} accepted={accepted}")
        self._refresh_all()

    def _apply_failure(self, name: str, ticket: int, error: Exception) -> None:
        accepted = self.controllers[name].apply_failure(ticket, error)
        self._log_debug(f"fetch_failed screen={name} ticket={ticket} accepted={accepted} error={error!r}")
        self._refresh_all()

    def _after_filters_changed(self) -> None:
        if self.controller.source.paginates:
            self._reload(self.list_name)
        self._refresh_all()

    # -- keys ---------------------------------------------------------------

    def on_key(self, event: Key) -> None:
        if self._modal_active():
            return

        self._log_debug(
            f"on_key key={event.key!r} char={event.character!r} state={self.input_state!r} screen={self.list_name!r}"
        )

        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        char = event.character
        if self.input_state == "active":
            self.controller.set_search_query(self.controller.filters.search_query + char)
            self._after_filters_changed()
            event.stop()
            return

        if char.isdigit() and 1 <= int(char) <= len(SCREEN_ORDER):
            self._show_list(SCREEN_ORDER[int(char) - 1])
        elif char == "/":
            self.input_state = "active"
            self._refresh_status()
        elif char == "f":
            self.controller.cycle_dropdown()
            self._after_filters_changed()
        elif char == "s":
            self.controller.toggle_sort()
            self._after_filters_changed()
        elif char == "[":
            self.action_change_page(-1)
        elif char == "]":
            self.action_change_page(1)
        elif char == "j":
            self.action_move_selection(1)
        elif char == "k":
            self.action_move_selection(-1)
        elif char == "m":
            self._open_action_menu()
        elif char == "R":
            self._retry()
        elif char in {"p", "u", "r", "i", "P"}:
            self._drill_down(char)
        else:
            return
        event.stop()

    def action_cycle_tab(self, delta: int) -> None:
        if self._modal_active() or self.input_state != "normal":
            return
        self.controller.cycle_tab(delta)
        self._after_filters_changed()

    def action_change_page(self, delta: int) -> None:
        if self._modal_active():
            return
        controller = self.controller
        moved = controller.next_page() if delta > 0 else controller.previous_page()
        if not moved:
            return
        if controller.source.paginates:
            self._reload(self.list_name)
        self._refresh_all()

    def action_move_selection(self, delta: int) -> None:
        if self._modal_active():
            return
        self.controller.move_selection(delta)
        self._refresh_list()

    def action_confirm(self) -> None:
        if self._modal_active():
            return
        if self.input_state == "active":
            self.input_state = "normal"
            self._refresh_status()
            return

        entry = self.controller.current_entry
        if entry.kind is ViewKind.LIST:
            self._open_selected()
        elif entry.panel == PANEL_REFUND and entry.record is not None:
            self._request_refund(entry.record)

    def action_backspace(self) -> None:
        if self._modal_active():
            return
        if self.input_state == "active":
            query = self.controller.filters.search_query
            if not query:
                return
            self.controller.set_search_query(query[:-1])
            self._after_filters_changed()
            return
        self._pop_view()

    def action_escape(self) -> None:
        if self._modal_active():
            return
        if self.input_state == "active":
            self.input_state = "normal"
            self._refresh_status()
            return
        self._pop_view()

    # -- screen and view changes -------------------------------------------

    def _show_list(self, name: str) -> None:
        if name == self.list_name:
            return
        self.controller.menu.close()
        self.list_name = name
        self.sub_title = self.controller.spec.title
        self._log_debug(f"switch_screen name={name!r}")
        self._refresh_all()

    def _open_selected(self) -> None:
        record = self.controller.selected_record()
        if record is None:
            return
        panel = PANEL_ORDER if self.list_name == "orders" else None
        self.controller.push_view(ViewKind.DETAIL, record, panel)
        self._log_debug(f"push_view detail record={record.id!r} panel={panel!r}")
        self._refresh_all()

    def _drill_down(self, key: str) -> None:
        controller = self.controller
        entry = controller.current_entry
        record = entry.record
        if record is None or self.list_name != "orders":
            return

        if key == "p" and entry.panel in {PANEL_ORDER, PANEL_PRODUCT}:
            self._show_product_line(entry.panel, record)
        elif key == "u" and entry.panel == PANEL_ORDER:
            controller.push_view(ViewKind.SUB_DETAIL, record, PANEL_SUMMARY)
        elif key == "r" and entry.panel in {PANEL_SUMMARY, PANEL_INVOICE}:
            controller.replace_view(ViewKind.ACTION_FORM, record, PANEL_REFUND)
        elif key == "i" and entry.panel in {PANEL_SUMMARY, PANEL_REFUND}:
            controller.replace_view(ViewKind.ACTION_FORM, record, PANEL_INVOICE)
        elif key == "P" and entry.panel == PANEL_INVOICE:
            self._print_invoice(record)
            return
        else:
            return
        self._log_debug(f"drill_down key={key!r} entry={controller.current_entry.panel!r}")
        self._refresh_all()

    def _show_product_line(self, panel: str | None, record: Record) -> None:
        if panel == PANEL_ORDER:
            lines = product_lines(record)
            self.controller.push_view(ViewKind.SUB_DETAIL, lines[0], PANEL_PRODUCT)
            return

        # On a product line, p steps to the order's next line in place.
        order = self._live_record(Record(id=record.parent_id or record.id, status=record.status))
        lines = product_lines(order)
        ids = [line.id for line in lines]
        idx = ids.index(record.id) if record.id in ids else -1
        self.controller.replace_view(ViewKind.SUB_DETAIL, lines[(idx + 1) % len(lines)], PANEL_PRODUCT)

    def _pop_view(self) -> None:
        if self.controller.navigator.is_at_list():
            return
        self.controller.pop_view()
        self._refresh_all()

    def _retry(self) -> None:
        controller = self.controller
        if controller.load_state.status != LOAD_ERROR:
            return
        if controller.source.paginates:
            self._reload(self.list_name)
        else:
            controller.retry()
        self._refresh_all()

    def _live_record(self, record: Record) -> Record:
        for candidate in self.controller.records:
            if candidate.id == record.id:
                return candidate
        return record

    # -- row actions -------------------------------------------------------

    def _open_action_menu(self) -> None:
        controller = self.controller
        entry = controller.current_entry
        record = entry.record if entry.kind is ViewKind.DETAIL else controller.selected_record()
        actions = row_actions_for(self.list_name)
        if record is None or not actions:
            return

        record = self._live_record(record)
        controller.menu.open(_ROW_MENU_ID)
        self._log_debug(f"menu_open record={record.id!r}")
        self.push_screen(
            ActionMenuModal(record, actions, on_outside=self._dispatch_outside),
            callback=partial(self._on_action_chosen, self.list_name, record),
        )

    def _on_action_chosen(self, screen: str, record: Record, action_id: str | None) -> None:
        controller = self.controllers[screen]
        controller.menu.close()
        self._log_debug(f"menu_closed record={record.id!r} action={action_id!r}")
        if action_id is None:
            return

        label, status = row_actions_for(screen)[action_id]
        if status == record.status:
            self.system_status = f"{record.id} is already {status}"
            self._refresh_status()
            return
        if action_id in _REASON_ACTIONS:
            self.push_screen(
                ReasonModal(label, f"Reason for {record.id}"),
                callback=partial(self._on_reason_given, screen, record, status),
            )
            return
        self._apply_status(screen, record, status, reason="")

    def _on_reason_given(self, screen: str, record: Record, status: str, reason: str | None) -> None:
        if reason is None:
            return
        self._apply_status(screen, record, status, reason)

    def _request_refund(self, order: Record) -> None:
        self.push_screen(
            ReasonModal("Refund order", f"Reason for refunding {order.id}"),
            callback=partial(self._on_refund_reason, self.list_name, order),
        )

    def _on_refund_reason(self, screen: str, order: Record, reason: str | None) -> None:
        if reason is None:
            return
        if self._apply_status(screen, order, REFUND_STATUS, reason):
            self.controllers[screen].pop_view()
            self._refresh_all()

    def _apply_status(self, screen: str, record: Record, status: str, reason: str) -> bool:
        controller = self.controllers[screen]
        try:
            controller.update_status(record.id, status)
        except DataSourceError as exc:
            self.system_status = f"Update failed: {exc}"
            self._log_debug(f"status_failed record={record.id!r} error={exc!r}")
            self._refresh_status()
            return False

        self._log_debug(f"status_changed record={record.id!r} status={status!r} reason={reason!r}")
        self.system_status = f"{record.id} -> {status}"
        if controller.source.paginates:
            self._reload(screen)
        self._refresh_all()
        return True

    def _print_invoice(self, order: Record) -> None:
        invoice = derive_invoice(self._live_record(order))
        self._log_debug(f"print_enter invoice={invoice.invoice_id}")
        try:
            print_invoice(invoice)
        except Exception as exc:
            self.system_status = f"Print failed: {exc}"
            self._log_debug(f"print_failed invoice={invoice.invoice_id} error={exc!r}")
            self._refresh_status()
            return
        self.system_status = f"Printed {invoice.invoice_id}"
        self._log_debug(f"print_done invoice={invoice.invoice_id}")
        self._refresh_status()

    # -- refresh ------------------------------------------------------------

    def _refresh_all(self) -> None:
        self._refresh_list()
        self._refresh_detail()
        self._refresh_status()

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 10
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            start = max(0, selected - rows // 2)
            start = min(start, total - rows)

        return (start, start + rows)

    def _refresh_list(self) -> None:
        try:
            title = self.query_one("#list-title", Static)
            tabs = self.query_one("#tabs-bar", Static)
            rows_widget = self.query_one("#list-rows", Static)
            pager = self.query_one("#pager", Static)
        except NoMatches:
            return

        controller = self.controller
        spec = controller.spec
        view = controller.view
        filters = controller.filters

        title.update(f"{spec.title} ({view.total_filtered_count})")
        tabs.update(format_tabs(spec, filters.active_tab, controller.tab_counts()))

        pager_text = Text()
        pager_text.append_text(format_page_window(controller.window(self.size.width), view.current_page))
        pager_text.append(f"   sort: {filters.sort_order}", style="dim")
        if spec.dropdown_field:
            pager_text.append(f"   {spec.dropdown_field}: {filters.dropdown_filter}", style="dim")
        pager.update(pager_text)

        records = view.visible_records
        if not records:
            rows_widget.update("(no records)")
            return

        visible_rows = self._visible_rows(rows_widget)
        start, end = self._window_bounds(len(records), visible_rows, controller.selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            pointer = "➤ " if idx == controller.selected_index else "  "
            lines.append(pointer)
            lines.append_text(format_row_label(records[idx], spec))

        if end < len(records):
            lines.append("\n⋮", style="dim")

        rows_widget.update(lines)

    def _refresh_detail(self) -> None:
        try:
            body = self.query_one("#detail-body", Static)
        except NoMatches:
            return

        entry = self.controller.current_entry
        if entry.kind is ViewKind.LIST or entry.record is None:
            body.update("Enter to open the selected row.")
            return

        record = entry.record if entry.record.parent_id else self._live_record(entry.record)
        body.update(format_panel(record, entry.panel))

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return

        controller = self.controller
        text = Text()
        if self.input_state == "active":
            text.append("Search", style="bold reverse")
            text.append(f": {controller.filters.search_query}|\n")
            text.append("Type to filter. Enter/Esc done.", style="dim")
            bar.update(text)
            return

        state = controller.load_state
        if state.status == LOAD_LOADING:
            text.append("Loading…\n")
        elif state.status == LOAD_ERROR:
            text.append(f"Error: {state.error}  (R to retry)\n", style="bold #ffb3b3")
        else:
            text.append(f"{self.system_status or 'Ready'}\n")
        text.append(
            "1-5 screens  / search  Tab tabs  f filter  s sort  [ ] pages  j/k rows  Enter open  m actions  Esc back",
            style="dim",
        )
        bar.update(text)
