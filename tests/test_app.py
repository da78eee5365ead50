"""Pilot tests for the back-office app's key handling."""

from __future__ import annotations

from unittest.mock import patch

from backoffice.action_menu_modal import ActionMenuModal
from backoffice.backoffice_app import BackOfficeApp
from backoffice.data import build_sources
from backoffice.models import ViewKind
from backoffice.reason_modal import ReasonModal


def _app() -> BackOfficeApp:
    return BackOfficeApp(sources=build_sources(use_api=False))


async def test_number_keys_switch_screens() -> None:
    app = _app()
    async with app.run_test() as pilot:
        await pilot.press("4")
        assert app.list_name == "withdrawals"
        assert app.sub_title == "Withdrawals"
        await pilot.press("1")
        assert app.list_name == "orders"


async def test_search_mode_filters_current_screen() -> None:
    app = _app()
    async with app.run_test() as pilot:
        await pilot.press("slash", "t", "a", "r", "i", "q")
        controller = app.controllers["orders"]
        assert app.input_state == "active"
        assert controller.filters.search_query == "tariq"
        assert [record.id for record in controller.view.visible_records] == ["#005"]

        await pilot.press("backspace", "escape")
        assert app.input_state == "normal"
        assert controller.filters.search_query == "tari"


async def test_tab_and_page_keys() -> None:
    app = _app()
    async with app.run_test() as pilot:
        controller = app.controllers["orders"]
        await pilot.press("right_square_bracket")
        assert controller.view.current_page == 2

        await pilot.press("tab")
        assert controller.filters.active_tab == "pending"
        assert controller.view.current_page == 1


async def test_order_drill_down_and_back() -> None:
    app = _app()
    async with app.run_test() as pilot:
        controller = app.controllers["orders"]
        await pilot.press("enter")
        assert controller.current_entry.kind is ViewKind.DETAIL

        await pilot.press("u", "i")
        entry = controller.current_entry
        assert entry.kind is ViewKind.ACTION_FORM
        assert entry.panel == "invoice"
        assert controller.navigator.depth() == 2

        await pilot.press("escape")
        assert controller.current_entry.panel == "order"
        await pilot.press("escape")
        assert controller.navigator.is_at_list()


async def test_withdrawal_approval_through_menu_and_reason() -> None:
    app = _app()
    async with app.run_test() as pilot:
        await pilot.press("4")
        controller = app.controllers["withdrawals"]
        record = controller.selected_record()

        await pilot.press("m")
        await pilot.pause()
        assert isinstance(app.screen, ActionMenuModal)
        assert controller.menu.is_open()

        await pilot.press("enter")
        await pilot.pause()
        assert isinstance(app.screen, ReasonModal)
        assert not controller.menu.is_open()

        await pilot.press("o", "k", "enter")
        await pilot.pause()
        assert controller.source.get(record.id).status == "approved"


async def test_choosing_current_status_changes_nothing() -> None:
    app = _app()
    async with app.run_test() as pilot:
        await pilot.press("4")
        controller = app.controllers["withdrawals"]
        record = next(record for record in controller.records if record.status == "approved")

        with patch.object(controller, "update_status") as update_status:
            app._on_action_chosen("withdrawals", record, "approve")
            await pilot.pause()

        update_status.assert_not_called()
        assert not isinstance(app.screen, ReasonModal)
        assert app.system_status == f"{record.id} is already approved"
