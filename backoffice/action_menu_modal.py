"""Row action menu modal screen."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Click
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from backoffice.models import Record
from backoffice.rendering import format_status_badge


class ActionMenuModal(ModalScreen[str | None]):
    """Centered menu listing the row actions available for one record.

    Dismisses with the chosen action id, or None when closed by Esc or by a
    click outside the dialog.
    """

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("ctrl+c", "close", "Close"),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("enter", "choose_current", "Choose"),
    ]

    CSS = """
    ActionMenuModal {
        align: center middle;
        background: $background 60%;
    }

    #action-dialog {
        width: 48;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #action-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #action-body {
        margin-bottom: 1;
        color: white;
    }

    #action-help {
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)

    def __init__(
        self,
        record: Record,
        actions: dict[str, tuple[str, str]],
        on_outside: Callable[[], None] | None = None,
    ) -> None:
        super().__init__()
        self.record = record
        self.action_ids = list(actions)
        self.actions = actions
        self.on_outside = on_outside

    def compose(self) -> ComposeResult:
        with Container(id="action-dialog"):
            yield Static("Actions", id="action-title")
            yield Static(id="action-body")
            yield Static("J/K/↑/↓ move, Enter choose, Esc/q close", id="action-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_click(self, event: Click) -> None:
        dialog = self.query_one("#action-dialog", Container)
        if dialog.region.contains(event.screen_x, event.screen_y):
            return
        if self.on_outside is not None:
            self.on_outside()
        self.dismiss(None)
        event.stop()

    def action_close(self) -> None:
        self.dismiss(None)

    def action_move_cursor(self, delta: int) -> None:
        if not self.action_ids:
            return
        self.cursor_index = (self.cursor_index + delta) % len(self.action_ids)
        self._refresh_content()

    def action_choose_current(self) -> None:
        if not self.action_ids:
            self.dismiss(None)
            return
        self.dismiss(self.action_ids[self.cursor_index])

    def _refresh_content(self) -> None:
        body = self.query_one("#action-body", Static)
        content = Text(style="white")
        content.append(f"{self.record.id} ", style="bold")
        content.append_text(format_status_badge(self.record.status))
        content.append("\n\n")

        if not self.action_ids:
            content.append("No actions for this record.")
            body.update(content)
            return

        for idx, action_id in enumerate(self.action_ids):
            if idx > 0:
                content.append("\n")
            label, target = self.actions[action_id]
            pointer = "➤ " if idx == self.cursor_index else "  "
            # Actions that would not change the status are shown dimmed.
            style = "dim" if target == self.record.status else "white"
            content.append(f"{pointer}{label}", style=style)
        body.update(content)
