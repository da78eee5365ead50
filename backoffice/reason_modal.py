"""Reason entry modal screen for row actions."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

MAX_REASON_LENGTH = 200


class ReasonModal(ModalScreen[str | None]):
    """Prompt for a reason before approving, rejecting, holding or refunding."""

    CSS = """
    ReasonModal {
        align: center middle;
        background: $background 60%;
    }

    #reason-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #reason-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #reason-prompt {
        color: white;
        margin-bottom: 1;
    }

    #reason-value {
        border: heavy $secondary;
        padding: 0 1;
        color: white;
        margin-bottom: 1;
    }

    #reason-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #reason-help {
        color: #dddddd;
    }
    """

    def __init__(self, title: str, prompt: str, required: bool = True) -> None:
        super().__init__()
        self.title_text = title
        self.prompt_text = prompt
        self.required = required
        self.value = ""
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="reason-dialog"):
            yield Static(self.title_text, id="reason-title")
            yield Static(self.prompt_text, id="reason-prompt")
            yield Static(id="reason-value")
            yield Static(id="reason-error")
            yield Static("Enter confirm. Backspace delete. Esc/Ctrl+C cancel.", id="reason-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
            return

        if event.key == "enter":
            self._confirm()
            event.stop()
            return

        if event.key == "backspace":
            if self.value:
                self.value = self.value[:-1]
                self.error = ""
                self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            if len(self.value) < MAX_REASON_LENGTH:
                self.value += event.character
            self.error = ""
            self._refresh_content()
            event.stop()

    def _confirm(self) -> None:
        reason = self.value.strip()
        if self.required and not reason:
            self.error = "A reason is required."
            self._refresh_content()
            return
        self.dismiss(reason)

    def _refresh_content(self) -> None:
        value_widget = self.query_one("#reason-value", Static)
        error_widget = self.query_one("#reason-error", Static)
        value_widget.update(f"{self.value}|")
        error_widget.update(self.error or "")
