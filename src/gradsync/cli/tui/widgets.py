"""
TUI Widgets - Cards and modal screens of the graduate registry.
"""

from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static

from ...core.domain.entities import GraduateRecord


class GraduateCard(Vertical):
    """One graduate in the list, with a delete button."""

    class DeleteRequested(Message):
        """Posted when the card's delete button is pressed."""

        def __init__(self, record: GraduateRecord) -> None:
            super().__init__()
            self.record = record

    def __init__(self, record: GraduateRecord) -> None:
        super().__init__(classes="graduate-card")
        self.record = record

    def compose(self) -> ComposeResult:
        with Horizontal(classes="card-title"):
            yield Label(f"[b]{self.record.name}[/b]")
            yield Button("✕", classes="delete-btn", variant="error")
        yield Static(f"🎓 {self.record.faculty}")
        yield Static(f"📅 {self.record.graduation_year}")
        yield Static(f"📞 {self.record.telephone}")

    @on(Button.Pressed, ".delete-btn")
    def request_delete(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(self.DeleteRequested(self.record))


class GateScreen(ModalScreen[None]):
    """Secret prompt shown while the gate is unlocking."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=True),
    ]

    def compose(self) -> ComposeResult:
        with Vertical(id="gate-dialog"):
            yield Label("Enter password to view graduates", id="gate-title")
            yield Input(placeholder="Password", password=True, id="gate-input")
            yield Static("", id="gate-error")
            with Horizontal(id="gate-actions"):
                yield Button("Unlock", id="unlock", variant="primary")
                yield Button("Cancel", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#gate-input", Input).focus()

    def show_error(self, message: str) -> None:
        """Show an inline error and clear the input."""
        self.query_one("#gate-error", Static).update(message)
        gate_input = self.query_one("#gate-input", Input)
        gate_input.value = ""
        gate_input.focus()

    @on(Button.Pressed, "#unlock")
    @on(Input.Submitted, "#gate-input")
    def submit(self) -> None:
        secret = self.query_one("#gate-input", Input).value
        self.app.submit_secret(secret)

    @on(Button.Pressed, "#cancel")
    def action_cancel(self) -> None:
        self.app.cancel_gate()


class ConfirmScreen(ModalScreen[bool]):
    """Yes/no confirmation for destructive actions."""

    BINDINGS = [
        Binding("escape", "deny", "Cancel", show=False),
    ]

    def __init__(self, question: str) -> None:
        super().__init__()
        self.question = question

    def compose(self) -> ComposeResult:
        with Vertical(id="confirm-dialog"):
            yield Label(self.question, id="confirm-question")
            with Horizontal(id="confirm-actions"):
                yield Button("Delete", id="confirm", variant="error")
                yield Button("Cancel", id="deny")

    @on(Button.Pressed, "#confirm")
    def confirm(self) -> None:
        self.dismiss(True)

    @on(Button.Pressed, "#deny")
    def action_deny(self) -> None:
        self.dismiss(False)
