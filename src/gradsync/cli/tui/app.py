"""
TUI App - Main Textual application for gradsync.

Provides the interactive terminal front end with:
- Public registration form
- Secret-gated graduate list with delete buttons
- Registration counter
- Transient notifications and a retry affordance
"""

from __future__ import annotations

from typing import Any, Optional

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Footer, Header, Input, Label, Static

from ...adapters.store import HttpRecordStore
from ...application.gate import GateState
from ...application.sync import SyncController
from ...core.domain.entities import GraduateFields
from ...core.ports.config_provider import AppConfig
from ...core.ports.record_store import RecordStorePort
from .presenter import TextualPresenter
from .widgets import ConfirmScreen, GraduateCard


FORM_INPUTS = ("name", "faculty", "graduation-year", "telephone")


# =============================================================================
# CSS Styles
# =============================================================================

GRADSYNC_CSS = """
Screen {
    background: $surface;
}

#form-panel {
    width: 40;
    padding: 1;
    border-right: solid $primary-darken-2;
}

#form-panel Input {
    margin-bottom: 1;
}

#list-panel {
    padding: 1;
}

#counter {
    height: auto;
    padding: 0 1;
    color: $success;
    text-style: bold;
}

#graduates-list {
    height: 1fr;
}

.graduate-card {
    height: auto;
    padding: 0 1;
    margin-bottom: 1;
    border: round $primary-darken-2;
}

.card-title {
    height: auto;
}

.card-title Label {
    width: 1fr;
}

.delete-btn {
    min-width: 5;
}

.placeholder {
    color: $text-muted;
    padding: 1;
}

.list-error {
    color: $error;
    padding: 1;
}

GateScreen, ConfirmScreen {
    align: center middle;
}

#gate-dialog, #confirm-dialog {
    width: 50;
    height: auto;
    padding: 1 2;
    background: $surface-darken-1;
    border: thick $primary;
}

#gate-error {
    color: $error;
    height: auto;
}

#gate-actions, #confirm-actions {
    height: auto;
    align: center middle;
}

#gate-actions Button, #confirm-actions Button {
    margin: 0 1;
}
"""


class GradsyncTUI(App):
    """
    The main gradsync TUI application.

    Every user action is forwarded to the SyncController; the controller
    renders back through a TextualPresenter.
    """

    TITLE = "Graduate Registry"
    SUB_TITLE = "Register and browse graduates"
    CSS = GRADSYNC_CSS

    BINDINGS = [
        Binding("v", "gate", "View/Hide Graduates", show=True),
        Binding("r", "retry", "Retry", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        store: Optional[RecordStorePort] = None,
        *args: Any,
        **kwargs: Any,
    ) -> None:
        """
        Initialize the TUI application.

        Args:
            config: Application configuration (defaults if omitted)
            store: Record Store port (HTTP store from config if omitted)
        """
        super().__init__(*args, **kwargs)
        self.config = config or AppConfig()
        self.presenter = TextualPresenter(self, self.config.sync.notification_timeout)
        self.controller = SyncController(
            store or HttpRecordStore(self.config.store),
            presenter=self.presenter,
            config=self.config.sync,
        )

    def compose(self) -> ComposeResult:
        """Compose the layout."""
        yield Header()

        with Horizontal():
            with Vertical(id="form-panel"):
                yield Label("[b]Register as a graduate[/b]")
                yield Input(placeholder="Full name", id="name")
                yield Input(placeholder="Faculty", id="faculty")
                yield Input(placeholder="Graduation year", id="graduation-year", type="integer")
                yield Input(placeholder="Telephone", id="telephone")
                yield Button("Register", id="register", variant="primary")

            with Vertical(id="list-panel"):
                yield Button("🔒 View Graduates", id="gate-button")
                with Horizontal(id="counter"):
                    yield Label("Registered graduates: ")
                    yield Static("0", id="counter-number")
                yield VerticalScroll(id="graduates-list")

        yield Footer()

    def on_mount(self) -> None:
        """Hide the gated area and fetch ahead."""
        self.query_one("#graduates-list").display = False
        self.query_one("#counter").display = False
        self.controller.start()

    async def on_unmount(self) -> None:
        await self.controller.close()

    # -------------------------------------------------------------------------
    # Gate
    # -------------------------------------------------------------------------

    @on(Button.Pressed, "#gate-button")
    def action_gate(self) -> None:
        """Open the gate, or toggle the list once unlocked."""
        self.controller.open_gate()

    def submit_secret(self, secret: str) -> None:
        # Presses queued behind a finished unlock are ignored
        if self.controller.gate.state is not GateState.UNLOCKING:
            return
        self.run_worker(self.controller.submit_secret(secret), group="gate", exclusive=True)

    def cancel_gate(self) -> None:
        self.controller.cancel_gate()

    # -------------------------------------------------------------------------
    # Registration & Deletion
    # -------------------------------------------------------------------------

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id in FORM_INPUTS:
            self.submit_form()

    @on(Button.Pressed, "#register")
    def submit_form(self) -> None:
        fields = GraduateFields(
            name=self.query_one("#name", Input).value,
            faculty=self.query_one("#faculty", Input).value,
            graduation_year=self.query_one("#graduation-year", Input).value,
            telephone=self.query_one("#telephone", Input).value,
        )
        self.run_worker(self._submit_registration(fields), group="mutations")

    async def _submit_registration(self, fields: GraduateFields) -> None:
        result = await self.controller.create(fields)
        if result.success:
            for input_id in FORM_INPUTS:
                self.query_one(f"#{input_id}", Input).value = ""

    @on(GraduateCard.DeleteRequested)
    def confirm_delete(self, event: GraduateCard.DeleteRequested) -> None:
        record = event.record

        def handle(confirmed: Optional[bool]) -> None:
            if confirmed:
                self.run_worker(self.controller.remove(record.id), group="mutations")

        self.push_screen(
            ConfirmScreen(f"Are you sure you want to delete {record.name}?"),
            handle,
        )

    # -------------------------------------------------------------------------
    # Retry
    # -------------------------------------------------------------------------

    @on(Button.Pressed, ".retry-btn")
    def action_retry(self) -> None:
        """Manually retry a failed fetch."""
        if self.controller.state.is_unlocked:
            self.run_worker(self.controller.retry(), group="refresh")


# =============================================================================
# Entry Point
# =============================================================================


def run_tui(config: Optional[AppConfig] = None) -> int:
    """
    Run the gradsync TUI application.

    Returns:
        Exit code (0 for success).
    """
    app = GradsyncTUI(config=config)
    app.run()
    return 0
