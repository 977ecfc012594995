"""
Textual Presenter - Renders sync controller output into the TUI.

Runs on the app's event loop (controller coroutines are app workers),
so widgets are touched directly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Button, Static

from ...core.domain.entities import GraduateRecord
from ...core.ports.presenter import NotificationKind, PresenterPort
from .widgets import GateScreen, GraduateCard

if TYPE_CHECKING:
    from .app import GradsyncTUI


SEVERITY = {
    NotificationKind.SUCCESS: "information",
    NotificationKind.INFO: "information",
    NotificationKind.WARNING: "warning",
    NotificationKind.ERROR: "error",
}


class TextualPresenter(PresenterPort):
    """PresenterPort implementation backed by a GradsyncTUI app."""

    def __init__(self, app: GradsyncTUI, notification_timeout: float = 3.0):
        self.app = app
        self.notification_timeout = notification_timeout

    @property
    def _main(self) -> Screen:
        # Modal screens may sit on top; the list lives on the base screen
        return self.app.screen_stack[0]

    @property
    def _list(self) -> VerticalScroll:
        return self._main.query_one("#graduates-list", VerticalScroll)

    def _replace_list(self, *widgets) -> None:
        container = self._list
        container.remove_children()
        if widgets:
            container.mount(*widgets)

    # -------------------------------------------------------------------------
    # List Area
    # -------------------------------------------------------------------------

    def render_records(self, records: Sequence[GraduateRecord]) -> None:
        self._replace_list(*(GraduateCard(record) for record in records))

    def render_count(self, count: int) -> None:
        self._main.query_one("#counter-number", Static).update(str(count))

    def render_loading(self) -> None:
        self._replace_list(Static("Loading graduates...", classes="placeholder"))

    def render_empty(self) -> None:
        self._replace_list(Static("No graduates registered yet.", classes="placeholder"))

    def render_error(self, message: str, retryable: bool) -> None:
        widgets = [Static(f"[b]Could not load graduates[/b]\n{message}", classes="list-error")]
        if retryable:
            widgets.append(Button("Retry", classes="retry-btn", variant="warning"))
        self._replace_list(*widgets)

    def notify(self, message: str, kind: NotificationKind) -> None:
        self.app.notify(
            message,
            severity=SEVERITY.get(kind, "information"),
            timeout=self.notification_timeout,
        )

    # -------------------------------------------------------------------------
    # Gate
    # -------------------------------------------------------------------------

    def show_gate(self) -> None:
        self.app.push_screen(GateScreen())

    def hide_gate(self) -> None:
        if isinstance(self.app.screen, GateScreen):
            self.app.pop_screen()

    def render_gate_error(self, message: str) -> None:
        if isinstance(self.app.screen, GateScreen):
            self.app.screen.show_error(message)

    def set_list_visible(self, visible: bool) -> None:
        self._main.query_one("#counter").display = visible
        self._list.display = visible
        label = "Hide Graduates" if visible else "View Graduates"
        self._main.query_one("#gate-button", Button).label = label
