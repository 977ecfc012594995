"""
Presenter Port - What the sync controller needs from a user interface.

The controller decides *what* to show and *when*; a presenter only
knows *how*. Presenters never call the store themselves.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Sequence

from ..domain.entities import GraduateRecord


class NotificationKind(str, Enum):
    """Kinds of transient notifications."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class PresenterPort(ABC):
    """
    Abstract interface for the presentation layer.

    Notifications are transient and auto-dismissed by the presenter;
    render_error() is persistent until the next render_records() or
    render_empty().
    """

    @abstractmethod
    def render_records(self, records: Sequence[GraduateRecord]) -> None:
        """Render a non-empty list of records."""
        ...

    @abstractmethod
    def render_count(self, count: int) -> None:
        """Render the registration counter."""
        ...

    @abstractmethod
    def render_loading(self) -> None:
        """Replace the list area with a loading indicator."""
        ...

    @abstractmethod
    def render_empty(self) -> None:
        """Replace the list area with the empty state."""
        ...

    @abstractmethod
    def render_error(self, message: str, retryable: bool) -> None:
        """Replace the list area with an error and, if retryable, a retry affordance."""
        ...

    @abstractmethod
    def notify(self, message: str, kind: NotificationKind) -> None:
        """Show a transient notification."""
        ...

    @abstractmethod
    def show_gate(self) -> None:
        """Open the secret prompt."""
        ...

    @abstractmethod
    def hide_gate(self) -> None:
        """Close the secret prompt and clear its input."""
        ...

    @abstractmethod
    def render_gate_error(self, message: str) -> None:
        """Show an inline error in the secret prompt and clear its input."""
        ...

    @abstractmethod
    def set_list_visible(self, visible: bool) -> None:
        """Show or hide the list area and counter."""
        ...


class NullPresenter(PresenterPort):
    """Presenter that renders nothing (headless sessions)."""

    def render_records(self, records: Sequence[GraduateRecord]) -> None:
        pass

    def render_count(self, count: int) -> None:
        pass

    def render_loading(self) -> None:
        pass

    def render_empty(self) -> None:
        pass

    def render_error(self, message: str, retryable: bool) -> None:
        pass

    def notify(self, message: str, kind: NotificationKind) -> None:
        pass

    def show_gate(self) -> None:
        pass

    def hide_gate(self) -> None:
        pass

    def render_gate_error(self, message: str) -> None:
        pass

    def set_list_visible(self, visible: bool) -> None:
        pass
