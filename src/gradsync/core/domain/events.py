"""
Domain Events - Things that happened during a session.

Events are immutable records of something that occurred.
The presentation layer and tests subscribe to them instead of polling
the sync state.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional
from uuid import uuid4


@dataclass(frozen=True)
class DomainEvent:
    """Base class for all domain events."""

    event_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def event_type(self) -> str:
        """Get the event type name."""
        return self.__class__.__name__


@dataclass(frozen=True)
class RecordsRefreshed(DomainEvent):
    """Event: The cache was replaced with a fresh snapshot ("data changed")."""

    count: int = 0
    attempts: int = 1


@dataclass(frozen=True)
class RefreshFailed(DomainEvent):
    """Event: A refresh ended in a terminal failure."""

    error: str = ""
    attempts: int = 1
    retryable: bool = False


@dataclass(frozen=True)
class RetryScheduled(DomainEvent):
    """Event: A transient refresh failure will be retried after a delay."""

    retry_number: int = 1
    max_retries: int = 3
    delay: float = 0.0
    error: str = ""


@dataclass(frozen=True)
class GraduateRegistered(DomainEvent):
    """Event: The store accepted a new graduate."""

    record_id: Optional[str] = None
    name: str = ""


@dataclass(frozen=True)
class GraduateRemoved(DomainEvent):
    """Event: The store deleted a graduate."""

    record_id: str = ""


@dataclass(frozen=True)
class GateChanged(DomainEvent):
    """Event: The gate moved to another state."""

    from_state: str = ""
    to_state: str = ""


class EventBus:
    """
    Simple event bus for publishing and subscribing to domain events.

    Subscribing to DomainEvent receives every event.
    """

    def __init__(self):
        self._handlers: dict[type, list[Callable]] = {}
        self._history: list[DomainEvent] = []

    def subscribe(self, event_type: type, handler: Callable) -> None:
        """Subscribe a handler to an event type."""
        if event_type not in self._handlers:
            self._handlers[event_type] = []
        self._handlers[event_type].append(handler)

    def publish(self, event: DomainEvent) -> None:
        """Publish an event to all subscribers."""
        self._history.append(event)

        for handler in self._handlers.get(type(event), []):
            handler(event)

        for handler in self._handlers.get(DomainEvent, []):
            handler(event)

    def get_history(self, event_type: Optional[type] = None) -> list[DomainEvent]:
        """Get published events, optionally only those of one type."""
        if event_type is None:
            return self._history.copy()
        return [e for e in self._history if isinstance(e, event_type)]

    def clear_history(self) -> None:
        """Clear event history."""
        self._history.clear()
