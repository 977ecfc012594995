"""
Domain - Entities and events of the graduate registry.
"""

from .entities import GraduateRecord, GraduateFields, REQUIRED_FIELDS
from .events import (
    DomainEvent,
    EventBus,
    RecordsRefreshed,
    RefreshFailed,
    RetryScheduled,
    GraduateRegistered,
    GraduateRemoved,
    GateChanged,
)

__all__ = [
    "GraduateRecord",
    "GraduateFields",
    "REQUIRED_FIELDS",
    "DomainEvent",
    "EventBus",
    "RecordsRefreshed",
    "RefreshFailed",
    "RetryScheduled",
    "GraduateRegistered",
    "GraduateRemoved",
    "GateChanged",
]
