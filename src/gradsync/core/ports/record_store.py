"""
Record Store Port - Abstract interface for the graduate Record Store.

Implementations: HttpRecordStore (REST over requests).
All operations are coroutines; a call suspends the caller until the
store answers, the deadline expires, or the network fails.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..domain.entities import GraduateRecord
from ..exceptions import (
    RecordStoreError,
    TransientStoreError,
    StoreUnavailableError,
    StoreTimeoutError,
    RecordRejectedError,
    RecordNotFoundError,
    StoreServerError,
    MalformedResponseError,
)


class RecordStorePort(ABC):
    """
    Abstract interface for the Record Store.

    Every failure is reported as a RecordStoreError subclass so callers
    can tell transient from terminal failures.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the store name."""
        ...

    @abstractmethod
    async def list_graduates(self) -> list[GraduateRecord]:
        """
        Fetch the full record set, newest first.

        Raises:
            RecordStoreError: On any failure
        """
        ...

    @abstractmethod
    async def create_graduate(self, payload: dict[str, Any]) -> GraduateRecord:
        """
        Create a record from {name, faculty, graduationYear, telephone}.

        Returns:
            The record as stored, with its server-assigned id

        Raises:
            RecordRejectedError: If the store refuses the payload
            RecordStoreError: On any other failure
        """
        ...

    @abstractmethod
    async def delete_graduate(self, record_id: str) -> str:
        """
        Delete a record by id.

        Returns:
            The store's confirmation message

        Raises:
            RecordNotFoundError: If the id is unknown
            RecordStoreError: On any other failure
        """
        ...


__all__ = [
    "RecordStorePort",
    "RecordStoreError",
    "TransientStoreError",
    "StoreUnavailableError",
    "StoreTimeoutError",
    "RecordRejectedError",
    "RecordNotFoundError",
    "StoreServerError",
    "MalformedResponseError",
]
