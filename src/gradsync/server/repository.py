"""
Graduate Repository - In-memory collection behind the bundled Record Store.

Nothing is persisted; restarting the server empties the collection.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4

from ..core.domain.entities import GraduateRecord


class GraduateRepository:
    """
    Thread-safe in-memory store of graduate records.

    Ids are random hex strings; records are listed newest first.
    """

    def __init__(self, records: Optional[list[GraduateRecord]] = None):
        self._lock = threading.Lock()
        self._records: dict[str, tuple[int, GraduateRecord]] = {}
        self._sequence = 0
        self.logger = logging.getLogger("GraduateRepository")

        for record in records or []:
            self._insert(record)

    def list(self) -> list[GraduateRecord]:
        """All records, sorted by creation time descending."""
        with self._lock:
            entries = list(self._records.values())

        entries.sort(
            key=lambda entry: (
                entry[1].created_at.timestamp() if entry[1].created_at else 0.0,
                entry[0],
            ),
            reverse=True,
        )
        return [record for _, record in entries]

    def create(self, fields: dict[str, Any]) -> GraduateRecord:
        """Create a record with a fresh id and timestamp."""
        record = GraduateRecord(
            id=uuid4().hex,
            name=fields["name"],
            faculty=fields["faculty"],
            graduation_year=int(fields["graduationYear"]),
            telephone=fields["telephone"],
            created_at=datetime.now(timezone.utc),
        )
        self._insert(record)
        self.logger.info(f"Created graduate {record.id}")
        return record

    def delete(self, record_id: str) -> bool:
        """Delete a record. Returns False if the id is unknown."""
        with self._lock:
            removed = self._records.pop(record_id, None)
        if removed:
            self.logger.info(f"Deleted graduate {record_id}")
        return removed is not None

    def _insert(self, record: GraduateRecord) -> None:
        with self._lock:
            self._sequence += 1
            self._records[record.id] = (self._sequence, record)
