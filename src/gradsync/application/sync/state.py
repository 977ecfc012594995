"""
Sync State - The client-owned view of the Record Store.

One SyncState lives for one session. It is never persisted and only the
SyncController mutates it.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ...core.domain.entities import GraduateRecord


logger = logging.getLogger("SyncState")


@dataclass
class SyncState:
    """
    Read-through snapshot of the store plus session flags.

    cache is None until the first successful refresh; an empty list means
    the store really holds no records.
    """

    cache: Optional[list[GraduateRecord]] = None
    count: int = 0
    is_loading: bool = False
    is_unlocked: bool = False
    last_error: Optional[str] = None

    @property
    def is_populated(self) -> bool:
        """True once a refresh has succeeded at least once."""
        return self.cache is not None

    def replace_cache(self, records: Sequence[GraduateRecord]) -> None:
        """
        Replace the cache with a fresh snapshot.

        Duplicate ids keep their first occurrence. count becomes the
        authoritative length.
        """
        seen: set[str] = set()
        unique: list[GraduateRecord] = []
        for record in records:
            if record.id in seen:
                logger.warning(f"Dropping duplicate record id {record.id}")
                continue
            seen.add(record.id)
            unique.append(record)

        self.cache = unique
        self.count = len(unique)
        self.last_error = None

    def bump_count(self) -> int:
        """Optimistically count one more record."""
        self.count += 1
        return self.count

    def drop_count(self) -> int:
        """Optimistically count one less record, never below zero."""
        self.count = max(0, self.count - 1)
        return self.count
