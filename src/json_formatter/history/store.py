"""In-memory history store."""

import threading
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Callable, List, Optional
from ..types import HistoryEntry, HistoryRecord, HistoryStoreInterface


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def order_newest_first(records: List[HistoryRecord]) -> List[HistoryRecord]:
    """Sort records by created_at descending, then id descending."""
    return sorted(records, key=lambda record: (record.created_at, record.id), reverse=True)


class InMemoryHistoryStore(HistoryStoreInterface):
    """Append-only history kept in process memory."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        """
        Initialize the store.

        Args:
            clock: Optional callable returning the write timestamp
        """
        self._clock = clock or utc_now
        self._records: List[HistoryRecord] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def add(self, entry: HistoryEntry) -> HistoryRecord:
        with self._lock:
            record = HistoryRecord(id=self._next_id, created_at=self._clock(), **asdict(entry))
            self._records.append(record)
            self._next_id += 1
        return record

    def list_recent(self) -> List[HistoryRecord]:
        with self._lock:
            records = list(self._records)
        return order_newest_first(records)

    def __len__(self) -> int:
        return len(self._records)
