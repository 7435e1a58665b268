"""History store persisted as a JSON-lines file."""

import json
import logging
import threading
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Union
from ..types import (
    ErrorType,
    HistoryEntry,
    HistoryRecord,
    HistoryStoreInterface,
    ProcessingError,
)
from .store import order_newest_first, utc_now


class JsonLinesHistoryStore(HistoryStoreInterface):
    """
    Append-only history written one JSON object per line.

    Ids continue from the highest id already in the file, so a store
    reopened on an existing file keeps ids increasing.
    """

    def __init__(self, path: Union[str, Path],
                 clock: Optional[Callable[[], datetime]] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the store.

        Args:
            path: Path of the history file
            clock: Optional callable returning the write timestamp
            logger: Optional logger instance
        """
        self.path = Path(path)
        self.logger = logger or logging.getLogger(__name__)
        self._clock = clock or utc_now
        self._lock = threading.Lock()
        self._next_id = self._find_max_id() + 1

    def add(self, entry: HistoryEntry) -> HistoryRecord:
        """
        Append an entry to the history file.

        Raises:
            ProcessingError: If the file cannot be written
        """
        with self._lock:
            record = HistoryRecord(id=self._next_id, created_at=self._clock(), **asdict(entry))
            line = json.dumps(record.to_dict(), ensure_ascii=False)

            try:
                self._ensure_directory_exists(self.path.parent)
                with self.path.open('a', encoding='utf-8') as f:
                    f.write(line + "\n")
            except OSError as e:
                raise ProcessingError(
                    f"Failed to write history record: {str(e)}",
                    ErrorType.STORAGE,
                    context={"path": str(self.path)}
                )

            self._next_id += 1

        self.logger.debug(f"Appended history record {record.id} to {self.path}")
        return record

    def list_recent(self) -> List[HistoryRecord]:
        """Read all records from the file, newest first."""
        with self._lock:
            records = self._read_records()
        return order_newest_first(records)

    def _read_records(self) -> List[HistoryRecord]:
        """Read records, skipping lines that cannot be decoded."""
        if not self.path.exists():
            return []

        records = []
        with self.path.open('r', encoding='utf-8') as f:
            for line_number, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                try:
                    records.append(HistoryRecord.from_dict(json.loads(line)))
                except (ValueError, KeyError, TypeError) as e:
                    self.logger.warning(f"Skipping corrupt history line {line_number} "
                                        f"in {self.path}: {e}")
        return records

    def _find_max_id(self) -> int:
        records = self._read_records()
        return max((record.id for record in records), default=0)

    def _ensure_directory_exists(self, directory: Path) -> None:
        """Create the parent directory if needed."""
        if not directory.exists():
            directory.mkdir(parents=True, exist_ok=True)
            self.logger.debug(f"Created directory: {directory}")
