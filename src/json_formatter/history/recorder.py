"""Best-effort recording of processed operations."""

import logging
from typing import List, Optional
from ..types import HistoryEntry, HistoryRecord, HistoryStoreInterface, ProcessResult


class HistoryRecorder:
    """
    Writes processing results to a history store.

    A failed write is logged and dropped; it never changes the result
    returned to the caller.
    """

    def __init__(self, store: Optional[HistoryStoreInterface] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the recorder.

        Args:
            store: History store, or None to disable recording
            logger: Optional logger instance
        """
        self.store = store
        self.logger = logger or logging.getLogger(__name__)

    @property
    def enabled(self) -> bool:
        return self.store is not None

    def record(self, content: str, result: ProcessResult) -> Optional[HistoryRecord]:
        """
        Record one operation.

        Args:
            content: Original input text
            result: Result returned for the input

        Returns:
            The stored record, or None if recording is disabled or failed
        """
        if self.store is None:
            return None

        entry = HistoryEntry(
            original_content=content,
            processed_content=result.result_text,
            operation=result.operation.value,
            success=result.success,
            error_message=result.error_message,
            original_size=result.original_size,
            processed_size=result.processed_size,
        )

        try:
            return self.store.add(entry)
        except Exception as e:
            self.logger.error(f"Failed to record history for {result.operation.value}: {e}")
            return None

    def list_recent(self) -> List[HistoryRecord]:
        """Return stored records newest first, or an empty list when disabled."""
        if self.store is None:
            return []
        return self.store.list_recent()
