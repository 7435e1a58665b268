"""Size calculation utilities for processed JSON text."""

import logging
import math
from typing import Any, Dict, Optional
from ..types import ProcessResult


class SizeCalculator:
    """
    Utility class for comparing original and processed text sizes.

    Sizes on results are character counts; UTF-8 byte sizes are
    reported alongside for display.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the size calculator.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def character_count(text: str) -> int:
        """Count characters in text."""
        return len(text)

    @staticmethod
    def byte_size(text: str) -> int:
        """Calculate the UTF-8 encoded size of text in bytes."""
        return len(text.encode('utf-8'))

    @staticmethod
    def size_change_percent(original_size: int, processed_size: Optional[int]) -> Optional[int]:
        """
        Calculate the rounded percent change from original to processed size.

        Args:
            original_size: Size before processing
            processed_size: Size after processing, or None if processing failed

        Returns:
            Signed percent change, or None when it cannot be computed
        """
        if processed_size is None or original_size <= 0:
            return None
        change = (processed_size - original_size) / original_size * 100
        return math.floor(change + 0.5)

    def format_size_change(self, original_size: int, processed_size: Optional[int]) -> Optional[str]:
        """Format the percent change with an explicit sign, e.g. '+12%'."""
        percent = self.size_change_percent(original_size, processed_size)
        if percent is None:
            return None
        sign = "+" if percent > 0 else ""
        return f"{sign}{percent}%"

    @staticmethod
    def format_bytes(size: int) -> str:
        """Format a byte count for display."""
        if size < 1024:
            return f"{size} B"
        if size < 1024 * 1024:
            return f"{size / 1024:.1f} KB"
        return f"{size / 1024 / 1024:.1f} MB"

    def summarize(self, result: ProcessResult, original_text: Optional[str] = None) -> Dict[str, Any]:
        """
        Build a size summary for a processing result.

        Args:
            result: ProcessResult to summarize
            original_text: Optional input text for byte size reporting

        Returns:
            Dictionary with character counts, byte sizes and percent change
        """
        summary = {
            "original_chars": result.original_size,
            "processed_chars": result.processed_size,
            "original_bytes": self.byte_size(original_text) if original_text is not None else None,
            "processed_bytes": self.byte_size(result.result_text) if result.result_text is not None else None,
            "change_percent": self.size_change_percent(result.original_size, result.processed_size),
            "change": self.format_size_change(result.original_size, result.processed_size),
        }
        self.logger.debug(f"Size summary for {result.operation.value}: {summary}")
        return summary
