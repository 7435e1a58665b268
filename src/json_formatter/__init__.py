"""
JSON Formatter - Validate, format, minify and sort JSON documents.

Parses pasted or uploaded JSON text and re-serializes it with the
requested formatting policy, reporting size changes, a tree view and
an optional history of past operations.
"""

__version__ = "1.0.0"

from .json_formatter import JSONFormatter
from .types import Operation, ProcessResult, ValidationResult, HistoryRecord

__all__ = [
    "JSONFormatter",
    "Operation",
    "ProcessResult",
    "ValidationResult",
    "HistoryRecord",
]
