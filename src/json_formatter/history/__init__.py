"""Operation history storage for the JSON Formatter."""

from .store import InMemoryHistoryStore
from .file_store import JsonLinesHistoryStore
from .recorder import HistoryRecorder

__all__ = ["InMemoryHistoryStore", "JsonLinesHistoryStore", "HistoryRecorder"]
