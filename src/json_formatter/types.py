"""Core type definitions for the JSON Formatter."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


class Operation(Enum):
    """Enumeration of supported transform operations."""
    VALIDATE = "validate"
    FORMAT = "format"
    MINIFY = "minify"
    SORT_KEYS = "sort-keys"

    @property
    def uses_indent(self) -> bool:
        """Whether the indent size affects this operation's output."""
        return self in (Operation.FORMAT, Operation.SORT_KEYS)


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    EMPTY = "empty"
    SIZE = "size"
    OPERATION = "operation"
    STORAGE = "storage"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class ProcessResult:
    """Result of a process or upload operation."""
    success: bool
    result_text: Optional[str]
    error_message: Optional[str]
    original_size: int
    processed_size: Optional[int]
    operation: Operation

    def __post_init__(self):
        """Validate result consistency after initialization."""
        if self.success:
            if self.result_text is None:
                raise ValueError("successful result requires result_text")
            if self.error_message is not None:
                raise ValueError("successful result cannot carry error_message")
        else:
            if self.result_text is not None:
                raise ValueError("failed result cannot carry result_text")
            if self.processed_size is not None:
                raise ValueError("failed result cannot carry processed_size")

        if self.original_size < 0:
            raise ValueError("original_size must be non-negative")

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to its wire representation."""
        return {
            "success": self.success,
            "result": self.result_text,
            "error": self.error_message,
            "originalSize": self.original_size,
            "processedSize": self.processed_size,
            "operation": self.operation.value,
        }


@dataclass(frozen=True)
class ValidationResult:
    """Result of JSON validation."""
    is_valid: bool
    error_message: Optional[str] = None
    line_number: Optional[int] = None
    column_number: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to its wire representation."""
        return {
            "isValid": self.is_valid,
            "error": self.error_message,
            "lineNumber": self.line_number,
            "columnNumber": self.column_number,
        }


@dataclass(frozen=True)
class HistoryEntry:
    """A history record before the store assigns id and timestamp."""
    original_content: str
    processed_content: Optional[str]
    operation: str
    success: bool
    error_message: Optional[str]
    original_size: int
    processed_size: Optional[int]


@dataclass(frozen=True)
class HistoryRecord:
    """A persisted history record."""
    id: int
    original_content: str
    processed_content: Optional[str]
    operation: str
    success: bool
    error_message: Optional[str]
    original_size: int
    processed_size: Optional[int]
    created_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to a JSON-serializable dictionary."""
        return {
            "id": self.id,
            "original_content": self.original_content,
            "processed_content": self.processed_content,
            "operation": self.operation,
            "success": self.success,
            "error_message": self.error_message,
            "original_size": self.original_size,
            "processed_size": self.processed_size,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HistoryRecord':
        """Create HistoryRecord from dictionary representation."""
        return cls(
            id=int(data["id"]),
            original_content=data["original_content"],
            processed_content=data.get("processed_content"),
            operation=data["operation"],
            success=bool(data["success"]),
            error_message=data.get("error_message"),
            original_size=int(data["original_size"]),
            processed_size=data.get("processed_size"),
            created_at=datetime.fromisoformat(data["created_at"]),
        )


@dataclass
class TreeNode:
    """A node of the collapsible tree view."""
    value_type: str
    display_value: str
    level: int
    key: Optional[str] = None
    index: Optional[int] = None
    expanded: bool = False
    children: List['TreeNode'] = field(default_factory=list)

    @property
    def is_container(self) -> bool:
        """Whether the node represents an object or array."""
        return self.value_type in ("object", "array")

    @property
    def label(self) -> Optional[str]:
        """Key label shown before the value."""
        if self.index is not None:
            return f"[{self.index}]"
        return self.key

    def to_dict(self) -> Dict[str, Any]:
        """Convert node and its children to a dictionary."""
        return {
            "key": self.key,
            "index": self.index,
            "type": self.value_type,
            "value": self.display_value,
            "level": self.level,
            "expanded": self.expanded,
            "children": [child.to_dict() for child in self.children],
        }


class ProcessingError(Exception):
    """Custom exception for processing errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class JSONParseError(ProcessingError):
    """Raised when input text is not valid JSON."""

    def __init__(self, message: str, position: Optional[int] = None,
                 error_type: ErrorType = ErrorType.SYNTAX):
        super().__init__(message, error_type, context={"position": position})
        self.position = position


# Abstract base classes for interfaces

class JSONFormatterInterface(ABC):
    """Abstract interface for the JSON Formatter service."""

    @abstractmethod
    async def process_json(self, content: str, operation: Operation,
                           indent_size: int = 2) -> ProcessResult:
        """Parse content and apply the requested operation."""
        pass

    @abstractmethod
    async def validate_json(self, content: str) -> ValidationResult:
        """Validate content and report the error position if any."""
        pass

    @abstractmethod
    async def process_file_upload(self, file_name: str, file_content: str,
                                  file_size: int) -> ProcessResult:
        """Check an uploaded file and return its formatted form."""
        pass

    @abstractmethod
    async def get_history(self) -> List[HistoryRecord]:
        """Return recorded operations, newest first."""
        pass


class HistoryStoreInterface(ABC):
    """Abstract interface for history storage."""

    @abstractmethod
    def add(self, entry: HistoryEntry) -> HistoryRecord:
        """Persist an entry and return the stored record."""
        pass

    @abstractmethod
    def list_recent(self) -> List[HistoryRecord]:
        """Return all records ordered newest first."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def to_process_result(self, error: Exception, operation: Operation,
                          original_size: int) -> ProcessResult:
        """Convert an error into a failed ProcessResult."""
        pass

    @abstractmethod
    def to_validation_result(self, content: str, error: Exception) -> ValidationResult:
        """Convert an error into a failed ValidationResult."""
        pass
