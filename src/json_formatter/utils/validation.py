"""Validation utilities for error positions and upload preconditions."""

from typing import Optional, Tuple
from ..types import ProcessingError, ErrorType

DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024
SIZE_MISMATCH_MESSAGE = "File size mismatch: declared size does not match content length"


class ValidationUtils:
    """Utility class for validating inputs before parsing."""

    @staticmethod
    def locate_position(content: str, offset: int) -> Tuple[int, int]:
        """
        Convert a character offset into a 1-based line and column.

        Args:
            content: Text the offset points into
            offset: Zero-based character offset

        Returns:
            Tuple of (line_number, column_number)
        """
        offset = max(0, min(offset, len(content)))
        line_number = content.count("\n", 0, offset) + 1
        column_number = offset - content.rfind("\n", 0, offset)
        return line_number, column_number

    @staticmethod
    def size_limit_message(max_bytes: int) -> str:
        """Build the rejection message for an oversized upload."""
        megabytes = max_bytes / (1024 * 1024)
        limit = f"{megabytes:g}MB" if megabytes >= 1 else f"{max_bytes} bytes"
        return f"File size exceeds maximum limit of {limit}"

    @staticmethod
    def check_upload(file_content: str, declared_size: int,
                     max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES) -> None:
        """
        Check upload size constraints without parsing the content.

        Args:
            file_content: Uploaded text
            declared_size: Size reported by the client
            max_bytes: Maximum accepted declared size

        Raises:
            ProcessingError: With ErrorType.SIZE if a constraint fails
        """
        if declared_size > max_bytes:
            raise ProcessingError(
                ValidationUtils.size_limit_message(max_bytes),
                ErrorType.SIZE,
                context={"declared_size": declared_size, "max_bytes": max_bytes}
            )

        if declared_size != len(file_content):
            raise ProcessingError(
                SIZE_MISMATCH_MESSAGE,
                ErrorType.SIZE,
                context={"declared_size": declared_size, "actual_size": len(file_content)}
            )

    @staticmethod
    def optional_position(content: str, offset: Optional[int]) -> Tuple[Optional[int], Optional[int]]:
        """Locate an offset when one is available, otherwise return (None, None)."""
        if offset is None:
            return None, None
        return ValidationUtils.locate_position(content, offset)
