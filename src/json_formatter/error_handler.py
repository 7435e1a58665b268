"""Error handling implementation for the JSON Formatter."""

import logging
from typing import Optional
from .types import (
    ErrorHandlerInterface,
    ErrorType,
    JSONParseError,
    Operation,
    ProcessingError,
    ProcessResult,
    ValidationResult,
)
from .utils.validation import ValidationUtils


class ErrorHandler(ErrorHandlerInterface):
    """
    Converts errors raised during processing into result values.

    Malformed input and failed preconditions are expected outcomes and
    are reported as failed results; nothing here raises to the caller.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def to_process_result(self, error: Exception, operation: Operation,
                          original_size: int, message_prefix: str = "") -> ProcessResult:
        """
        Convert an error into a failed ProcessResult.

        Args:
            error: Exception raised while processing
            operation: Operation that was requested
            original_size: Character count of the input
            message_prefix: Optional text prepended to the error message

        Returns:
            ProcessResult with success=False
        """
        message = self.describe(error)
        self._log(error, f"{operation.value} failed: {message}")

        return ProcessResult(
            success=False,
            result_text=None,
            error_message=f"{message_prefix}{message}",
            original_size=original_size,
            processed_size=None,
            operation=operation,
        )

    def to_validation_result(self, content: str, error: Exception) -> ValidationResult:
        """
        Convert an error into a failed ValidationResult.

        Line and column are filled in only when the error carries a
        character offset into content.

        Args:
            content: Text that failed validation
            error: Exception raised while parsing

        Returns:
            ValidationResult with is_valid=False
        """
        message = self.describe(error)
        self._log(error, f"Validation failed: {message}")

        position = error.position if isinstance(error, JSONParseError) else None
        line_number, column_number = ValidationUtils.optional_position(content, position)

        return ValidationResult(
            is_valid=False,
            error_message=message,
            line_number=line_number,
            column_number=column_number,
        )

    @staticmethod
    def describe(error: Exception) -> str:
        """Get the user-facing message for an error."""
        if isinstance(error, ProcessingError):
            return str(error)
        return f"Unexpected error: {error}"

    def _log(self, error: Exception, message: str) -> None:
        """Log input errors as warnings and anything else as errors."""
        if isinstance(error, ProcessingError) and error.error_type != ErrorType.UNEXPECTED:
            self.logger.warning(message)
        else:
            self.logger.error(message, exc_info=error)
