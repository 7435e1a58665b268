"""JSON validator reporting error line and column."""

import logging
from typing import Optional
from .error_handler import ErrorHandler
from .parser import JSONParser
from .types import ProcessingError, ValidationResult


class JSONValidator:
    """Validates JSON text without transforming it."""

    def __init__(self, parser: Optional[JSONParser] = None,
                 error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.parser = parser or JSONParser(self.logger)
        self.error_handler = error_handler or ErrorHandler(self.logger)

    def validate(self, content: str) -> ValidationResult:
        """
        Validate JSON text.

        Empty or whitespace-only input is invalid and carries no position.

        Args:
            content: Raw JSON text

        Returns:
            ValidationResult with the parser message and position on failure
        """
        try:
            self.parser.parse(content)
        except ProcessingError as e:
            return self.error_handler.to_validation_result(content, e)

        return ValidationResult(is_valid=True)
