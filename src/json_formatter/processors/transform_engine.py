"""Transform engine applying validate, format, minify and sort-keys."""

import logging
from typing import Any, Optional, Union
from ..error_handler import ErrorHandler
from ..parser import NESTING_DEPTH_MESSAGE, JSONParser
from ..types import JSONParseError, Operation, ProcessResult, ProcessingError
from .key_sorter import sort_keys_recursively
from .serializer import JSONSerializer


class TransformEngine:
    """
    Parses JSON text and re-serializes it according to an operation.

    Parse failures are returned as failed results rather than raised;
    caller contract violations (unknown operation, bad indent) raise
    ValueError.
    """

    def __init__(self, parser: Optional[JSONParser] = None,
                 serializer: Optional[JSONSerializer] = None,
                 error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the transform engine.

        Args:
            parser: Optional JSONParser instance
            serializer: Optional JSONSerializer instance
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.parser = parser or JSONParser(self.logger)
        self.serializer = serializer or JSONSerializer()
        self.error_handler = error_handler or ErrorHandler(self.logger)

    def process(self, content: str, operation: Union[Operation, str],
                indent_size: int = 2) -> ProcessResult:
        """
        Parse content and apply the requested operation.

        Args:
            content: Raw JSON text
            operation: Operation or its string value
            indent_size: Spaces per nesting level for format and sort-keys

        Returns:
            ProcessResult with the transformed text or the parse error

        Raises:
            ValueError: If the operation is unknown or indent_size is out of range
        """
        operation = Operation(operation)
        if operation.uses_indent:
            JSONSerializer.validate_indent(indent_size)

        original_size = len(content)

        try:
            data = self.parser.parse(content)
            result_text = self._apply(operation, content, data, indent_size)
        except ProcessingError as e:
            return self.error_handler.to_process_result(e, operation, original_size)
        except RecursionError as e:
            error = JSONParseError(NESTING_DEPTH_MESSAGE)
            error.__cause__ = e
            return self.error_handler.to_process_result(error, operation, original_size)

        self.logger.debug(f"{operation.value}: {original_size} -> {len(result_text)} characters")

        return ProcessResult(
            success=True,
            result_text=result_text,
            error_message=None,
            original_size=original_size,
            processed_size=len(result_text),
            operation=operation,
        )

    def _apply(self, operation: Operation, content: str, data: Any, indent_size: int) -> str:
        if operation is Operation.VALIDATE:
            return content
        if operation is Operation.FORMAT:
            return self.serializer.pretty(data, indent_size)
        if operation is Operation.MINIFY:
            return self.serializer.minify(data)
        return self.serializer.pretty(sort_keys_recursively(data), indent_size)
