"""Upload gate checking file size before validate-mode parsing."""

import logging
from typing import Optional
from .error_handler import ErrorHandler
from .parser import JSONParser
from .processors.serializer import JSONSerializer
from .types import Operation, ProcessingError, ProcessResult
from .utils.validation import DEFAULT_MAX_UPLOAD_BYTES, ValidationUtils

UPLOAD_INDENT = 2
PARSE_ERROR_PREFIX = "JSON Parse Error: "


class UploadGate:
    """
    Accepts uploaded JSON files.

    Size checks run before parsing. Accepted content is always
    normalized to a 2-space indented form.
    """

    def __init__(self, max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
                 parser: Optional[JSONParser] = None,
                 serializer: Optional[JSONSerializer] = None,
                 error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the upload gate.

        Args:
            max_upload_bytes: Maximum accepted declared file size
            parser: Optional JSONParser instance
            serializer: Optional JSONSerializer instance
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        if max_upload_bytes <= 0:
            raise ValueError("max_upload_bytes must be positive")

        self.max_upload_bytes = max_upload_bytes
        self.logger = logger or logging.getLogger(__name__)
        self.parser = parser or JSONParser(self.logger)
        self.serializer = serializer or JSONSerializer()
        self.error_handler = error_handler or ErrorHandler(self.logger)

    def accept_upload(self, file_name: str, file_content: str,
                      declared_size: int) -> ProcessResult:
        """
        Check and parse an uploaded file.

        Args:
            file_name: Name of the uploaded file
            file_content: Uploaded text
            declared_size: Size reported by the client

        Returns:
            ProcessResult in validate mode with the formatted content
        """
        original_size = len(file_content)
        self.logger.info(f"Received upload {file_name!r}: declared {declared_size}, "
                         f"actual {original_size} characters")

        try:
            ValidationUtils.check_upload(file_content, declared_size, self.max_upload_bytes)
        except ProcessingError as e:
            return self.error_handler.to_process_result(e, Operation.VALIDATE, original_size)

        try:
            data = self.parser.parse(file_content)
        except ProcessingError as e:
            return self.error_handler.to_process_result(
                e, Operation.VALIDATE, original_size, message_prefix=PARSE_ERROR_PREFIX
            )

        result_text = self.serializer.pretty(data, UPLOAD_INDENT)
        return ProcessResult(
            success=True,
            result_text=result_text,
            error_message=None,
            original_size=original_size,
            processed_size=len(result_text),
            operation=Operation.VALIDATE,
        )
