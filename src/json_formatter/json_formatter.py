"""Main JSON Formatter service."""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union
from .config import Settings, get_settings
from .error_handler import ErrorHandler
from .history import HistoryRecorder, InMemoryHistoryStore, JsonLinesHistoryStore
from .parser import NESTING_DEPTH_MESSAGE, JSONParser
from .processors import JSONSerializer, TransformEngine
from .profiler import PerformanceProfiler
from .tree_view import TreeRenderer
from .types import (
    HistoryRecord,
    HistoryStoreInterface,
    JSONFormatterInterface,
    Operation,
    ProcessingError,
    ProcessResult,
    ValidationResult,
)
from .upload_gate import UploadGate
from .utils.size_calculator import SizeCalculator
from .validator import JSONValidator


class JSONFormatter(JSONFormatterInterface):
    """
    Service facade over the transform, validation, upload and history
    components.

    One instance is constructed per process and shared by request
    handlers; it holds no per-request state.
    """

    def __init__(self, settings: Optional[Settings] = None,
                 history_store: Optional[HistoryStoreInterface] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON Formatter.

        Args:
            settings: Optional settings; defaults to the environment settings
            history_store: Optional history store overriding the configured one
            logger: Optional logger instance
        """
        self.settings = settings or get_settings()
        self.logger = logger or logging.getLogger(__name__)

        self.error_handler = ErrorHandler(self.logger)
        self.parser = JSONParser(self.logger)
        self.serializer = JSONSerializer()
        self.engine = TransformEngine(self.parser, self.serializer, self.error_handler, self.logger)
        self.validator = JSONValidator(self.parser, self.error_handler, self.logger)
        self.upload_gate = UploadGate(
            max_upload_bytes=self.settings.max_upload_bytes,
            parser=self.parser,
            serializer=self.serializer,
            error_handler=self.error_handler,
            logger=self.logger,
        )
        self.tree_renderer = TreeRenderer(self.settings.expand_depth, self.parser, self.logger)
        self.size_calculator = SizeCalculator(self.logger)
        self.profiler = PerformanceProfiler(self.logger)
        self.recorder = HistoryRecorder(
            history_store if history_store is not None else self._create_history_store(),
            self.logger
        )

    def _create_history_store(self) -> Optional[HistoryStoreInterface]:
        """Create the history store described by the settings."""
        if not self.settings.history_enabled:
            self.logger.info("History recording disabled")
            return None
        if self.settings.history_path:
            self.logger.info(f"Recording history to {self.settings.history_path}")
            return JsonLinesHistoryStore(self.settings.history_path, logger=self.logger)
        return InMemoryHistoryStore()

    async def process_json(self, content: str, operation: Union[Operation, str],
                           indent_size: Optional[int] = None) -> ProcessResult:
        """
        Parse content and apply the requested operation.

        Args:
            content: Raw JSON text
            operation: Operation or its string value
            indent_size: Spaces per level for format and sort-keys

        Returns:
            ProcessResult with the transformed text or the parse error

        Raises:
            ValueError: If the operation is unknown or indent_size is out of range
        """
        operation = Operation(operation)
        if indent_size is None:
            indent_size = self.settings.default_indent

        with self.profiler.profile_operation(f"process_{operation.value}", len(content)) as session:
            result = self.engine.process(content, operation, indent_size)
            session.output_size = result.processed_size or 0

        self.logger.info(f"Processed {operation.value}: success={result.success}, "
                         f"{result.original_size} -> {result.processed_size} characters")

        await self._record(content, result)
        return result

    async def validate_json(self, content: str) -> ValidationResult:
        """
        Validate content without transforming it.

        Args:
            content: Raw JSON text

        Returns:
            ValidationResult with line and column when available
        """
        with self.profiler.profile_operation("validate_json", len(content)):
            result = self.validator.validate(content)

        self.logger.info(f"Validated {len(content)} characters: valid={result.is_valid}")
        return result

    async def process_file_upload(self, file_name: str, file_content: str,
                                  file_size: int) -> ProcessResult:
        """
        Check an uploaded file and return it formatted with a 2-space indent.

        Args:
            file_name: Name of the uploaded file
            file_content: Uploaded text
            file_size: Size declared by the client

        Returns:
            ProcessResult in validate mode
        """
        with self.profiler.profile_operation("process_file_upload", len(file_content)) as session:
            result = self.upload_gate.accept_upload(file_name, file_content, file_size)
            session.output_size = result.processed_size or 0

        await self._record(file_content, result)
        return result

    async def get_history(self) -> List[HistoryRecord]:
        """
        Return recorded operations ordered newest first.

        Returns:
            List of HistoryRecord, empty when history is disabled
        """
        return await asyncio.to_thread(self.recorder.list_recent)

    async def healthcheck(self) -> Dict[str, str]:
        """Report service status with the current UTC time."""
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    async def render_tree(self, content: str, expand_depth: Optional[int] = None) -> Dict[str, Any]:
        """
        Build the tree view of content.

        Args:
            content: Raw JSON text
            expand_depth: Levels expanded by default; uses the configured depth if None

        Returns:
            Dictionary with rendered lines and the node structure, or the parse error
        """
        renderer = self.tree_renderer
        if expand_depth is not None and expand_depth != renderer.expand_depth:
            renderer = TreeRenderer(expand_depth, self.parser, self.logger)

        try:
            data = self.parser.parse(content)
            root = renderer.build(data)
            lines = renderer.render(root)
            tree = root.to_dict()
        except (ProcessingError, RecursionError) as e:
            message = str(e) if isinstance(e, ProcessingError) else NESTING_DEPTH_MESSAGE
            self.logger.warning(f"Cannot render tree: {message}")
            return {
                "success": False,
                "error": message,
                "lines": [f"Error parsing JSON: {message}"],
                "root": None,
            }

        return {
            "success": True,
            "error": None,
            "lines": lines,
            "root": tree,
        }

    def summarize_sizes(self, content: str, result: ProcessResult) -> Dict[str, Any]:
        """Size summary for a result produced from content."""
        return self.size_calculator.summarize(result, content)

    async def _record(self, content: str, result: ProcessResult) -> None:
        """Record a result without letting storage failures escape."""
        if not self.recorder.enabled:
            return
        try:
            await asyncio.to_thread(self.recorder.record, content, result)
        except Exception as e:
            self.logger.error(f"History recording failed: {e}")
