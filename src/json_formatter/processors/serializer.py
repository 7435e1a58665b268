"""JSON serialization policies."""

import json
from typing import Any

MIN_INDENT = 1
MAX_INDENT = 8
COMPACT_SEPARATORS = (',', ':')
PRETTY_SEPARATORS = (',', ': ')


class JSONSerializer:
    """Serializes parsed values as pretty or minified text."""

    @staticmethod
    def validate_indent(indent_size: int) -> int:
        """
        Check that an indent size is within the supported range.

        Raises:
            ValueError: If indent_size is not an integer in 1..8
        """
        if isinstance(indent_size, bool) or not isinstance(indent_size, int):
            raise ValueError(f"indent_size must be an integer, got {type(indent_size).__name__}")
        if not MIN_INDENT <= indent_size <= MAX_INDENT:
            raise ValueError(f"indent_size must be between {MIN_INDENT} and {MAX_INDENT}, "
                             f"got {indent_size}")
        return indent_size

    def pretty(self, data: Any, indent_size: int = 2) -> str:
        """Serialize with indent_size spaces per nesting level."""
        self.validate_indent(indent_size)
        return json.dumps(data, ensure_ascii=False, allow_nan=False,
                          indent=indent_size, separators=PRETTY_SEPARATORS)

    def minify(self, data: Any) -> str:
        """Serialize with no whitespace between tokens."""
        return json.dumps(data, ensure_ascii=False, allow_nan=False,
                          separators=COMPACT_SEPARATORS)
