"""JSON parser with empty-input and constant checks."""

import json
import logging
import math
from typing import Any, Optional
from .types import JSONParseError, ErrorType


EMPTY_INPUT_MESSAGE = "No JSON content provided"
MAX_NESTING_DEPTH = 128
NESTING_DEPTH_MESSAGE = f"Maximum nesting depth of {MAX_NESTING_DEPTH} exceeded"


def nesting_depth(data: Any) -> int:
    """Maximum container nesting depth of a parsed value; scalars have depth 0."""
    depth = 0
    stack = [(data, 1)]
    while stack:
        value, level = stack.pop()
        if isinstance(value, dict):
            children = value.values()
        elif isinstance(value, list):
            children = value
        else:
            continue
        depth = max(depth, level)
        stack.extend((child, level + 1) for child in children)
    return depth


class JSONParser:
    """
    JSON parser shared by the transform, validation and upload paths.

    Wraps the standard decoder so that every failure surfaces as a
    JSONParseError carrying the decoder's character offset when one
    is available.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, json_string: str) -> Any:
        """
        Parse a JSON string into a Python value.

        Args:
            json_string: JSON string to parse

        Returns:
            Parsed value (dict, list, str, int, float, bool or None)

        Raises:
            JSONParseError: If the input is empty, not valid JSON, holds a number
                outside the double range or nests deeper than MAX_NESTING_DEPTH
        """
        if not json_string.strip():
            raise JSONParseError(EMPTY_INPUT_MESSAGE, error_type=ErrorType.EMPTY)

        try:
            data = json.loads(json_string, parse_constant=self._reject_constant,
                              parse_float=self._parse_float)
        except json.JSONDecodeError as e:
            raise JSONParseError(str(e), position=e.pos) from e
        except RecursionError as e:
            raise JSONParseError(NESTING_DEPTH_MESSAGE) from e
        except ValueError as e:
            # integers longer than the interpreter's digit limit
            raise JSONParseError(f"Invalid JSON number: {e}") from e

        if nesting_depth(data) > MAX_NESTING_DEPTH:
            raise JSONParseError(NESTING_DEPTH_MESSAGE)

        self.logger.debug(f"Parsed JSON document of {len(json_string)} characters")
        return data

    @staticmethod
    def _reject_constant(name: str) -> Any:
        """Reject NaN and Infinity, which the standard decoder accepts by default."""
        raise JSONParseError(f"Invalid JSON value: {name} is not allowed")

    @staticmethod
    def _parse_float(text: str) -> float:
        value = float(text)
        if math.isinf(value):
            raise JSONParseError(f"Invalid JSON number: {text} is out of range")
        return value
