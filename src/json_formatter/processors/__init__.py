"""Transform processors for the JSON Formatter."""

from .key_sorter import sort_keys_recursively
from .serializer import JSONSerializer
from .transform_engine import TransformEngine

__all__ = ["sort_keys_recursively", "JSONSerializer", "TransformEngine"]
