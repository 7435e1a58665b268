"""Recursive object key sorting."""

from typing import Any


def utf16_sort_key(key: str) -> bytes:
    """Sort key ordering strings by UTF-16 code unit, as browser key sorting does."""
    return key.encode('utf-16-be', 'surrogatepass')


def sort_keys_recursively(value: Any) -> Any:
    """
    Return a copy of value with object keys sorted at every depth.

    Keys are ordered by UTF-16 code unit, so characters above U+FFFF sort
    with their surrogate pairs (before U+E000..U+FFFF). Array elements are
    sorted internally but keep their positions.

    Args:
        value: Parsed JSON value

    Returns:
        New value with sorted keys; scalars are returned unchanged
    """
    if isinstance(value, dict):
        return {key: sort_keys_recursively(value[key])
                for key in sorted(value, key=utf16_sort_key)}
    if isinstance(value, list):
        return [sort_keys_recursively(item) for item in value]
    return value
