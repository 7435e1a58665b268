"""Utility functions for the JSON Formatter."""

from .size_calculator import SizeCalculator
from .validation import ValidationUtils

__all__ = ["SizeCalculator", "ValidationUtils"]
