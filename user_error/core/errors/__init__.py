# user_error/core/errors/__init__.py
"""
Core error types for user_error.

This package defines the components responsible for:
- Representing user-facing errors
- The fixed constants they render and exit with

No side effects on import.
"""

from . import codes
from .exceptions import EmptySummaryError, StructuredError, structured

__all__ = [
    "codes",
    "EmptySummaryError",
    "StructuredError",
    "structured",
]
