# user_error/cli/renderers/__init__.py
"""
Renderers for user_error

Renderers convert a StructuredError into a display format:
- Text: the headline / bullets / hint layout written to standard error
"""

from .text import TextRenderer

__all__ = [
    "TextRenderer",
]
