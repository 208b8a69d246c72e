# user_error/core/coerce/__init__.py
"""
Coercion of foreign error values into StructuredError.

Importing this package registers the built-in handlers:
- str
- OSError (host I/O)
- sqlite3.Error / sqlite3.Warning (embedded database)
- any other BaseException (display text + cause chain)

Applications can register their own types:

    >>> from user_error.core.coerce import coerce
    >>> @coerce.register
    ... def _(value: MyError) -> StructuredError: ...
"""

from .dispatch import coerce
from . import sqlite, stdio, strings  # noqa: F401  (registers handlers)

__all__ = ["coerce"]
