# user_error/core/coerce/sqlite.py
"""
Embedded-database errors (the sqlite3 module).

Every sqlite3 error shares one headline; the first reason names the kind of
failure, followed by SQLite's own message and error name where available.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional, Tuple, Type

from user_error.core.chain import chain_reasons
from user_error.core.errors import StructuredError, codes

from .dispatch import coerce


logger = logging.getLogger(__name__)


# Most specific first; the first isinstance match wins.
_KINDS: Tuple[Tuple[Type[BaseException], str, Optional[str]], ...] = (
    (
        sqlite3.IntegrityError,
        "A database constraint was violated",
        "Check for duplicate keys or rows that reference missing records.",
    ),
    (
        sqlite3.DataError,
        "A value could not be stored in or read from the database",
        "e.g., a number too large for its column or a string with an embedded nul byte",
    ),
    (sqlite3.OperationalError, "The database operation could not be performed", None),
    (sqlite3.ProgrammingError, "The SQL statement or its parameters are invalid", None),
    (sqlite3.NotSupportedError, "The requested SQLite feature is not supported", None),
    (sqlite3.InternalError, "SQLite reported an internal error", None),
    (
        sqlite3.InterfaceError,
        "The sqlite3 interface was used incorrectly",
        "e.g., binding a parameter of a type SQLite cannot store",
    ),
    (sqlite3.DatabaseError, "Underlying SQLite call failed", None),
    (sqlite3.Error, "Underlying SQLite call failed", None),
    (sqlite3.Warning, "SQLite issued a warning", None),
)

# Hints keyed on SQLite's message text for the common operational failures.
_MESSAGE_HINTS: Tuple[Tuple[str, str], ...] = (
    ("no such table", "Make sure the database schema has been created."),
    ("database is locked", "Another process is using the database; try again once it finishes."),
    ("unable to open database file", "Check that the database path exists and is writable."),
    ("readonly database", "Check the permissions of the database file."),
)


def _classify(value: BaseException) -> Tuple[str, Optional[str]]:
    for kind, reason, hint in _KINDS:
        if isinstance(value, kind):
            return reason, hint
    return "Underlying SQLite call failed", None


def _message_hint(message: str) -> Optional[str]:
    lowered = message.lower()
    for needle, hint in _MESSAGE_HINTS:
        if needle in lowered:
            return hint
    return None


def _sqlite_error(value: BaseException) -> StructuredError:
    message = str(value).strip()
    kind_reason, hint = _classify(value)
    error_name = getattr(value, "sqlite_errorname", None)

    reasons: List[str] = [kind_reason]
    if message:
        reasons.append(message)
    if error_name:
        reasons.append(f"SQLite error: {error_name}")
    reasons.extend(chain_reasons(value) or [])

    logger.debug("coercing sqlite3 %s (%s)", type(value).__name__, error_name or "no error name")
    return StructuredError(
        summary=codes.SQLITE_SUMMARY,
        reasons=reasons,
        help_text=hint or _message_hint(message),
        causes=[message or type(value).__name__],
    )


@coerce.register
def _coerce_sqlite_error(value: sqlite3.Error) -> StructuredError:
    return _sqlite_error(value)


@coerce.register
def _coerce_sqlite_warning(value: sqlite3.Warning) -> StructuredError:
    return _sqlite_error(value)
