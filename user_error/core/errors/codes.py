# user_error/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- process exit (stable public contract) ----
EXIT_FAILURE: Final[int] = 1

# ---- rendering ----
HEADLINE_PREFIX: Final[str] = "Error:"
BULLET: Final[str] = "-"

# ---- fallback summaries ----
UNKNOWN_PROGRAM: Final[str] = "The application"
UNKNOWN_ERROR_SUFFIX: Final[str] = "encountered an unknown error."

# coercion-specific headlines
SQLITE_SUMMARY: Final[str] = "SQLite has encountered an issue"
