# user_error/utils/names.py
"""
Program-name helpers shared by the error types and the CLI.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

from user_error.core.errors import codes


def program_name(argv: Optional[Sequence[str]] = None) -> str:
    """Stem of argv[0], or a generic placeholder when it is unavailable."""
    args = sys.argv if argv is None else argv
    if not args or not args[0]:
        return codes.UNKNOWN_PROGRAM
    return Path(args[0]).stem or codes.UNKNOWN_PROGRAM


def default_summary(argv: Optional[Sequence[str]] = None) -> str:
    """Summary used when nothing better is known, e.g. 'mytool encountered an unknown error.'"""
    return f"{program_name(argv)} {codes.UNKNOWN_ERROR_SUFFIX}"


__all__ = ["program_name", "default_summary"]
