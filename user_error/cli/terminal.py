# user_error/cli/terminal.py
"""
Terminal capability probe.

Queried on every render; nothing here is cached.
"""

from __future__ import annotations

import os
from typing import Any, Mapping, Optional

from user_error.config import get_config


def supports_color(stream: Any, environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Whether ``stream`` is a terminal that should receive ANSI styling.

    NO_COLOR (any value) and TERM=dumb disable color; FORCE_COLOR enables it;
    otherwise the stream must be a TTY.
    """
    env = os.environ if environ is None else environ
    if "NO_COLOR" in env:
        return False
    if env.get("TERM") == "dumb":
        return False
    if env.get("FORCE_COLOR"):
        return True
    isatty = getattr(stream, "isatty", None)
    if not callable(isatty):
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


def resolve_color(stream: Any, mode: Optional[str] = None) -> bool:
    """Apply the configured color mode ('auto', 'always', 'never') to ``stream``."""
    if mode is None:
        mode = get_config().color
    if mode == "always":
        return True
    if mode == "never":
        return False
    return supports_color(stream)


__all__ = ["supports_color", "resolve_color"]
