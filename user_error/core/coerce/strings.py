# user_error/core/coerce/strings.py
"""Plain strings become a summary-only error."""

from __future__ import annotations

from user_error.core.errors import StructuredError
from user_error.utils.names import default_summary

from .dispatch import coerce


@coerce.register
def _coerce_str(value: str) -> StructuredError:
    if not value.strip():
        return StructuredError(summary=default_summary())
    return StructuredError(summary=value)
