# user_error/core/coerce/dispatch.py
"""
One-way conversion of foreign error values into StructuredError.

``coerce`` is a singledispatch function: the most specific registered type
wins, so sqlite3.Error and OSError handlers take precedence over the
BaseException fallback. Foreign errors are only read through their display
form and cause chain, never their internal fields.
"""

from __future__ import annotations

import logging
from functools import singledispatch
from typing import Any

from user_error.core.chain import into_structured, to_text
from user_error.core.errors import StructuredError


logger = logging.getLogger(__name__)


@singledispatch
def coerce(value: Any) -> StructuredError:
    raise TypeError(
        f"cannot coerce {type(value).__name__} into StructuredError; "
        "expected an exception, a string or a StructuredError"
    )


@coerce.register
def _coerce_structured(value: StructuredError) -> StructuredError:
    return value.copy()


@coerce.register
def _coerce_exception(value: BaseException) -> StructuredError:
    logger.debug("coercing %s via cause chain", type(value).__name__)
    err = into_structured(value)
    err.causes.append(_display(value))
    return err


def _display(value: BaseException) -> str:
    text = to_text(value)
    return text if text.strip() else type(value).__name__
