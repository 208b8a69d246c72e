# user_error/core/coerce/stdio.py
"""
Host I/O errors (OSError and its subclasses).

The summary is the error's own display text, e.g.
"[Errno 2] No such file or directory: 'main.db'".
"""

from __future__ import annotations

import logging

from user_error.core.chain import chain_reasons
from user_error.core.errors import StructuredError

from .dispatch import _display, coerce


logger = logging.getLogger(__name__)


@coerce.register
def _coerce_os_error(value: OSError) -> StructuredError:
    logger.debug("coercing I/O error %s (errno=%s)", type(value).__name__, value.errno)
    text = _display(value)
    return StructuredError(
        summary=text,
        reasons=chain_reasons(value) or [],
        causes=[text],
    )
