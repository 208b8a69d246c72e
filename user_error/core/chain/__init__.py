# user_error/core/chain/__init__.py
from .contract import (
    ErrorLike,
    UserFacing,
    chain_reasons,
    helptext,
    into_structured,
    iter_causes,
    print_and_exit,
    print_error,
    prior_cause,
    reasons,
    summary,
    to_text,
)

__all__ = [
    "ErrorLike",
    "UserFacing",
    "chain_reasons",
    "helptext",
    "into_structured",
    "iter_causes",
    "print_and_exit",
    "print_error",
    "prior_cause",
    "reasons",
    "summary",
    "to_text",
]
