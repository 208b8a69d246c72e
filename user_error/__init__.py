"""
user_error - Well-formatted, good looking errors for CLI users

User-facing API:
- StructuredError: summary + reasons + help text, fluent builder and mutators
- UserFacing: mixin giving any exception class print()/print_and_exit()
- coerce(): turn an exception, OSError, sqlite3 error or string into a StructuredError
- print_error() / print_and_exit(): show any exception using its cause chain

Builder style:
    >>> from user_error import StructuredError
    >>> StructuredError.new("Failed to build project") \\
    ...     .reason("Database could not be parsed") \\
    ...     .reason('File "main.db" not found') \\
    ...     .help("Try: touch main.db") \\
    ...     .print_and_exit()

Unwinding a call stack:
    >>> try:
    ...     load_project()
    ... except StructuredError as err:
    ...     err.push("Failed to build project")
    ...     err.print_and_exit()

Any exception:
    >>> from user_error import print_and_exit
    >>> try:
    ...     open("main.db")
    ... except OSError as e:
    ...     print_and_exit(e)
"""

__version__ = "1.2.0"

from .core.errors import EmptySummaryError, StructuredError, codes, structured
from .core.chain import (
    ErrorLike,
    UserFacing,
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
from .core.coerce import coerce
from .config import RenderConfig, get_config, load_config, set_config

__all__ = [
    # Version
    "__version__",

    # Structured error
    "StructuredError",
    "EmptySummaryError",
    "structured",
    "codes",

    # Contract
    "ErrorLike",
    "UserFacing",
    "summary",
    "reasons",
    "helptext",
    "to_text",
    "prior_cause",
    "iter_causes",
    "into_structured",
    "print_error",
    "print_and_exit",

    # Coercion
    "coerce",

    # Configuration
    "RenderConfig",
    "get_config",
    "load_config",
    "set_config",
]
