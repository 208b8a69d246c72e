# user_error/core/errors/exceptions.py
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, NoReturn, Optional

from . import codes
from user_error.utils.names import default_summary


logger = logging.getLogger(__name__)


class EmptySummaryError(ValueError):
    """Raised when a StructuredError would end up with an empty headline."""

    def __init__(self, operation: str = "construct") -> None:
        super().__init__(f"cannot {operation} a StructuredError with an empty summary")
        self.operation = operation


def _require_summary(summary: Any, operation: str) -> str:
    text = "" if summary is None else str(summary)
    if not text.strip():
        raise EmptySummaryError(operation)
    return text


@dataclass(eq=False)
class StructuredError(Exception):
    """
    A user-facing error: one headline, explanatory bullets, an optional hint.

    Build it fluently and hand it to the user:

        >>> err = (
        ...     StructuredError.new("Failed to build project")
        ...     .reason("Database could not be parsed")
        ...     .reason('File "main.db" not found')
        ...     .help("Try: touch main.db")
        ... )
        >>> print(err.render(color=False), end="")
        Error: Failed to build project
         - Database could not be parsed
         - File "main.db" not found
        Try: touch main.db

    ``causes`` keeps the display text of foreign errors that were coerced into
    this one. It is separate from ``reasons`` and survives edits to them.
    """
    summary: str
    reasons: List[str] = field(default_factory=list)
    help_text: Optional[str] = None
    causes: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.summary = _require_summary(self.summary, "construct")
        self.reasons = [str(r) for r in self.reasons]
        self.causes = [str(c) for c in self.causes]
        if self.help_text is not None:
            self.help_text = str(self.help_text)
        super().__init__(self.summary)

    def __str__(self) -> str:
        return self.summary

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StructuredError):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = Exception.__hash__

    # -------- factories --------

    @classmethod
    def new(cls, summary: str) -> "StructuredError":
        return cls(summary=summary)

    @classmethod
    def default(cls) -> "StructuredError":
        """Error whose summary names the running program, for when nothing else is known."""
        return cls(summary=default_summary())

    @classmethod
    def from_error(cls, value: Any) -> "StructuredError":
        """
        Coerce a foreign error (exception, sqlite3/OSError, plain string) into a StructuredError.

        See user_error.core.coerce for the per-type rules.
        """
        from user_error.core.coerce import coerce
        return coerce(value)

    # -------- builder --------

    def reason(self, text: str) -> "StructuredError":
        self.reasons.append(str(text))
        return self

    def help(self, text: str) -> "StructuredError":
        self.help_text = str(text)
        return self

    # -------- mutators --------

    def update(self, new_summary: str) -> None:
        self.summary = _require_summary(new_summary, "update")
        self.args = (self.summary,)

    def push(self, new_summary: str) -> None:
        """
        Replace the summary, keeping the old one as the first reason.

        Repeated pushes leave the most recently superseded summary at
        ``reasons[0]``, so unwinding a call stack reads top-down:

            >>> err = StructuredError.new("orig")
            >>> err.push("A"); err.push("B")
            >>> err.summary, err.reasons
            ('B', ['A', 'orig'])
        """
        new_summary = _require_summary(new_summary, "push")
        self.reasons.insert(0, self.summary)
        self.summary = new_summary
        self.args = (self.summary,)

    def add_reason(self, text: str) -> None:
        self.reasons.append(str(text))

    def set_help(self, text: str) -> None:
        self.help_text = str(text)

    def clear_reasons(self) -> None:
        self.reasons.clear()

    def clear_help(self) -> None:
        self.help_text = None

    # -------- output --------

    def render(self, *, color: Optional[bool] = None) -> str:
        """
        Format the error as text.

        Args:
            color: Force styling on/off. None asks the terminal probe
                (and configuration) for standard error, once per call.
        """
        from user_error.cli.renderers import TextRenderer
        from user_error.cli.terminal import resolve_color

        if color is None:
            color = resolve_color(sys.stderr)
        return TextRenderer(color=color).render(self)

    def print(self, *, color: Optional[bool] = None) -> None:
        """Write the rendered error to standard error."""
        from user_error.cli.renderers import TextRenderer
        from user_error.cli.terminal import resolve_color
        from user_error.config import get_config

        show_causes = get_config().show_causes
        if color is None:
            color = resolve_color(sys.stderr)
        TextRenderer(color=color).write(self)
        if show_causes:
            self.print_causes()

    def print_causes(self) -> None:
        """Write the display text of every absorbed foreign error to standard error."""
        from user_error.cli.renderers import TextRenderer

        TextRenderer(color=False).write_causes(self.causes)

    def print_and_exit(self, *, color: Optional[bool] = None) -> NoReturn:
        """Print, then terminate the process with status 1. Never returns."""
        self.print(color=color)
        logger.debug("exiting with status %d: %s", codes.EXIT_FAILURE, self.summary)
        sys.exit(codes.EXIT_FAILURE)

    # -------- serialization --------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary,
            "reasons": list(self.reasons),
            "help_text": self.help_text,
            "causes": list(self.causes),
        }

    def copy(self) -> "StructuredError":
        return StructuredError(
            summary=self.summary,
            reasons=list(self.reasons),
            help_text=self.help_text,
            causes=list(self.causes),
        )


def structured(
    summary: str,
    reasons: Iterable[str] = (),
    help_text: Optional[str] = None,
) -> StructuredError:
    """Build a StructuredError in one call from hard-coded parts."""
    return StructuredError(summary=summary, reasons=list(reasons), help_text=help_text)
