# user_error/cli/renderers/text.py
"""
Text renderer for StructuredError.

Layout (one trailing newline per line):

    Error: <summary>
     - <reason 1>
     - <reason 2>
    <help text>

No bullet lines without reasons; no help line without help text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List

import click

from user_error.core.errors import codes

from . import styles

if TYPE_CHECKING:
    from user_error.core.errors import StructuredError


class TextRenderer:
    """Renders a StructuredError as (optionally colored) text for standard error."""

    def __init__(self, color: bool = False):
        self.color = color

    def render_lines(self, error: "StructuredError") -> List[str]:
        lines = [
            f"{styles.headline_label(codes.HEADLINE_PREFIX, self.color)} "
            f"{styles.headline_text(error.summary, self.color)}"
        ]
        for reason in error.reasons:
            lines.append(f" {styles.bullet(codes.BULLET, self.color)} {reason}")
        if error.help_text is not None:
            lines.append(styles.help_line(error.help_text, self.color))
        return lines

    def render(self, error: "StructuredError") -> str:
        return "".join(f"{line}\n" for line in self.render_lines(error))

    def write(self, error: "StructuredError") -> None:
        """Single buffered write of the rendered error to standard error."""
        # text is final; click must not strip escapes from it
        click.echo(self.render(error), err=True, nl=False, color=True)

    def write_causes(self, causes: Iterable[str]) -> None:
        for cause in causes:
            click.echo(cause, err=True, color=True)
