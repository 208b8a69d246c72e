# user_error/cli/renderers/styles.py
"""
Terminal styles for rendered errors.

Each helper returns the text unchanged when color is off, so the plain
layout is exactly the styled layout with escape codes removed.
"""

import click


def headline_label(text: str, color: bool) -> str:
    """The 'Error:' label: white on red, bold."""
    if not color:
        return text
    return click.style(text, fg="white", bg="red", bold=True)


def headline_text(text: str, color: bool) -> str:
    if not color:
        return text
    return click.style(text, fg="red", bold=True)


def bullet(text: str, color: bool) -> str:
    if not color:
        return text
    return click.style(text, fg="yellow")


def help_line(text: str, color: bool) -> str:
    """Trailing hint, muted."""
    if not color:
        return text
    return click.style(text, fg="white", dim=True)
