# user_error/config/validator.py
"""
Configuration Validator

Validates raw configuration values before they are merged over the defaults.
Returns structured issues with level (warn/error), path, message, hint.
"""

from dataclasses import dataclass
from typing import Any, List, Literal, Mapping

COLOR_MODES = ("auto", "always", "never")


def normalize_color(value: Any) -> Any:
    """Case- and whitespace-insensitive color mode; non-strings pass through."""
    if isinstance(value, str):
        return value.strip().lower()
    return value


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for CLI/logging.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "color"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f" (hint: {self.hint})" if self.hint else ""
        return f"[{self.level}] {self.path}: {self.message}{hint_str}"


def validate_config(values: Mapping[str, Any]) -> List[ConfigIssue]:
    """
    Validate raw configuration values.

    Returns:
        List of issues; 'error' issues mean the value cannot be used.
    """
    issues = []

    if "color" in values and normalize_color(values["color"]) not in COLOR_MODES:
        issues.append(ConfigIssue(
            level="error",
            path="color",
            message=f"unknown color mode {values['color']!r}",
            hint="Use one of: " + ", ".join(COLOR_MODES),
        ))

    if "show_causes" in values and not isinstance(values["show_causes"], bool):
        issues.append(ConfigIssue(
            level="error",
            path="show_causes",
            message=f"show_causes must be true or false, got {values['show_causes']!r}",
        ))

    return issues
