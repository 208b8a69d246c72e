# user_error/config/__init__.py
"""
user_error Configuration

YAML is input parameters, code has defaults (YAML can be deleted).
"""

from .loader import (
    COLOR_ENV_VAR,
    CONFIG_ENV_VAR,
    RenderConfig,
    get_config,
    load_config,
    read_yaml,
    reset_config,
    set_config,
)
from .validator import COLOR_MODES, ConfigIssue, validate_config

__all__ = [
    "COLOR_ENV_VAR",
    "CONFIG_ENV_VAR",
    "COLOR_MODES",
    "ConfigIssue",
    "RenderConfig",
    "get_config",
    "load_config",
    "read_yaml",
    "reset_config",
    "set_config",
    "validate_config",
]
