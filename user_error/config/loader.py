# user_error/config/loader.py
"""
Configuration Loader

Loads render configuration from YAML with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- Environment overrides YAML (USER_ERROR_COLOR)
- Works without YAML
"""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Literal, Mapping, Optional

import yaml

from .validator import COLOR_MODES, ConfigIssue, normalize_color, validate_config


logger = logging.getLogger(__name__)

COLOR_ENV_VAR = "USER_ERROR_COLOR"
CONFIG_ENV_VAR = "USER_ERROR_CONFIG"


@dataclass(frozen=True)
class RenderConfig:
    """
    How errors are presented.

    color: 'auto' probes the terminal, 'always'/'never' force it.
    show_causes: print() also lists the foreign errors absorbed by coercion.
    """

    color: Literal["auto", "always", "never"] = "auto"
    show_causes: bool = False

    @classmethod
    def default(cls) -> "RenderConfig":
        return cls()

    @classmethod
    def from_yaml(
        cls,
        config_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "RenderConfig":
        """
        Load configuration from YAML, then apply environment overrides.

        Args:
            config_path: Path to YAML file. If None, tries:
                1. $USER_ERROR_CONFIG
                2. ~/.user_error/config.yml
            environ: Environment mapping (defaults to os.environ)

        Returns:
            RenderConfig (always has code defaults as fallback)
        """
        env = os.environ if environ is None else environ
        config = cls.default()

        yaml_data = read_yaml(config_path, env)
        if yaml_data:
            config = _merge_config(config, yaml_data)

        color = env.get(COLOR_ENV_VAR)
        if color:
            config = _merge_config(config, {"color": color})

        return config

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _candidate_paths(config_path: Optional[Path], env: Mapping[str, str]) -> list:
    if config_path:
        return [Path(config_path)]
    paths = []
    if env.get(CONFIG_ENV_VAR):
        paths.append(Path(env[CONFIG_ENV_VAR]))
    paths.append(Path.home() / ".user_error" / "config.yml")
    return paths


def read_yaml(config_path: Optional[Path] = None, env: Optional[Mapping[str, str]] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    env = os.environ if env is None else env
    for path in _candidate_paths(config_path, env):
        if not path.exists():
            continue
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning("ignoring unreadable config %s: %s", path, e)
            return None
        if data is None:
            return None
        if not isinstance(data, dict):
            logger.warning("ignoring config %s: top level must be a mapping", path)
            return None
        logger.debug("loaded config from %s", path)
        return data
    return None


def _merge_config(default_instance: RenderConfig, yaml_data: Mapping[str, Any]) -> RenderConfig:
    """Merge known keys into the defaults; invalid values keep the default."""
    known = {f.name for f in fields(RenderConfig)}
    updates = {k: v for k, v in yaml_data.items() if k in known}
    if "color" in updates:
        updates["color"] = normalize_color(updates["color"])
    for key in sorted(set(yaml_data) - known):
        logger.warning("ignoring unknown config key %r", key)

    for issue in validate_config(updates):
        logger.warning("%s", issue)
        if issue.level == "error":
            updates.pop(issue.path, None)

    return replace(default_instance, **updates)


def load_config(config_path: Optional[Path] = None) -> RenderConfig:
    """
    Load render configuration.

    Note:
        - If YAML is not found or invalid, returns code defaults
        - Invalid individual values are reported and replaced by defaults
    """
    return RenderConfig.from_yaml(config_path)


_active: Optional[RenderConfig] = None


def get_config() -> RenderConfig:
    """The process-wide configuration, loaded on first use."""
    global _active
    if _active is None:
        _active = load_config()
    return _active


def set_config(config: RenderConfig) -> None:
    global _active
    _active = config


def reset_config() -> None:
    """Drop the loaded configuration; the next get_config() reloads it."""
    global _active
    _active = None


__all__ = [
    "COLOR_MODES",
    "ConfigIssue",
    "RenderConfig",
    "load_config",
    "read_yaml",
    "get_config",
    "set_config",
    "reset_config",
]
