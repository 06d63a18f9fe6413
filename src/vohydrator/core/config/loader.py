"""
Configuration loading with multi-layer merging.

Implements the configuration precedence chain:
    defaults < user config < project config < env vars
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from .models import VohydratorConfig

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Loaded configs per resolved project directory, reused for the session
_config_cache: dict[Path, VohydratorConfig] = {}


def get_xdg_config_home() -> Path:
    """
    Get XDG config home directory.

    Returns:
        Path to config directory (defaults to ~/.config)
    """
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return Path.home() / ".config"


def get_user_config_path() -> Path:
    """
    Get path to user configuration file.

    Returns:
        Path to ~/.config/vohydrator/config.json (or XDG equivalent)
    """
    return get_xdg_config_home() / "vohydrator" / "config.json"


def get_project_config_path(cwd: Path | None = None) -> Path:
    """
    Get path to project configuration file.

    Args:
        cwd: Working directory to search from (defaults to current directory)

    Returns:
        Path to .vohydrator.json in the project root
    """
    if cwd is None:
        cwd = Path.cwd()
    return cwd / ".vohydrator.json"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries.

    Values in `override` take precedence over values in `base`.
    Nested dicts are merged, not replaced.

    Example:
        >>> base = {"hydration": {"max_depth": 8, "null_as_missing": True}}
        >>> override = {"hydration": {"max_depth": 16}}
        >>> deep_merge(base, override)
        {'hydration': {'max_depth': 16, 'null_as_missing': True}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_json_file(path: Path) -> dict[str, Any] | None:
    """
    Load a JSON file, returning None if it doesn't exist or is invalid.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON as dict, or None if file doesn't exist or can't be parsed
    """
    if not path.exists():
        return None

    try:
        with path.open() as f:
            data = json.load(f)
            if isinstance(data, dict):
                return data
            logger.warning(f"Ignoring config at {path}: top level must be an object")
            return None
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Failed to parse config at {path}: {e}")
        return None


def apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    Env vars have the highest precedence and override all config files.

    Supported env vars:
        VOHYDRATOR_MAX_DEPTH - overrides hydration.max_depth
        VOHYDRATOR_NULL_AS_MISSING - overrides hydration.null_as_missing
        VOHYDRATOR_LOG_LEVEL - overrides logging.level

    Args:
        config_dict: Configuration dictionary to override

    Returns:
        Configuration dictionary with env var overrides applied
    """
    result = config_dict.copy()

    if depth_str := os.environ.get("VOHYDRATOR_MAX_DEPTH"):
        try:
            depth = int(depth_str)
            if depth < 1:
                logger.warning(f"VOHYDRATOR_MAX_DEPTH must be >= 1, got {depth}, ignoring")
            else:
                result["hydration"] = {**result.get("hydration", {}), "max_depth": depth}
        except ValueError:
            logger.warning(f"Invalid VOHYDRATOR_MAX_DEPTH value '{depth_str}', ignoring")

    if null_str := os.environ.get("VOHYDRATOR_NULL_AS_MISSING"):
        null_as_missing = null_str.lower() not in ("false", "0", "")
        result["hydration"] = {**result.get("hydration", {}), "null_as_missing": null_as_missing}

    if level := os.environ.get("VOHYDRATOR_LOG_LEVEL"):
        if level.upper() in LOG_LEVELS:
            result["logging"] = {**result.get("logging", {}), "level": level.upper()}
        else:
            logger.warning(f"Invalid VOHYDRATOR_LOG_LEVEL value '{level}', ignoring")

    return result


def get_default_config() -> dict[str, Any]:
    """
    Get hardcoded default configuration.

    Returns:
        Dictionary with default configuration values
    """
    return {
        "hydration": {"max_depth": None, "null_as_missing": True},
        "logging": {"level": "WARNING"},
    }


def load_config(project_dir: Path | None = None, use_cache: bool = True) -> VohydratorConfig:
    """
    Load configuration with multi-layer merging.

    Configuration precedence (highest to lowest):
        1. Environment variables (VOHYDRATOR_*)
        2. Project config (.vohydrator.json)
        3. User config (~/.config/vohydrator/config.json)
        4. Hardcoded defaults

    Args:
        project_dir: Project directory to load .vohydrator.json from (defaults to cwd)
        use_cache: If True, return the config cached for this project directory

    Returns:
        Validated VohydratorConfig instance

    Raises:
        ValidationError: If the merged config fails Pydantic validation
    """
    config_path = get_project_config_path(project_dir).resolve()
    if use_cache and config_path in _config_cache:
        return _config_cache[config_path]

    merged = get_default_config()

    if user_config := load_json_file(get_user_config_path()):
        merged = deep_merge(merged, user_config)

    if project_config := load_json_file(config_path):
        merged = deep_merge(merged, project_config)

    merged = apply_env_overrides(merged)

    config = VohydratorConfig(**merged)
    _config_cache[config_path] = config

    return config


def clear_cache() -> None:
    """
    Clear the cached configuration.

    Useful for testing or when config files change during execution.
    """
    _config_cache.clear()
