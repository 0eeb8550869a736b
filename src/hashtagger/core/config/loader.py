"""
Configuration loading with multi-layer merging.

Implements the configuration precedence chain:
    defaults < user config < project config (or --config file) < env vars

Unlike a missing file, a config file that exists but cannot be parsed or
validated is fatal: tagging must not start with settings the user did not
intend.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .models import TaggerConfig

logger = logging.getLogger(__name__)

PROJECT_CONFIG_NAME = ".hashtagger.json"


class ConfigurationError(Exception):
    """Raised when configuration is malformed or violates its constraints."""

    pass


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
        Path to ~/.config/hashtagger/config.json (or XDG equivalent)
    """
    return get_xdg_config_home() / "hashtagger" / "config.json"


def get_project_config_path(cwd: Path | None = None) -> Path:
    """
    Get path to project configuration file.

    Args:
        cwd: Working directory to search from (defaults to current directory)

    Returns:
        Path to .hashtagger.json in the project root
    """
    if cwd is None:
        cwd = Path.cwd()
    return cwd / PROJECT_CONFIG_NAME


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries.

    Values in `override` take precedence over values in `base`.
    Nested dicts are merged, not replaced. Lists are replaced.

    Args:
        base: Base dictionary (lower priority)
        override: Override dictionary (higher priority)

    Returns:
        Merged dictionary with override values taking precedence
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
    Load a JSON config file.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON object, or None if the file doesn't exist

    Raises:
        ConfigurationError: If the file can't be read, isn't valid JSON,
            or its root is not an object
    """
    if not path.exists():
        return None

    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        raise ConfigurationError(f"Failed to parse config at {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config at {path} must be a JSON object")
    return data


def _env_int(name: str) -> int | None:
    raw = os.environ.get(name)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid {name} value '{raw}', ignoring")
        return None


def apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    Env vars have the highest precedence and override all config files.

    Supported env vars:
        HASHTAGGER_MIN_COUNT - overrides min_count
        HASHTAGGER_MAX_COUNT - overrides max_count
        HASHTAGGER_SIMILARITY_THRESHOLD - overrides similarity_threshold
        HASHTAGGER_DENYLIST_MODE - overrides denylist_mode ('exact' or 'glob')
        HASHTAGGER_CACHE_FILE - overrides cache_file

    Invalid values are logged and ignored.

    Args:
        config_dict: Configuration dictionary to override

    Returns:
        Configuration dictionary with env var overrides applied
    """
    result = config_dict.copy()

    if (min_count := _env_int("HASHTAGGER_MIN_COUNT")) is not None:
        result["min_count"] = min_count

    if (max_count := _env_int("HASHTAGGER_MAX_COUNT")) is not None:
        result["max_count"] = max_count

    if threshold_str := os.environ.get("HASHTAGGER_SIMILARITY_THRESHOLD"):
        try:
            result["similarity_threshold"] = float(threshold_str)
        except ValueError:
            logger.warning(
                f"Invalid HASHTAGGER_SIMILARITY_THRESHOLD value '{threshold_str}', ignoring"
            )

    if mode_str := os.environ.get("HASHTAGGER_DENYLIST_MODE"):
        mode = mode_str.strip().lower()
        if mode in ("exact", "glob"):
            result["denylist_mode"] = mode
        else:
            logger.warning(f"Invalid HASHTAGGER_DENYLIST_MODE value '{mode_str}', ignoring")

    if cache_file := os.environ.get("HASHTAGGER_CACHE_FILE"):
        result["cache_file"] = cache_file

    return result


def get_default_config() -> dict[str, Any]:
    """
    Get hardcoded default configuration.

    Returns:
        Dictionary with default configuration values
    """
    return TaggerConfig().model_dump(mode="json")


def load_config(
    config_path: Path | None = None,
    project_dir: Path | None = None,
) -> TaggerConfig:
    """
    Load configuration with multi-layer merging.

    Configuration precedence (highest to lowest):
        1. Environment variables (HASHTAGGER_*)
        2. Explicit config file, or project config (.hashtagger.json)
        3. User config (~/.config/hashtagger/config.json)
        4. Hardcoded defaults

    Args:
        config_path: Explicit config file; replaces the project layer
        project_dir: Project directory to load .hashtagger.json from (defaults to cwd)

    Returns:
        Validated TaggerConfig instance

    Raises:
        ConfigurationError: If any layer is malformed or the merged config
            fails validation (for example max_count < min_count)

    Example:
        >>> config = load_config()
        >>> config.max_count
        12
    """
    merged = get_default_config()

    if user_config := load_json_file(get_user_config_path()):
        merged = deep_merge(merged, user_config)

    project_path = config_path if config_path is not None else get_project_config_path(project_dir)
    if project_config := load_json_file(project_path):
        merged = deep_merge(merged, project_config)
    elif config_path is not None and not config_path.exists():
        logger.warning(f"Config file {config_path} not found, using defaults")

    merged = apply_env_overrides(merged)

    try:
        config = TaggerConfig(**merged)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e

    logger.debug(
        f"Loaded config: min={config.min_count} max={config.max_count} "
        f"threshold={config.similarity_threshold} denylist_mode={config.denylist_mode.value}"
    )
    return config
