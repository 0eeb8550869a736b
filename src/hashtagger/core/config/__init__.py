"""
Configuration models and loading.

This module provides the Pydantic model for hashtagger configuration
with multi-layer merging: defaults < user < project < env vars.
"""

from .env import load_layered_env
from .loader import (
    ConfigurationError,
    get_project_config_path,
    get_user_config_path,
    get_xdg_config_home,
    load_config,
)
from .models import TaggerConfig

__all__ = [
    # Models
    "TaggerConfig",
    # Loader functions
    "ConfigurationError",
    "get_project_config_path",
    "get_user_config_path",
    "get_xdg_config_home",
    "load_config",
    "load_layered_env",
]
