"""
Configuration management for apiflow.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. User .env file (~/.apiflow/.env)
3. Global config file (~/.apiflow/config.yml)
4. Default values (lowest priority)
"""

from .env_loader import get_config_dir, load_env_file, load_global_config, load_user_env
from .getters import (
    DEFAULT_CONTENT_TYPE,
    DEFAULT_URL,
    get_config,
    get_content_type,
    get_default_method,
    get_default_url,
    get_state_file,
    is_verbose,
)
from .setup import create_global_config

__all__ = [
    # env_loader
    "get_config_dir",
    "load_env_file",
    "load_global_config",
    "load_user_env",
    # getters
    "DEFAULT_CONTENT_TYPE",
    "DEFAULT_URL",
    "get_config",
    "get_content_type",
    "get_default_method",
    "get_default_url",
    "get_state_file",
    "is_verbose",
    # setup
    "create_global_config",
]
