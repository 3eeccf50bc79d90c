"""Configuration getter functions."""

import os
from pathlib import Path
from typing import Any

from apiflow.http import DEFAULT_CONTENT_TYPE, HTTPMethod

from .env_loader import get_config_dir, load_global_config, load_user_env

DEFAULT_URL = "http://127.0.0.1"


def get_config(key: str, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. ~/.apiflow/.env
    3. ~/.apiflow/config.yml
    4. Default value

    Args:
        key: Configuration key
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    # 1. Check environment variable
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    # 2. Check user .env file
    user_env = load_user_env()
    if key in user_env:
        return user_env[key]

    # 3. Check global config
    global_config = load_global_config()
    if key in global_config:
        return global_config[key]

    # 4. Return default
    return default


def get_default_url() -> str:
    """URL used when none was given or persisted."""
    return str(get_config("APIFLOW_DEFAULT_URL", DEFAULT_URL))


def get_default_method() -> HTTPMethod:
    """Method used when none was given or persisted (default: GET)."""
    return HTTPMethod.parse(str(get_config("APIFLOW_DEFAULT_METHOD", "GET")))


def get_content_type() -> str:
    """Content-Type the CLI attaches to every request; empty disables it.

    Unlike other keys, an empty APIFLOW_CONTENT_TYPE in the environment
    counts as set.
    """
    if "APIFLOW_CONTENT_TYPE" in os.environ:
        return os.environ["APIFLOW_CONTENT_TYPE"].strip()
    value = get_config("APIFLOW_CONTENT_TYPE", DEFAULT_CONTENT_TYPE)
    return "" if value is None else str(value)


def get_state_file() -> Path:
    """Where the last session is persisted."""
    value = get_config("APIFLOW_STATE_FILE")
    if value:
        return Path(str(value)).expanduser()
    return get_config_dir() / "state.json"


def is_verbose() -> bool:
    value = get_config("APIFLOW_VERBOSE", False)
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")
