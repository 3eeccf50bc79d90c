"""Creation of the global configuration file."""

import logging
from pathlib import Path

import yaml

from .env_loader import get_config_dir
from .getters import DEFAULT_CONTENT_TYPE, DEFAULT_URL

logger = logging.getLogger(__name__)


def create_global_config() -> Path:
    """Create global config directory and file if they don't exist."""
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    config_path = config_dir / "config.yml"
    if not config_path.exists():
        default_config = {
            "APIFLOW_DEFAULT_URL": DEFAULT_URL,
            "APIFLOW_DEFAULT_METHOD": "GET",
            "APIFLOW_CONTENT_TYPE": DEFAULT_CONTENT_TYPE,
            "APIFLOW_VERBOSE": False,
        }
        with open(config_path, "w") as f:
            yaml.dump(default_config, f, default_flow_style=False)
        logger.info("Created global config at %s", config_path)

    return config_path
