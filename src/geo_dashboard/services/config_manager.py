"""Dashboard configuration management.

Handles listing, loading and saving of dashboard configuration files.
Enforces the strictly typed DashboardConfig schema.
"""

import json
import logging
import os
from pathlib import Path
from typing import List

from pydantic import ValidationError

from ..exceptions import ConfigError
from ..schemas import DashboardConfig

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.cwd() / "config"
CONFIG_ENV_VAR = "GEO_DASHBOARD_CONFIG"
DEFAULT_CONFIG_FILE = "dashboard.json"


def list_configs() -> List[str]:
    """List all configuration files in the config directory.

    Returns:
        List of filenames (e.g., ['dashboard.json', 'slow_network.json']).
    """
    if not CONFIG_DIR.exists():
        return []
    return sorted(f.name for f in CONFIG_DIR.glob("*.json"))


def load_config(filename: str | None = None) -> DashboardConfig:
    """Load and validate a dashboard configuration.

    Resolution order when `filename` is None:
        1) path in the GEO_DASHBOARD_CONFIG environment variable
        2) CONFIG_DIR / dashboard.json, if it exists
        3) built-in defaults

    Args:
        filename: Name of a file in CONFIG_DIR, or an absolute path.

    Returns:
        Validated DashboardConfig object.

    Raises:
        FileNotFoundError: If an explicitly requested file doesn't exist.
        ConfigError: If the file isn't valid JSON or doesn't match the schema.
    """
    if filename is None:
        filename = os.getenv(CONFIG_ENV_VAR)
        if filename is None:
            if not (CONFIG_DIR / DEFAULT_CONFIG_FILE).exists():
                return DashboardConfig()
            filename = DEFAULT_CONFIG_FILE

    file_path = Path(filename)
    if not file_path.is_absolute():
        file_path = CONFIG_DIR / filename
    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        config = DashboardConfig(**data)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {file_path} is not valid JSON: {e}") from e
    except (ValidationError, TypeError) as e:
        raise ConfigError(f"Config file {file_path} is invalid: {e}") from e

    logger.info(f"Loaded dashboard config from {file_path}")
    return config


def save_config(config: DashboardConfig, filename: str) -> Path:
    """Save a dashboard configuration to a JSON file in CONFIG_DIR."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    file_path = CONFIG_DIR / filename

    with open(file_path, "w", encoding="utf-8") as f:
        f.write(config.model_dump_json(indent=2))
    return file_path
