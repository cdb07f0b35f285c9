"""
Configuration management for documentation servers.

Configuration is resolved from, in order of priority:
1. Environment variables
2. YAML configuration file (config/server.yaml)
3. Default values
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .constants import DEFAULT_CATALOG

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path(__file__).parent.parent.parent / "config" / "server.yaml"

DEFAULT_CONFIG: Dict[str, Any] = {
    "catalog": DEFAULT_CATALOG,
    "transport": {"type": "stdio"},
    "logging": {"level": "INFO", "format": "json", "file": None},
}

# config path -> environment variable
ENV_OVERRIDES = {
    ("catalog",): "DOC_SERVER_CATALOG",
    ("logging", "level"): "DOC_SERVER_LOG_LEVEL",
    ("logging", "format"): "DOC_SERVER_LOG_FORMAT",
    ("logging", "file"): "DOC_SERVER_LOG_FILE",
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def read_config_file(config_file: Union[str, Path]) -> Dict[str, Any]:
    """Read a YAML configuration file.

    A missing, unreadable or malformed file yields an empty configuration
    and a warning, so the server can still start on defaults.
    """
    config_file = Path(config_file)
    if not config_file.exists():
        logger.warning(f"Config file not found: {config_file}")
        return {}

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config file {config_file}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config file {config_file}: top level is not a mapping")
        return {}

    logger.info(f"Loaded configuration from {config_file}")
    return data


def apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``config`` with environment variable overrides applied."""
    config = copy.deepcopy(config)
    for path, env_var in ENV_OVERRIDES.items():
        env_value = os.getenv(env_var)
        if env_value is None or env_value == "":
            continue
        target = config
        for key in path[:-1]:
            target = target.setdefault(key, {})
        target[path[-1]] = env_value
        logger.debug(f"Config {'.'.join(path)} overridden by {env_var}")
    return config


def load_server_config(
    config_file: Optional[Union[str, Path]] = None,
    use_env: bool = True,
) -> Dict[str, Any]:
    """Load server configuration.

    Args:
        config_file: Path to YAML config file. Defaults to
            config/server.yaml relative to the project root
        use_env: Whether to apply environment variable overrides

    Returns:
        Configuration dictionary with defaults filled in
    """
    file_config = read_config_file(config_file or DEFAULT_CONFIG_FILE)

    # Accept both a flat layout and one nested under "server"
    server_section = file_config.pop("server", None)
    if isinstance(server_section, dict):
        file_config = _merge(server_section, file_config)

    config = _merge(DEFAULT_CONFIG, file_config)
    if use_env:
        config = apply_env_overrides(config)
    return config
