"""
config_loader.py
- Loads and previews the optional YAML overlay for ringkeeper settings.
- Keys in the file are the lower-cased setting names (e.g. part_power, devices_file).
"""

import os
import yaml
from loguru import logger

from ringkeeper.core.errors import ConfigError


def load_yaml(path):
    """
    Load a YAML file and return a parsed dict.

    Returns {} when the file does not exist. A file that fails to parse, or
    whose top level is not a mapping, raises ConfigError.
    """
    if not os.path.exists(path):
        logger.warning(f"[config] File not found: {path}")
        return {}

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data


def preview_yaml(path, name=None):
    """
    Log a human-readable preview of the YAML file contents at debug level.
    """
    if not os.path.exists(path):
        return

    try:
        with open(path, "r") as f:
            contents = f.read()
    except OSError as e:
        logger.error(f"[config] Could not preview {path}: {e}")
        return

    logger.debug(f"\n📄 Loaded {name or path}:\n" + "\n".join(f"│ {line}" for line in contents.strip().splitlines()))
