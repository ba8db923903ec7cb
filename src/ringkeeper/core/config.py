"""
config.py
- Builds the settings dict shared by all runners from environment variables.
- An optional YAML overlay (RING_CONFIG_FILE) supplies values the environment leaves unset.
- Configures loguru for the process.
"""

import os
import sys
from loguru import logger

from ringkeeper.core.config_loader import load_yaml, preview_yaml
from ringkeeper.core.constants import (
    DEFAULT_API_RETRIES,
    DEFAULT_API_TIMEOUT,
    DEFAULT_PORTS,
    SERVICE_ACCOUNT_DIR,
)
from ringkeeper.core.errors import ConfigError

# --- Runtime Behavior Flags ---
DEBUG = os.getenv("DEBUG", "false").lower() == "true"

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# (setting key, env var, default, cast)
# A default of None is resolved later in load_settings.
SETTINGS = [
    ("namespace", "RING_NAMESPACE", None, str),
    ("configmap", "RING_CONFIGMAP", "swift-rings", str),
    ("configmap_key", "RING_CONFIGMAP_KEY", "rings", str),
    ("owner_api_version", "OWNER_API_VERSION", "apps/v1", str),
    ("owner_kind", "OWNER_KIND", "StatefulSet", str),
    ("owner_name", "OWNER_NAME", "", str),
    ("owner_uid", "OWNER_UID", "", str),
    ("part_power", "PART_POWER", 10, int),
    ("replicas", "REPLICAS", 3, float),
    ("min_part_hours", "MIN_PART_HOURS", 1, int),
    ("account_port", "ACCOUNT_PORT", DEFAULT_PORTS["account"], int),
    ("container_port", "CONTAINER_PORT", DEFAULT_PORTS["container"], int),
    ("object_port", "OBJECT_PORT", DEFAULT_PORTS["object"], int),
    ("devices_file", "DEVICES_FILE", "/etc/swift-rings/devices", str),
    ("work_dir", "RING_WORK_DIR", "/etc/swift", str),
    ("ring_builder_bin", "RING_BUILDER_BIN", "swift-ring-builder", str),
    ("api_url", "KUBE_API_URL", None, str),
    ("token_file", "KUBE_TOKEN_FILE", f"{SERVICE_ACCOUNT_DIR}/token", str),
    ("ca_file", "KUBE_CA_FILE", f"{SERVICE_ACCOUNT_DIR}/ca.crt", str),
    ("api_timeout", "KUBE_API_TIMEOUT", DEFAULT_API_TIMEOUT, int),
    ("api_retries", "KUBE_API_RETRIES", DEFAULT_API_RETRIES, int),
    ("dry_run", "DRY_RUN", False, "bool"),
    ("debug", "DEBUG", False, "bool"),
]


def configure_logging(debug=DEBUG):
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if debug else "INFO",
        colorize=True,
        format=LOG_FORMAT,
    )


def _cast(key, value, cast):
    if cast == "bool":
        return str(value).lower() == "true"
    try:
        return cast(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value for {key}: {value!r}") from e


def default_namespace():
    """Namespace of the pod's service account, or 'default' outside a cluster."""
    path = os.path.join(SERVICE_ACCOUNT_DIR, "namespace")
    if os.path.exists(path):
        with open(path, "r") as f:
            return f.read().strip() or "default"
    return "default"


def default_api_url(env):
    host = env.get("KUBERNETES_SERVICE_HOST")
    if not host:
        return "https://kubernetes.default.svc"
    if ":" in host:
        host = f"[{host}]"
    port = env.get("KUBERNETES_SERVICE_PORT", "443")
    return f"https://{host}:{port}"


def load_settings(env=None):
    """
    Resolve every setting from (lowest to highest precedence):
    built-in defaults, the RING_CONFIG_FILE YAML overlay, environment variables.

    Returns:
        dict: Flat settings plus a derived "ports" mapping of ring type -> port.
    """
    env = os.environ if env is None else env

    overlay = {}
    config_file = env.get("RING_CONFIG_FILE")
    if config_file:
        preview_yaml(config_file, name="ring config")
        overlay = load_yaml(config_file)

    settings = {}
    for key, var, default, cast in SETTINGS:
        if var in env:
            value = env[var]
        elif key in overlay:
            value = overlay[key]
        else:
            value = default
        settings[key] = None if value is None else _cast(key, value, cast)

    if not settings["namespace"]:
        settings["namespace"] = default_namespace()
    if not settings["api_url"]:
        settings["api_url"] = default_api_url(env)
    settings["api_url"] = settings["api_url"].rstrip("/")

    settings["ports"] = {
        "account": settings["account_port"],
        "container": settings["container_port"],
        "object": settings["object_port"],
    }
    return settings
