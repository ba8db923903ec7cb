"""
constants.py
- Project-wide constants shared across logic and runner modules.
- Includes ring types, default device ports, tool exit codes and API timing values.
"""

# --- Rings ---
RING_TYPES = ("account", "container", "object")
DEFAULT_PORTS = {"account": 6202, "container": 6201, "object": 6200}

# --- swift-ring-builder exit codes ---
EXIT_SUCCESS = 0
EXIT_WARNING = 1  # e.g. nothing reassigned, min_part_hours not passed
EXIT_ERROR = 2

# --- Work dir layout ---
BUILDER_SUFFIX = ".builder"
RING_SUFFIX = ".ring.gz"
BACKUPS_DIR = "backups"
RESPONSE_FILE = "configmap.json"

# --- Kubernetes API ---
SERVICE_ACCOUNT_DIR = "/var/run/secrets/kubernetes.io/serviceaccount"
DEFAULT_API_TIMEOUT = 10  # seconds
DEFAULT_API_RETRIES = 3
MANAGED_BY_LABEL = ("app.kubernetes.io/managed-by", "swift-ringkeeper")
