"""
state.py
- Loads and saves the ConfigMap response file in the work dir.
- The file holds the JSON body of the last successful GET/PUT/POST:
    - present: the ConfigMap exists, push must PUT (with its resourceVersion)
    - absent:  the ConfigMap has never been stored, push must POST
"""

import json
from pathlib import Path
from loguru import logger

from ringkeeper.core.constants import RESPONSE_FILE


def response_path(work_dir):
    return Path(work_dir) / RESPONSE_FILE


def has_response(work_dir):
    return response_path(work_dir).exists()


def load_response(work_dir):
    """
    Load the stored ConfigMap response.

    Returns:
        dict: Parsed response body, or {} if no file exists.
    """
    path = response_path(work_dir)
    if path.exists():
        with open(path, "r") as f:
            return json.load(f)
    return {}


def save_response(work_dir, body):
    """
    Persist a ConfigMap response body as formatted JSON.

    Args:
        work_dir (str): Ring work dir.
        body (dict): The decoded API response.
    """
    path = response_path(work_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(body, f, indent=2)
    logger.debug(f"[state] Saved response file {path}")


def clear_response(work_dir):
    path = response_path(work_dir)
    if path.exists():
        path.unlink()
        logger.info(f"[state] Removed stale response file {path}")


def stored_resource_version(work_dir):
    return load_response(work_dir).get("metadata", {}).get("resourceVersion")
