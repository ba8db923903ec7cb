#!/usr/bin/env python3
"""
fetch.py
- Implements `get`: downloads the ring ConfigMap and restores its tarball into the work dir.
    - 200: response saved as configmap.json, archive extracted
    - 404: stale configmap.json removed, nothing extracted (first run)
    - anything else: ConfigMapError
"""

from loguru import logger

from ringkeeper.core.config import load_settings
from ringkeeper.core.errors import ConfigMapError
from ringkeeper.core.state import clear_response, save_response
from ringkeeper.lib.common.kube_api import get_configmap, response_body
from ringkeeper.lib.rings import archive
from ringkeeper.lib.rings.configmap import extract_archive


def run(settings, session=None):
    """
    Fetch the stored rings.

    Returns:
        bool: True if an existing ConfigMap was found, False on 404.
    """
    name = f"{settings['namespace']}/{settings['configmap']}"
    logger.info(f"[fetch] Fetching ConfigMap {name}...")
    response = get_configmap(settings, session=session)

    if response.status_code == 404:
        logger.info(f"[fetch] ConfigMap {name} not found, starting from an empty work dir.")
        clear_response(settings["work_dir"])
        return False

    if response.status_code != 200:
        raise ConfigMapError(
            f"Unexpected status {response.status_code} fetching {name}: {response.text[:200]}",
            status=response.status_code,
        )

    body = response_body(response, f"GET {name}")
    save_response(settings["work_dir"], body)

    data = extract_archive(settings, body)
    if data is not None:
        archive.unpack(data, settings["work_dir"])
    logger.info(f"[fetch] ConfigMap {name} restored (resourceVersion={body.get('metadata', {}).get('resourceVersion')}).")
    return True


if __name__ == "__main__":
    run(load_settings())
