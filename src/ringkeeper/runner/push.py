#!/usr/bin/env python3
"""
push.py
- Implements `push`: packs the ring files and stores them in the ConfigMap.
- The response file written by `get` selects the verb:
    - present -> PUT, carrying its resourceVersion
    - absent  -> POST
- The returned object replaces the response file so a later push PUTs.
"""

from loguru import logger

from ringkeeper.core.config import load_settings
from ringkeeper.core.constants import BUILDER_SUFFIX
from ringkeeper.core.errors import ConfigMapError, RingKeeperError
from ringkeeper.core.state import has_response, save_response, stored_resource_version
from ringkeeper.lib.common.kube_api import create_configmap, replace_configmap, response_body
from ringkeeper.lib.rings import archive
from ringkeeper.lib.rings.configmap import build_body

ACCEPTED_STATUSES = {200, 201}


def run(settings, session=None):
    """
    Returns:
        str: The HTTP verb used (or that would be used in dry run).
    """
    work_dir = settings["work_dir"]
    name = f"{settings['namespace']}/{settings['configmap']}"

    if not any(member.endswith(BUILDER_SUFFIX) for member in archive.ring_members(work_dir)):
        if not settings.get("dry_run"):
            raise RingKeeperError(f"No builder files in {work_dir}, refusing to overwrite {name}.")
        logger.warning(f"[push] No builder files in {work_dir}; a real run would refuse to push.")

    exists = has_response(work_dir)
    verb = "PUT" if exists else "POST"
    resource_version = stored_resource_version(work_dir) if exists else None

    body = build_body(settings, archive.pack(work_dir), resource_version=resource_version)

    if settings.get("dry_run"):
        logger.info(f"[push] Would {verb} ConfigMap {name} ({len(body['data'][settings['configmap_key']])} base64 chars).")
        return verb

    logger.info(f"[push] {verb} ConfigMap {name}...")
    if exists:
        response = replace_configmap(settings, body, session=session)
    else:
        response = create_configmap(settings, body, session=session)

    if response.status_code not in ACCEPTED_STATUSES:
        raise ConfigMapError(
            f"Unexpected status {response.status_code} on {verb} {name}: {response.text[:200]}",
            status=response.status_code,
        )

    stored = response_body(response, f"{verb} {name}")
    save_response(work_dir, stored)
    logger.info(f"[push] ✅ ConfigMap {name} stored (resourceVersion={stored.get('metadata', {}).get('resourceVersion')}).")
    return verb


if __name__ == "__main__":
    run(load_settings())
