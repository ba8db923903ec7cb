"""
configmap.py
- Builds the ConfigMap object that stores the ring archive.
- Pulls the archive back out of a ConfigMap response.
"""

from loguru import logger

from ringkeeper.core.constants import MANAGED_BY_LABEL
from ringkeeper.lib.rings import archive


def owner_references(settings):
    """
    ownerReferences for the ConfigMap, or [] unless both owner name and uid are set.
    """
    if not (settings.get("owner_name") and settings.get("owner_uid")):
        return []
    return [{
        "apiVersion": settings["owner_api_version"],
        "kind": settings["owner_kind"],
        "name": settings["owner_name"],
        "uid": settings["owner_uid"],
        "controller": True,
        "blockOwnerDeletion": True,
    }]


def build_body(settings, archive_bytes, resource_version=None):
    """
    Assemble the ConfigMap body for POST or PUT.

    Args:
        settings (dict): Loaded settings.
        archive_bytes (bytes): Gzip tarball of the ring files.
        resource_version (str): Version from the stored response, PUT only.

    Returns:
        dict: JSON-serializable ConfigMap.
    """
    label, value = MANAGED_BY_LABEL
    metadata = {
        "name": settings["configmap"],
        "namespace": settings["namespace"],
        "labels": {label: value},
    }
    owners = owner_references(settings)
    if owners:
        metadata["ownerReferences"] = owners
    if resource_version:
        metadata["resourceVersion"] = resource_version

    return {
        "apiVersion": "v1",
        "kind": "ConfigMap",
        "metadata": metadata,
        "data": {settings["configmap_key"]: archive.encode(archive_bytes)},
    }


def extract_archive(settings, body):
    """
    Return the decoded archive bytes from a ConfigMap body, or None when the key is absent.
    """
    encoded = (body.get("data") or {}).get(settings["configmap_key"])
    if not encoded:
        logger.warning(f"[configmap] {settings['configmap']} has no '{settings['configmap_key']}' key, nothing to restore.")
        return None
    return archive.decode(encoded)
