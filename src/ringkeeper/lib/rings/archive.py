"""
archive.py
- Packs the ring working files into a gzip tarball and back.
- Members: *.builder, *.ring.gz and the backups/ directory, stored relative to the work dir.
- The tarball is opaque; nothing here looks inside builder or ring files.
"""

import base64
import binascii
import io
import tarfile
from pathlib import Path
from loguru import logger

from ringkeeper.core.constants import BACKUPS_DIR, BUILDER_SUFFIX, RING_SUFFIX
from ringkeeper.core.errors import ConfigMapError


def ring_members(work_dir):
    """Relative names of the files and directories that go into the archive."""
    root = Path(work_dir)
    if not root.is_dir():
        return []
    members = sorted(
        p.name for p in root.iterdir()
        if p.is_file() and (p.name.endswith(BUILDER_SUFFIX) or p.name.endswith(RING_SUFFIX))
    )
    if (root / BACKUPS_DIR).is_dir():
        members.append(BACKUPS_DIR)
    return members


def pack(work_dir):
    """
    Build a gzip tarball of the ring files in work_dir.

    Returns:
        bytes: The compressed archive.
    """
    members = ring_members(work_dir)
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w:gz") as tar:
        for name in members:
            tar.add(str(Path(work_dir) / name), arcname=name)
    logger.info(f"[archive] Packed {len(members)} entries from {work_dir} ({buf.tell()} bytes)")
    return buf.getvalue()


def unpack(data, work_dir):
    """
    Extract a gzip tarball into work_dir.

    Returns:
        list[str]: Names of the extracted members.
    """
    Path(work_dir).mkdir(parents=True, exist_ok=True)
    try:
        with tarfile.open(fileobj=io.BytesIO(data), mode="r:gz") as tar:
            names = tar.getnames()
            tar.extractall(path=work_dir, filter="data")
    except tarfile.TarError as e:
        raise ConfigMapError(f"Stored ring archive is not a valid tarball: {e}") from e
    logger.info(f"[archive] Extracted {len(names)} entries into {work_dir}")
    return names


def encode(data):
    return base64.b64encode(data).decode("ascii")


def decode(text):
    # Archives written by `base64` without -w0 are wrapped at 76 columns
    text = "".join(text.split())
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ConfigMapError(f"Stored ring archive is not valid base64: {e}") from e
