"""
ring_builder.py
- Thin subprocess wrapper around the external swift-ring-builder executable.
- Every call runs inside the work dir against "<ring_type>.builder" so ring files
  and backups/ land next to the builder files.
- Exit codes are returned to the caller; only a missing binary raises.
"""

import subprocess
from loguru import logger

from ringkeeper.core.constants import BUILDER_SUFFIX
from ringkeeper.core.errors import RingBuilderError


def format_number(value):
    """Lossless text for a weight or replica count; 100.0 becomes "100"."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def builder_file(ring_type):
    return f"{ring_type}{BUILDER_SUFFIX}"


def run_builder(settings, ring_type, *args, mutating=True):
    """
    Invoke swift-ring-builder for a single ring.

    Args:
        settings (dict): Loaded settings (ring_builder_bin, work_dir, dry_run).
        ring_type (str): account, container or object.
        *args: Subcommand and its arguments.
        mutating (bool): When True and DRY_RUN is on, the command is only logged.

    Returns:
        CompletedProcess: Result with stdout, stderr, returncode.
    """
    cmd = [settings["ring_builder_bin"], builder_file(ring_type), *[str(a) for a in args]]

    if mutating and settings.get("dry_run"):
        logger.info(f"[ring_builder] Would run: {' '.join(cmd)}")
        return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")

    logger.debug(f"[ring_builder] Running: {' '.join(cmd)}")
    try:
        result = subprocess.run(
            cmd,
            cwd=settings["work_dir"],
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as e:
        raise RingBuilderError(f"Ring builder not found: {settings['ring_builder_bin']}") from e

    for line in (result.stdout or "").strip().splitlines():
        logger.debug(f"[ring_builder] {ring_type}: {line}")
    if result.returncode != 0 and result.stderr:
        logger.debug(f"[ring_builder] {ring_type} stderr: {result.stderr.strip()}")
    return result


def create(settings, ring_type):
    return run_builder(
        settings, ring_type, "create",
        settings["part_power"], format_number(settings["replicas"]), settings["min_part_hours"],
    )


def search(settings, ring_type, search_value):
    """Read-only lookup; exit code 0 means at least one device matched."""
    return run_builder(settings, ring_type, "search", search_value, mutating=False)


def add(settings, ring_type, add_value, weight):
    return run_builder(settings, ring_type, "add", add_value, weight)


def set_weight(settings, ring_type, search_value, weight):
    # --yes: never prompt when the search value matches several devices
    return run_builder(settings, ring_type, "set_weight", search_value, weight, "--yes")


def rebalance(settings, ring_type):
    return run_builder(settings, ring_type, "rebalance")


def pretend_min_part_hours_passed(settings, ring_type):
    return run_builder(settings, ring_type, "pretend_min_part_hours_passed")
