#!/usr/bin/env python3
"""
rebalance.py
- Implements `rebalance` and `forced_rebalance` for every ring.
- forced_rebalance resets the min_part_hours clock first (pretend_min_part_hours_passed).
- Tool exit codes are never fatal:
    - 1: nothing reassigned, min_part_hours not yet passed, or balance warning
    - 2: tool error, logged
"""

from loguru import logger

from ringkeeper.core.config import load_settings
from ringkeeper.core.constants import EXIT_SUCCESS, EXIT_WARNING, RING_TYPES
from ringkeeper.lib.common import ring_builder


def rebalance_ring(settings, ring_type):
    result = ring_builder.rebalance(settings, ring_type)
    output = (result.stdout or result.stderr or "").strip()
    summary = output.splitlines()[0] if output else ""

    if result.returncode == EXIT_SUCCESS:
        logger.info(f"[rebalance] {ring_type}: {summary or 'rebalanced'}")
    elif result.returncode == EXIT_WARNING:
        logger.info(f"[rebalance] {ring_type}: {summary or 'no partitions reassigned'} (exit 1, ignored)")
    else:
        logger.error(f"[rebalance] {ring_type}: rebalance failed (exit {result.returncode}, ignored): {output}")
    return result.returncode


def run(settings, forced=False):
    """
    Rebalance all rings.

    Args:
        forced (bool): Pretend min_part_hours passed before each rebalance.

    Returns:
        dict[str, int]: Ring type -> rebalance exit code.
    """
    codes = {}
    for ring_type in RING_TYPES:
        if forced:
            logger.warning(f"[rebalance] {ring_type}: pretending min_part_hours passed.")
            result = ring_builder.pretend_min_part_hours_passed(settings, ring_type)
            if result.returncode != EXIT_SUCCESS:
                logger.error(f"[rebalance] {ring_type}: pretend_min_part_hours_passed failed (exit {result.returncode}, ignored).")
        codes[ring_type] = rebalance_ring(settings, ring_type)
    return codes


def run_forced(settings):
    return run(settings, forced=True)


if __name__ == "__main__":
    run(load_settings())
