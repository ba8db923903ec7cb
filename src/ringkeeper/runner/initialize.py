#!/usr/bin/env python3
"""
initialize.py
- Implements `init`: creates any missing account/container/object builder file.
- Existing builder files are never recreated.
"""

from pathlib import Path
from loguru import logger

from ringkeeper.core.config import load_settings
from ringkeeper.core.constants import RING_TYPES
from ringkeeper.core.errors import RingBuilderError
from ringkeeper.lib.common import ring_builder


def run(settings):
    """
    Returns:
        list[str]: Ring types whose builder was created.
    """
    Path(settings["work_dir"]).mkdir(parents=True, exist_ok=True)
    created = []

    for ring_type in RING_TYPES:
        path = Path(settings["work_dir"]) / ring_builder.builder_file(ring_type)
        if path.exists():
            logger.debug(f"[init] {path.name} already present, skipping.")
            continue

        logger.info(
            f"[init] Creating {path.name} (part_power={settings['part_power']}, "
            f"replicas={settings['replicas']}, min_part_hours={settings['min_part_hours']})"
        )
        result = ring_builder.create(settings, ring_type)
        if result.returncode != 0:
            raise RingBuilderError(
                f"create {path.name} failed with exit {result.returncode}: {(result.stdout or result.stderr).strip()}"
            )
        created.append(ring_type)

    if not created:
        logger.info("[init] All builder files already present.")
    return created


if __name__ == "__main__":
    run(load_settings())
