#!/usr/bin/env python3
"""
update.py
- Implements `update`: applies the devices file to every ring.
- For each device and ring type:
    - search matches  -> set_weight to the listed weight
    - no match        -> add the device with the ring type's port
- add/set_weight failures are logged and the update carries on.
"""

from loguru import logger

from ringkeeper.core.config import load_settings
from ringkeeper.core.constants import EXIT_SUCCESS, RING_TYPES
from ringkeeper.lib.common import ring_builder
from ringkeeper.lib.rings.devices import device_value, format_weight, load_devices

# --- Counters (reported at the end of a run) ---
devices_added_total = 0
devices_reweighted_total = 0
device_errors_total = 0


def apply_device(settings, ring_type, dev):
    global devices_added_total, devices_reweighted_total, device_errors_total

    value = device_value(dev, settings["ports"][ring_type])
    weight = format_weight(dev["weight"])

    if ring_builder.search(settings, ring_type, value).returncode == EXIT_SUCCESS:
        logger.debug(f"[update] {ring_type}: {value} present, setting weight {weight}")
        result = ring_builder.set_weight(settings, ring_type, value, weight)
        action = "set_weight"
    else:
        logger.info(f"[update] {ring_type}: adding {value} with weight {weight}")
        result = ring_builder.add(settings, ring_type, value, weight)
        action = "add"

    if result.returncode != EXIT_SUCCESS:
        device_errors_total += 1
        logger.error(f"[update] {ring_type}: {action} {value} failed (exit {result.returncode}): {(result.stdout or result.stderr).strip()}")
        return False

    if action == "add":
        devices_added_total += 1
    else:
        devices_reweighted_total += 1
    return True


def run(settings):
    global devices_added_total, devices_reweighted_total, device_errors_total
    devices_added_total = devices_reweighted_total = device_errors_total = 0

    devices = load_devices(settings["devices_file"])
    logger.info(f"[update] Applying {len(devices)} device(s) from {settings['devices_file']} to {len(RING_TYPES)} rings.")

    for dev in devices:
        for ring_type in RING_TYPES:
            apply_device(settings, ring_type, dev)

    logger.info(
        f"[update] Done: {devices_added_total} added, {devices_reweighted_total} reweighted, "
        f"{device_errors_total} failed."
    )
    return device_errors_total == 0


if __name__ == "__main__":
    run(load_settings())
