"""
devices.py
- Parses the devices file consumed by the update step.
- Format: one device per line, whitespace-delimited:
      <region> <zone> <host> <device> <weight>
  Blank lines and lines starting with '#' are ignored.
- Device identity and uniqueness are left to swift-ring-builder.
"""

import math
from pathlib import Path

from ringkeeper.core.errors import DeviceFileError
from ringkeeper.lib.common.ring_builder import format_number

FIELDS = ("region", "zone", "host", "device", "weight")


def parse_line(line, lineno):
    parts = line.split()
    if len(parts) != len(FIELDS):
        raise DeviceFileError(f"line {lineno}: expected {len(FIELDS)} fields ({' '.join(FIELDS)}), got {len(parts)}")

    region, zone, host, device, weight = parts
    try:
        region, zone = int(region), int(zone)
    except ValueError:
        raise DeviceFileError(f"line {lineno}: region and zone must be integers") from None
    try:
        weight = float(weight)
    except ValueError:
        raise DeviceFileError(f"line {lineno}: invalid weight {weight!r}") from None
    if not math.isfinite(weight):
        raise DeviceFileError(f"line {lineno}: invalid weight {parts[4]!r}")
    if weight < 0:
        raise DeviceFileError(f"line {lineno}: weight must not be negative")

    return {"region": region, "zone": zone, "host": host, "device": device, "weight": weight}


def load_devices(path):
    """
    Read and parse the devices file.

    Args:
        path (str): Location of the devices file.

    Returns:
        list[dict]: One dict per device with region, zone, host, device, weight.
    """
    try:
        text = Path(path).read_text()
    except OSError as e:
        raise DeviceFileError(f"Cannot read devices file {path}: {e}") from e

    devices = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        devices.append(parse_line(line, lineno))
    return devices


def format_host(host):
    # IPv6 literals are bracketed in ring-builder search/add values
    if ":" in host and not host.startswith("["):
        return f"[{host}]"
    return host


def device_value(dev, port):
    """
    Search/add value understood by swift-ring-builder, e.g. r1z2-10.0.0.5:6200/sdb.
    """
    return f"r{dev['region']}z{dev['zone']}-{format_host(dev['host'])}:{port}/{dev['device']}"


def format_weight(weight):
    return format_number(weight)
