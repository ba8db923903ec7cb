#!/usr/bin/env python3
"""
healthcheck.py
- Preflight check for container probes.
- Returns exit code 0 if the ring builder is on PATH and the work dir exists, 1 if not.
"""

import shutil
import sys
from pathlib import Path

from ringkeeper.core.config import load_settings
from ringkeeper.core.errors import RingKeeperError


def problems(settings):
    found = []
    if shutil.which(settings["ring_builder_bin"]) is None:
        found.append(f"ring builder '{settings['ring_builder_bin']}' not found on PATH")
    if not Path(settings["work_dir"]).is_dir():
        found.append(f"work dir {settings['work_dir']} does not exist")
    return found


def main():
    try:
        found = problems(load_settings())
    except RingKeeperError as e:
        found = [str(e)]
    if found:
        for problem in found:
            print(f"❌ Healthcheck failed: {problem}")
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    main()
