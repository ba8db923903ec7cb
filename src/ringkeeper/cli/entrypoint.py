#!/usr/bin/env python3
"""
entrypoint.py
- Command router for ring lifecycle operations.
- Usage:
    ringkeeper {get|init|update|rebalance|forced_rebalance|push|all}

- Exits 1 on a missing/unknown command or on any RingKeeperError.
"""

import signal
import sys

import sentry_sdk
from loguru import logger

from ringkeeper.core.config import configure_logging, load_settings
from ringkeeper.core.errors import RingKeeperError
from ringkeeper.runner import fetch, initialize, pipeline, push, rebalance, update

COMMANDS = {
    "get": fetch.run,
    "init": initialize.run,
    "update": update.run,
    "rebalance": rebalance.run,
    "forced_rebalance": rebalance.run_forced,
    "push": push.run,
    "all": pipeline.run,
}


def usage():
    print("Usage: ringkeeper <command>")
    print("Available commands:")
    print("  get               Fetch the ring ConfigMap and extract it into the work dir")
    print("  init              Create missing account/container/object builder files")
    print("  update            Add or reweight devices listed in the devices file")
    print("  rebalance         Rebalance every ring")
    print("  forced_rebalance  Reset min_part_hours, then rebalance every ring")
    print("  push              Upload the ring files to the ConfigMap")
    print("  all               get, init, update, rebalance, push")
    sys.exit(1)


def handle_exit(signum, frame):
    logger.warning(f"📴 Received signal {signum}. Exiting...")
    sys.exit(1)


def dispatch(command, settings):
    COMMANDS[command](settings)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv

    if len(argv) != 1:
        usage()

    command = argv[0]
    if command not in COMMANDS:
        print(f"❌ Unknown command: {command}")
        usage()

    signal.signal(signal.SIGINT, handle_exit)
    signal.signal(signal.SIGTERM, handle_exit)

    try:
        settings = load_settings()
        configure_logging(settings["debug"])
        dispatch(command, settings)
    except RingKeeperError as e:
        logger.error(f"[ringkeeper] {command} failed: {e}")
        sentry_sdk.capture_exception(e)
        sys.exit(1)

    logger.info(f"[ringkeeper] {command} finished.")
    sys.exit(0)


if __name__ == "__main__":
    main()
