#!/usr/bin/env python3
"""
pipeline.py
- Implements `all`: get -> init -> update -> rebalance -> push.
- Stops at the first fatal error.
"""

from loguru import logger

from ringkeeper.core.config import load_settings
from ringkeeper.runner import fetch, initialize, push, rebalance, update


def run(settings):
    logger.info("[pipeline] Starting full ring lifecycle run...")
    fetch.run(settings)
    initialize.run(settings)
    update.run(settings)
    rebalance.run(settings)
    push.run(settings)
    logger.info("[pipeline] Ring lifecycle run complete.")


if __name__ == "__main__":
    run(load_settings())
