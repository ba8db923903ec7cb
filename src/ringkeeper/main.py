#!/usr/bin/env python3
"""
main.py
- Process entrypoint for the ringkeeper container / job.
- Sets up logging and optional Sentry reporting, then hands off to the command router.
"""

import os

import sentry_sdk

from ringkeeper.cli import entrypoint
from ringkeeper.core.config import DEBUG, configure_logging


def init_sentry():
    dsn = os.getenv("SENTRY_DSN")
    if dsn:
        sentry_sdk.init(dsn=dsn, traces_sample_rate=0.0)
    return bool(dsn)


def main():
    configure_logging(DEBUG)
    init_sentry()
    entrypoint.main()


if __name__ == "__main__":
    main()
