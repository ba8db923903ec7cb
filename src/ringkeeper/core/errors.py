"""
errors.py
- Exceptions raised by ringkeeper modules.
- The CLI entrypoint turns any RingKeeperError into exit code 1.
"""


class RingKeeperError(Exception):
    pass


class ConfigError(RingKeeperError):
    pass


class DeviceFileError(RingKeeperError):
    pass


class RingBuilderError(RingKeeperError):
    pass


class ConfigMapError(RingKeeperError):
    """Unexpected API status, or transport failure after retries (status is None)."""

    def __init__(self, message, status=None):
        super().__init__(message)
        self.status = status
