"""Failure taxonomy for a single collection run."""

from __future__ import annotations

from typing import Optional


class CollectorError(Exception):
    """Base class for every failure that aborts an invocation."""


class ConfigurationError(CollectorError):
    """Missing credential or an unusable time zone."""


class NetworkError(CollectorError):
    """The device API could not be reached."""


class UpstreamError(CollectorError):
    """The device API answered with a non-success status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(CollectorError):
    """The device API response could not be understood."""


class NoDeviceFoundError(ParseError):
    """The device API returned an empty device list."""


class SerializationError(CollectorError):
    """A record could not be converted into store attributes."""


class StoreWriteError(CollectorError):
    """The store rejected or never received the write."""

    def __init__(self, message: str, error_code: Optional[str] = None) -> None:
        super().__init__(message)
        self.error_code = error_code
