"""
Error types raised by the squad analytics pipeline.
"""


class AnalyticsError(Exception):
    """Base class for all squad analytics errors."""


class TransportError(AnalyticsError):
    """Network, authentication or HTTP failure on a data-source call."""

    def __init__(self, message: str, status_code: int = None, url: str = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class DataFormatError(AnalyticsError):
    """A response is missing expected fields or carries unusable values."""


class InvalidInput(AnalyticsError, ValueError):
    """An operation was called with arguments it cannot accept."""


class InsufficientData(AnalyticsError):
    """There are no records to summarize."""
