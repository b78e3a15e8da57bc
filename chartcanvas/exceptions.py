"""Custom exceptions for the chartcanvas package."""

from typing import Optional


class ChartCanvasError(Exception):
    """Base exception for chartcanvas errors."""
    pass


class ConfigurationError(ChartCanvasError):
    """Raised when a loader or binning configuration cannot be honoured."""
    pass


class MissingColumn(ConfigurationError):
    """Raised when a referenced column is absent from the header row."""

    def __init__(self, column: str):
        super().__init__(f'Column "{column}" not found in tabular resource')
        self.column = column


class EmptyResource(ConfigurationError):
    """Raised when the fetched resource has no non-blank lines."""

    def __init__(self, url: Optional[str] = None):
        source = url or "<text>"
        super().__init__(f"Tabular resource is empty: {source}")
        self.url = url


class InvalidConfiguration(ConfigurationError):
    """Raised when configuration is incomplete or out of range."""

    def __init__(self, message: str):
        super().__init__(f"Invalid configuration: {message}")
        self.reason = message


class FetchError(ChartCanvasError):
    """Raised when the tabular resource could not be fetched.

    ``status`` is the HTTP status code, or None when the request never
    produced a response (DNS failure, refused connection, ...).
    """

    def __init__(self, status: Optional[int], url: str, reason: str = ""):
        if status is None:
            message = f"Failed to fetch {url}: {reason or 'network error'}"
        else:
            message = f"Failed to fetch {url}: {status} {reason}".rstrip()
        super().__init__(message)
        self.status = status
        self.url = url
        self.reason = reason
