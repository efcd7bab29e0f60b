"""Custom exceptions for the oracle datapoints API.

Store-layer and query-layer exceptions live here
to avoid circular imports between modules.
"""


class OracleApiError(Exception):
    """Base exception for all oracle API errors."""


class StoreError(OracleApiError):
    """Raised when the document store rejects a search or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class InvalidTimeWindowError(OracleApiError):
    """Raised when a requested time bound cannot be parsed or the window is inverted."""
