"""Exception classes for remote test generation.

These never escape ``RemoteGenerator.generate``; they let the internal
steps report why a call produced nothing.
"""


class RemoteGenerationError(Exception):
    """Base exception for remote generation errors."""

    pass


class APIError(RemoteGenerationError):
    """Raised when the backend answers with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class ResponseParseError(RemoteGenerationError):
    """Raised when the backend response has no usable test body."""

    def __init__(self, message: str, raw_response: str | None = None):
        self.raw_response = raw_response
        super().__init__(message)
