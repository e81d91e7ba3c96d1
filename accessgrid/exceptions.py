"""
Custom exceptions for the AccessGrid client library.
"""


class AccessGridError(Exception):
    """Base exception for AccessGrid client errors."""
    pass


class ConfigurationError(AccessGridError):
    """Raised when client configuration is invalid."""
    pass


class APIError(AccessGridError):
    """
    Raised when an API request fails.

    Every failure of a request surfaces as this one type. Callers branch on
    the attached context rather than on subclasses:

    Attributes:
        status_code: HTTP status of the response, or None if none arrived
        body: Raw response body text, or None if none arrived
        cause: Underlying exception (network, JSON or validation), or None
    """

    def __init__(self, message: str, status_code=None, body=None, cause=None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.cause = cause

    def __str__(self):
        message = super().__str__()
        if self.status_code is not None:
            message = f"{message} (HTTP {self.status_code})"
        if self.body:
            message = f"{message}: {self.body}"
        return message
