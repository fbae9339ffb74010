"""Exceptions raised by the Pocket API client.

Everything derives from PocketError, so callers that don't care about the
failure mode can catch a single type. Errors caused by bad local input also
subclass ValueError.
"""


class PocketError(Exception):
    """Base class for all client errors."""


class ConfigurationError(PocketError, ValueError):
    """The client was constructed with invalid settings."""


class InvalidArgumentError(PocketError, ValueError):
    """A required argument was empty."""


class ValidationError(PocketError, ValueError):
    """An AddInput failed validation before anything was sent."""

    MISSING_URL = "missing_url"
    MISSING_ACCESS_TOKEN = "missing_access_token"

    def __init__(self, kind: str, message: str):
        super().__init__(message)
        self.kind = kind


class TransportError(PocketError):
    """The request never produced a response (connect failure, timeout)."""


class NonSuccessStatusError(PocketError):
    """The service answered with a status other than 200.

    ``message`` is the X-Error header as sent by the service, ``code`` the
    X-Error-Code header (None when absent).
    """

    def __init__(self, status_code: int, message: str, code: str | None = None):
        super().__init__(message or f"HTTP {status_code}")
        self.status_code = status_code
        self.message = message
        self.code = code


class ResponseDecodeError(PocketError):
    """The response body was not a valid URL-encoded query string."""


class EmptyResponseError(PocketError):
    """The response decoded fine but a required field was empty."""

    def __init__(self, field: str):
        super().__init__(f"empty {field} in API response")
        self.field = field
