"""Custom exceptions for the Nylas SDK."""

from __future__ import annotations


class NylasError(Exception):
    """Base exception for all Nylas SDK errors."""


class InvalidArgumentError(NylasError):
    """Exception raised when a caller passes an unusable argument."""


class ConfigurationError(NylasError):
    """Exception raised when required credentials have not been configured."""


class TransportError(NylasError):
    """Exception raised when no response was received from the API server."""


class ResponseParseError(NylasError):
    """Exception raised when a response body cannot be decoded as JSON."""


class ApiError(NylasError):
    """Exception raised for non-2xx responses or error-shaped bodies.

    Attributes:
        message: Human readable error message, enriched with any
            ``missing_fields`` / ``server_error`` details from the body.
        status_code: HTTP status code of the response, when one was received.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def __str__(self) -> str:
        return self.message
