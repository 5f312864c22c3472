"""Exception hierarchy for the LinkedIn Groups client.

Every error raised by this package inherits from LinkedInError, so callers
can catch the whole family at once. HTTP failures are APIError subclasses
chosen by response status code.
"""

from typing import Optional, Dict, Any


class LinkedInError(Exception):
    """Base exception for all LinkedIn client errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class AuthenticationError(LinkedInError):
    """Raised when an access token cannot be obtained.

    Examples:
        - Empty static token
        - Credentials file missing or without a token
    """

    pass


class ConfigurationError(LinkedInError):
    """Raised when configuration is invalid or missing.

    Examples:
        - Non-integer timeout in the environment
        - Configuration file not found
        - Empty API base URL
    """

    pass


class APIError(LinkedInError):
    """Raised when an API request fails.

    Examples:
        - HTTP 4xx/5xx errors
        - Network timeouts
        - Invalid JSON in a response
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize API error with HTTP details.

        Args:
            message: Human-readable error message
            status_code: HTTP status code
            response_body: Raw response body
            details: Optional additional context
        """
        super().__init__(message, details)
        self.status_code = status_code
        self.response_body = response_body

    def __str__(self) -> str:
        """Return string representation including HTTP status."""
        base = self.message
        if self.status_code:
            base = f"[HTTP {self.status_code}] {base}"
        if self.response_body:
            base = f"{base}\nResponse: {self.response_body[:500]}"
        if self.details:
            base = f"{base}\nDetails: {self.details}"
        return base


class GeneralError(APIError):
    """HTTP 400: the request was malformed or rejected."""

    pass


class UnauthorizedError(APIError):
    """HTTP 401: the access token is missing, invalid or expired."""

    pass


class AccessDeniedError(APIError):
    """HTTP 403: the member lacks the permission for this resource."""

    pass


class NotFoundError(APIError):
    """HTTP 404: the person, group or post does not exist."""

    pass


class InformLinkedInError(APIError):
    """HTTP 500: LinkedIn failed internally."""

    pass


class UnavailableError(APIError):
    """HTTP 502/503/504: LinkedIn is temporarily unavailable."""

    pass


STATUS_ERRORS: Dict[int, type] = {
    400: GeneralError,
    401: UnauthorizedError,
    403: AccessDeniedError,
    404: NotFoundError,
    500: InformLinkedInError,
    502: UnavailableError,
    503: UnavailableError,
    504: UnavailableError,
}


def error_for_status(status_code: int) -> type:
    """Return the APIError subclass for an HTTP status code."""
    return STATUS_ERRORS.get(status_code, APIError)
