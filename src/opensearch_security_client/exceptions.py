"""
Exception hierarchy for the OpenSearch security client.

The request path never raises these on its own: transport errors are
propagated unchanged. They are produced by ``Response.raise_for_status()``
when a caller opts into status-based error handling.
"""

from typing import Any, Dict, Optional


class SecurityClientError(Exception):
    """
    Base exception for all security client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if applicable)
        details: Additional error details from the response body
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.status_code:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code})"
        )


class ValidationError(SecurityClientError):
    """The cluster rejected the request payload or parameters."""

    def __init__(
        self,
        message: str = "Bad request",
        *,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


class AuthenticationError(SecurityClientError):
    """
    Authentication failed.

    Raised for a 401 from the cluster, usually missing or wrong credentials
    configured on the transport.
    """

    def __init__(
        self,
        message: str = "Authentication required",
        *,
        status_code: int = 401,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


class AuthorizationError(SecurityClientError):
    """
    Access denied.

    Managing role mappings requires the ``manage_security`` cluster
    privilege or an admin certificate.
    """

    def __init__(
        self,
        message: str = "Access denied",
        *,
        status_code: int = 403,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


class NotFoundError(SecurityClientError):
    """The requested role mapping does not exist."""

    def __init__(
        self,
        message: str = "Resource not found",
        *,
        status_code: int = 404,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


class ConflictError(SecurityClientError):
    """The role mapping is reserved, hidden or otherwise conflicting."""

    def __init__(
        self,
        message: str = "Conflict",
        *,
        status_code: int = 409,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


class RateLimitError(SecurityClientError):
    """Too many requests."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        status_code: int = 429,
        details: Optional[Dict[str, Any]] = None,
        retry_after: Optional[int] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)
        self.retry_after = retry_after


class ServerError(SecurityClientError):
    """The cluster failed to process the request (5xx)."""

    def __init__(
        self,
        message: str = "Internal server error",
        *,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


# Map HTTP status codes to exception classes
STATUS_CODE_EXCEPTIONS = {
    400: ValidationError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
}


def exception_from_response(
    status_code: int,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> SecurityClientError:
    """
    Create an appropriate exception from an HTTP status.

    Args:
        status_code: HTTP status code
        message: Error message
        details: Additional error details

    Returns:
        Appropriate SecurityClientError subclass
    """
    if 500 <= status_code < 600:
        exception_class = ServerError
    else:
        exception_class = STATUS_CODE_EXCEPTIONS.get(status_code, SecurityClientError)
    return exception_class(message, status_code=status_code, details=details)
