"""Error types for the ShipEngine client.

Everything the SDK raises on its own derives from ``ShipEngineError``.
Network failures from ``requests`` are not wrapped and reach the caller as-is.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorSeverity(Enum):
    """Error severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ShipEngineError(Exception):
    """Base exception class for the ShipEngine client."""

    def __init__(self, message: str, severity: ErrorSeverity = ErrorSeverity.MEDIUM):
        self.message = message
        self.severity = severity
        super().__init__(self.message)


class ConfigurationError(ShipEngineError):
    """Error raised when configuration is invalid."""
    pass


class ArgumentError(ShipEngineError, ValueError):
    """Raised when a caller passes arguments that cannot produce a valid request."""

    def __init__(self, message: str):
        super().__init__(message, severity=ErrorSeverity.LOW)


class ResponseProcessingError(ShipEngineError):
    """Raised when a response body does not have the expected shape."""

    def __init__(self, message: str):
        super().__init__(message, severity=ErrorSeverity.HIGH)


class APIError(ShipEngineError):
    """Base class for errors reported by the ShipEngine API."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        request_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(message, severity=ErrorSeverity.HIGH)
        self.status_code = status_code
        self.error_code = error_code
        self.request_id = request_id
        self.details = details or {}
        self.errors = errors or []

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (HTTP {self.status_code})"


class ValidationError(APIError):
    """Raised for validation errors (400 status codes)"""
    pass


class AuthenticationError(APIError):
    """Raised for authentication errors (401 status codes)"""
    pass


class AuthorizationError(APIError):
    """Raised for authorization errors (403 status codes)"""
    pass


class NotFoundError(APIError):
    """Raised for resource not found errors (404 status codes)"""
    pass


class ConflictError(APIError):
    """Raised for conflict errors (409 status codes)"""
    pass


class RateLimitError(APIError):
    """Raised for rate limit errors (429 status codes)"""
    pass


class ServerError(APIError):
    """Raised for server errors (5xx status codes)"""
    pass


class ServiceUnavailableError(ServerError):
    """Raised for service unavailable errors (503 status codes)"""
    pass
