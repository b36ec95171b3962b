"""Custom exception classes for the application.

Defines domain-specific exceptions that can be raised throughout the
application and handled consistently by exception handlers.
"""

from typing import Optional, Any


class AppException(Exception):
    """Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional additional error context. Only sent to clients
            outside production.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Any] = None
    ):
        """Initialize application exception.

        Args:
            message: Error message.
            status_code: HTTP status code (default: 500).
            details: Optional string or dictionary with additional context.
        """
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class NotFoundError(AppException):
    """Exception raised when a requested resource is not found."""

    def __init__(self, message: str, resource: Optional[str] = None):
        """Initialize not found error.

        Args:
            message: Client-facing message (e.g. 'No meal plan found').
            resource: Optional type of resource that is missing.
        """
        details = {"resource": resource} if resource else None
        super().__init__(message, status_code=404, details=details)


class ValidationError(AppException):
    """Exception raised when input validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        """Initialize validation error.

        Args:
            message: Validation error message.
            field: Optional field name that failed validation.
        """
        details = {"field": field} if field else None
        super().__init__(message, status_code=400, details=details)


class AuthenticationError(AppException):
    """Exception raised when a route requires a signed-in viewer."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, status_code=401)


class DatabaseError(AppException):
    """Exception raised when database operations fail."""

    def __init__(self, message: str, details: Optional[Any] = None):
        """Initialize database error.

        Args:
            message: Client-facing error message.
            details: Underlying failure description.
        """
        super().__init__(message, status_code=500, details=details)


class ConfigurationError(AppException):
    """Exception raised when application configuration is invalid."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        """Initialize configuration error.

        Args:
            message: Configuration error message.
            config_key: Optional configuration key that is invalid.
        """
        details = {"config_key": config_key} if config_key else None
        super().__init__(message, status_code=500, details=details)


class CheckoutError(AppException):
    """Exception raised when a checkout session cannot be started.

    Used on both sides of `/api/check-out`: the backend raises it for
    rejected plans and processor failures, and the checkout client raises
    it with the message returned by the backend.
    """

    def __init__(self, message: str, status_code: int = 502, details: Optional[Any] = None):
        super().__init__(message, status_code=status_code, details=details)
