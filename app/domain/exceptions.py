"""Domain exceptions for the festival CMS.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class CMSException(Exception):
    """Base exception for all CMS application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the HTTP exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(CMSException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(CMSException):
    """Raised when authentication fails. Message is safe to show to the user."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(CMSException):
    """Raised when an authenticated identity is not on the admin allow-list."""

    def __init__(self, message: str = "Permission denied") -> None:
        super().__init__(message, "PERMISSION_DENIED")


class ResourceNotFoundException(CMSException):
    """Raised when a requested resource is not found."""

    def __init__(
        self, resource_type: str, resource_id: str, message: str | None = None
    ) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'registration', 'artist').
            resource_id: The ID that was not found.
            message: Optional user-facing message replacing the default.
        """
        super().__init__(
            message or f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ContentWriteException(CMSException):
    """Raised when a content write fails (network, permission, missing document).

    The caller keeps its unsaved form state; nothing was committed.
    """

    def __init__(self, content_id: str, reason: str) -> None:
        super().__init__(
            f"Failed to save {content_id}: {reason}",
            "CONTENT_WRITE_FAILED",
            {"content_id": content_id},
        )


class ServiceNotConfiguredException(CMSException):
    """Raised when an operation needs an integration whose configuration is absent."""

    def __init__(self, service: str, hint: str | None = None) -> None:
        message = f"{service} is not configured"
        if hint:
            message = f"{message} ({hint})"
        super().__init__(message, "SERVICE_NOT_CONFIGURED", {"service": service})


class EmailDeliveryException(CMSException):
    """Raised when the outbound e-mail provider rejects or fails a send."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"Failed to send e-mail notification: {reason}",
            "EMAIL_DELIVERY_FAILED",
        )


class IdentityProviderError(CMSException):
    """Authentication provider rejected a request.

    code is the bare provider code (EMAIL_EXISTS, INVALID_PASSWORD, ...).
    Never shown to users as-is; AuthService translates it.
    """

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(code, "IDENTITY_PROVIDER_ERROR", {"code": code})
