"""Centralized exception hierarchy for the application.

All custom exceptions inherit from AppException, which provides:
- Consistent error response format
- HTTP status codes
- Machine-readable error codes
- Optional details dict for additional context

The crud layer raises these; exception handlers in main.py convert them
to JSON responses, and the API client raises them again from error
responses so callers see the same types on both sides of the wire.
"""

from typing import Any


class AppException(Exception):
    """Base exception for all application errors.

    Provides a consistent structure for error responses with:
    - message: Human-readable error description
    - error_code: Machine-readable code (e.g., "MODULE_NOT_FOUND")
    - status_code: HTTP status code
    - details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dict for JSON serialization."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(AppException):
    """Missing or malformed input (beyond Pydantic's automatic validation)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        if details is None:
            details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", 400, details)


class ResourceNotFoundError(AppException):
    """Requested resource does not exist."""

    def __init__(self, resource: str, identifier: str | None = None):
        msg = f"{resource} not found"
        if identifier:
            msg = f"{resource} not found: {identifier}"
        super().__init__(
            msg,
            f"{resource.upper().replace(' ', '_')}_NOT_FOUND",
            404,
            {"resource": resource, "id": identifier}
            if identifier
            else {"resource": resource},
        )


class ResourceExistsError(AppException):
    """Resource already exists (duplicate key, unique constraint violation)."""

    def __init__(self, resource: str, field: str | None = None):
        msg = f"{resource} already exists"
        if field:
            msg = f"{resource} with this {field} already exists"
        super().__init__(
            msg,
            f"{resource.upper().replace(' ', '_')}_EXISTS",
            409,
            {"resource": resource, "field": field} if field else {"resource": resource},
        )


class ConflictError(AppException):
    """Operation would break referential integrity or a state invariant."""

    def __init__(
        self,
        message: str,
        error_code: str = "CONFLICT",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, error_code, 409, details)


class UnexpectedError(AppException):
    """Persistence or other internal failure. The message stays opaque."""

    def __init__(self, message: str = "An unexpected error occurred"):
        super().__init__(message, "INTERNAL_ERROR", 500)


class ExternalServiceError(AppException):
    """External service (the translation API, from the client side) is unavailable."""

    def __init__(self, service: str, message: str | None = None):
        msg = f"{service} is unavailable"
        if message:
            msg = f"{service}: {message}"
        super().__init__(msg, "EXTERNAL_SERVICE_ERROR", 503, {"service": service})


class TimeoutError(AppException):
    """Operation timed out."""

    def __init__(self, operation: str, timeout_seconds: float | None = None):
        msg = f"{operation} timed out"
        if timeout_seconds:
            msg = f"{operation} timed out after {timeout_seconds}s"
        super().__init__(
            msg,
            "TIMEOUT",
            504,
            {"operation": operation, "timeout_seconds": timeout_seconds}
            if timeout_seconds
            else {"operation": operation},
        )


class RemoteApiError(AppException):
    """Error response returned by the translation API to the client."""

    @classmethod
    def from_payload(cls, status_code: int, payload: Any) -> "RemoteApiError":
        if isinstance(payload, dict):
            return cls(
                str(payload.get("message") or f"HTTP {status_code}"),
                str(payload.get("error_code") or "HTTP_ERROR"),
                status_code,
                payload.get("details") if isinstance(payload.get("details"), dict) else None,
            )
        return cls(f"HTTP {status_code}", "HTTP_ERROR", status_code)
