"""
Thoughts API — Custom Exception Hierarchy
===========================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Services raise domain errors; global handlers (registered in main.py)
       map them to HTTP status codes and a consistent JSON error body.
How:   Each exception class carries a message and optional context dict.

Exception Hierarchy:
    ThoughtsAPIError (base)
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── AuthenticationError      → 401 Unauthorized (missing/unknown token, bad login)
    ├── PermissionDeniedError    → 403 Forbidden (not the owner)
    ├── NotFoundError            → 404 Not Found
    ├── DatabaseError            → 500 Internal Server Error
    └── RateLimitExceededError   → 429 Too Many Requests
"""

from typing import Any, Dict, Optional


class ThoughtsAPIError(Exception):
    """
    Base exception for all Thoughts API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned for 5xx errors)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ThoughtsAPIError):
    """
    Raised when client input fails validation.

    When:    Message length out of range, malformed id, missing credentials,
             duplicate email, bad email format.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Message too short",
            "details": {"field": "message"}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class AuthenticationError(ThoughtsAPIError):
    """
    Raised when a request cannot be tied to a registered user.

    When:    No Authorization header, unknown access token, or a login whose
             email/password pair does not match.
    HTTP:    401 Unauthorized
    """

    def __init__(
        self,
        message: str = "Please log in to access this resource",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class PermissionDeniedError(ThoughtsAPIError):
    """
    Raised when an authenticated user touches a thought they do not own.

    HTTP:    403 Forbidden
    """

    def __init__(
        self,
        message: str = "You are not allowed to modify this resource",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(ThoughtsAPIError):
    """
    Raised when a requested resource does not exist.

    SQLAlchemy returns None for missing rows; services convert that into this
    exception so the global handler can answer with 404.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(ThoughtsAPIError):
    """
    Raised when database operations fail unexpectedly.

    Security Note:
        The message returned to the client is always generic.
        Detailed error info is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RateLimitExceededError(ThoughtsAPIError):
    """
    Raised when a client exceeds the per-IP request rate limit.

    HTTP:    429 Too Many Requests (with Retry-After header)
    """

    def __init__(
        self,
        retry_after: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Rate limit exceeded. Please wait {retry_after} seconds before making more requests."
        )
        ctx = context or {}
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after
